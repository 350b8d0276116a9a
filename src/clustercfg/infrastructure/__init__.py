"""Infrastructure layer — filesystem access.

The service layer bridges between domain models and infrastructure.
"""
