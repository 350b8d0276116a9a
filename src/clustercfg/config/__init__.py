"""Runtime settings and logging setup."""
