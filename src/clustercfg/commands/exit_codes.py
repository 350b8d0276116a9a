"""Process exit codes, one per failure kind.

2 is left to Click for usage errors.
"""

SUCCESS: int = 0
UNEXPECTED_ERROR: int = 1
IO_ERROR: int = 3
PARSE_ERROR: int = 4
CONFIG_ERROR: int = 5

# ServiceError.code -> exit code
BY_ERROR_CODE: dict[str, int] = {
    "IO_FAILURE": IO_ERROR,
    "PARSE_FAILURE": PARSE_ERROR,
    "INVALID_GROUP": CONFIG_ERROR,
    "CONFIG_ERROR": CONFIG_ERROR,
}


def exit_code_for(error_code: str | None) -> int:
    """Exit code for a ServiceError code; unknown codes map to 1."""
    if error_code is None:
        return UNEXPECTED_ERROR
    return BY_ERROR_CODE.get(error_code, UNEXPECTED_ERROR)
