from sqlalchemy.exc import IntegrityError

from src.libs.result import Error

# Error.code -> integer error_code carried in every response body
WIRE_CODES = {
    "VALIDATION_FAILED": 510,
    "NOT_FOUND": 404,
    "STORAGE_FAILURE": 500,
    "WRITE_FAILURE": 501,
    "UNAUTHORIZED": 401,
    "TOKEN_EXPIRED": 498,
}


def wire_code(error: Error) -> int:
    return WIRE_CODES.get(error.code, WIRE_CODES["STORAGE_FAILURE"])


def is_client_error(code: int) -> bool:
    return code in (401, 404, 498, 510)


def storage_error(exc: Exception) -> Error:
    """Convert a driver or bind exception into WRITE_FAILURE or STORAGE_FAILURE"""
    message = str(getattr(exc, "orig", None) or exc)
    if isinstance(exc, IntegrityError):
        return Error("WRITE_FAILURE", message)
    return Error("STORAGE_FAILURE", message)
