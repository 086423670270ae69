"""
Input validation shared by the create/update use cases.

Each check returns None when the value is acceptable, or the Error to hand
back to the caller. Nothing here touches storage.
"""

import re
from decimal import Decimal
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from src.libs.result import Error

NAME_PATTERN = re.compile(r"^[a-z0-9_\-]{1,32}$")

MIN_PRIORITY = 1
MAX_PRIORITY = 9


def invalid(message: str) -> Error:
    return Error("VALIDATION_FAILED", message)


def check_name(value: str, field: str = "name") -> Optional[Error]:
    if not NAME_PATTERN.fullmatch(value or ""):
        return invalid(f"{field} invalid format")
    return None


def check_description(value: str) -> Optional[Error]:
    if not (value or "").strip():
        return invalid("description missing")
    return None


def check_priority(value: int) -> Optional[Error]:
    if not MIN_PRIORITY <= value <= MAX_PRIORITY:
        return invalid("priority out of range")
    return None


def check_position(value: int) -> Optional[Error]:
    if value < 1:
        return invalid("position out of range")
    return None


def check_member_name(value: str) -> Optional[Error]:
    if not (value or "").strip():
        return invalid("name missing")
    return None


def check_email(value: str) -> Optional[Error]:
    if not (value or "").strip():
        return invalid("email missing")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return invalid("email invalid format")
    return None


def check_hours(value: Decimal) -> Optional[Error]:
    if value < 0:
        return invalid("task_hours must not be negative")
    return None


def first_error(*errors: Optional[Error]) -> Optional[Error]:
    """Return the first failed check in argument order"""
    for error in errors:
        if error is not None:
            return error
    return None
