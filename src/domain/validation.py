"""
Domain validation rules.

Each rule is a small function returning ``Result[None]``; ``first_error``
runs a sequence of rules and stops at the first failure, so callers get the
earliest violated rule without exceptions driving the control flow.
"""

from typing import Callable, Iterable, Mapping, Optional

from email_validator import EmailNotValidError, validate_email

from src.domain.entities import TaskStatus
from src.libs.result import Error, Result, Return

VALIDATION_ERROR = "VALIDATION_ERROR"

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 26
# bcrypt only looks at the first 72 bytes and newer releases refuse longer input
BCRYPT_MAX_PASSWORD_BYTES = 72
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

Rule = Callable[[], Result[None]]


def _invalid(message: str) -> Result[None]:
    return Return.err(Error(VALIDATION_ERROR, message))


def first_error(rules: Iterable[Rule]) -> Result[None]:
    """Run rules in order and return the first failing result"""
    for rule in rules:
        result = rule()
        if result.is_err():
            return result
    return Return.ok(None)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def require_fields(values: Mapping[str, Optional[str]]) -> Result[None]:
    for field, value in values.items():
        if value is None or not value.strip():
            return _invalid(f"{field} is required")
    return Return.ok(None)


def check_length(
    field: str, value: str, min_length: int = 1, max_length: Optional[int] = None
) -> Result[None]:
    """Length check on the trimmed value"""
    length = len(value.strip())
    if length < min_length:
        if min_length == 1:
            return _invalid(f"{field} is required")
        return _invalid(f"{field} must be at least {min_length} characters long")
    if max_length is not None and length > max_length:
        return _invalid(f"{field} must be at most {max_length} characters long")
    return Return.ok(None)


def check_name(field: str, value: Optional[str]) -> Result[None]:
    if value is None:
        return _invalid(f"{field} is required")
    return check_length(field, value, NAME_MIN_LENGTH, NAME_MAX_LENGTH)


def check_email(email: str) -> Result[None]:
    try:
        validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return _invalid("email must be a valid email")
    return Return.ok(None)


def check_password_complexity(password: str) -> Result[None]:
    """
    Password policy: 8-26 characters and at most 72 UTF-8 bytes, with at
    least one lowercase letter, one uppercase letter, one digit and one
    symbol.
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        return _invalid(
            f"password must be at least {PASSWORD_MIN_LENGTH} characters long"
        )
    if len(password) > PASSWORD_MAX_LENGTH:
        return _invalid(
            f"password must be at most {PASSWORD_MAX_LENGTH} characters long"
        )
    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        return _invalid(
            f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes long"
        )
    if not any(c.islower() for c in password):
        return _invalid("password must contain at least 1 lower-cased letter")
    if not any(c.isupper() for c in password):
        return _invalid("password must contain at least 1 upper-cased letter")
    if not any(c.isdigit() for c in password):
        return _invalid("password must contain at least 1 number")
    if not any(not c.isalnum() for c in password):
        return _invalid("password must contain at least 1 symbol")
    return Return.ok(None)


def check_task_status(status: str) -> Result[None]:
    if status not in TaskStatus.values():
        return _invalid(
            "status must be one of: " + ", ".join(TaskStatus.values())
        )
    return Return.ok(None)


def check_title(title: Optional[str]) -> Result[None]:
    if title is None:
        return _invalid("title is required")
    return check_length("title", title, max_length=TITLE_MAX_LENGTH)


def check_description(description: Optional[str]) -> Result[None]:
    if description is None:
        return _invalid("description is required")
    return check_length(
        "description", description, max_length=DESCRIPTION_MAX_LENGTH
    )
