# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Semantic validation for employee creation, applied before the store is touched.
"""

import re

from app.models.domain import EmployeeCreationInput

MIN_AGE = 16
MAX_AGE = 75
EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9_-]+(\.[A-Za-z0-9_-]+)*@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*$"
)


class EmployeeValidationError(ValueError):
    """Creation input failed a business rule."""


def is_email(value: str | None) -> bool:
    if value is None or not value.strip():
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


def validate_creation_input(payload: EmployeeCreationInput) -> None:
    """Raise EmployeeValidationError naming the first rule that fails."""
    if payload.salary <= 0:
        raise EmployeeValidationError("Invalid salary")
    if payload.age < MIN_AGE or payload.age > MAX_AGE:
        raise EmployeeValidationError(
            f"Age is out of valid range (min={MIN_AGE}, max={MAX_AGE})"
        )
    if not is_email(payload.email):
        raise EmployeeValidationError("Invalid email address provided")
