"""Input checks shared by the use-case handlers.

The entities themselves accept any values; these checks are applied
before anything reaches a repository.
"""

from __future__ import annotations

import re

from stockwise.domain.exceptions import ValidationError

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_text(value: str | None, label: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def require_non_negative(value: int | float, label: str) -> None:
    if value < 0:
        raise ValidationError(f"{label} cannot be negative, got {value}")


def require_positive(value: int, label: str) -> None:
    if value <= 0:
        raise ValidationError(f"{label} must be positive")


def require_email(value: str | None) -> str:
    email = require_text(value, "Email")
    if not _EMAIL_PATTERN.match(email):
        raise ValidationError(f"Invalid email address: {email!r}")
    return email
