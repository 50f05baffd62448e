from __future__ import annotations

import re

from .data_store import BUDGET_BUCKETS
from .models import Industry, Profile, ProfileRequest
from .retrieval import WILDCARD_INDUSTRIES

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\+?[1-9]\d{9,14}$")

_REQUIRED_FIELDS = ("name", "email", "phone", "city", "budget", "industry")

# Error category for a field sent with the wrong JSON type.
_TYPE_ERRORS = {
    "name": ("invalid_name", "Invalid name", "Name must be text"),
    "email": ("invalid_email", "Invalid email format", "Please enter a valid email address"),
    "phone": ("invalid_phone", "Invalid phone format", "Please enter a valid phone number"),
    "city": ("invalid_city", "Invalid city", "City must be text"),
    "budget": ("invalid_budget", "Invalid budget range", "Budget must be one of the listed ranges"),
    "industry": ("invalid_industry", "Invalid industry", "Industry must be one of the listed industries"),
}


class ProfileValidationError(Exception):
    """A profile field is missing or malformed."""

    def __init__(self, code: str, error: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.error = error
        self.message = message


def _text(field: str, value: object) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ProfileValidationError(*_TYPE_ERRORS[field])
    return value.strip()


def validate_profile(body: ProfileRequest) -> Profile:
    """Check every profile field and return a clean ``Profile``, or raise."""
    values = {f: _text(f, getattr(body, f)) for f in _REQUIRED_FIELDS}

    missing = [f for f, v in values.items() if not v]
    if missing:
        raise ProfileValidationError(
            "missing_fields",
            "Missing required fields",
            "Please fill in all required fields: " + ", ".join(missing),
        )

    if not EMAIL_RE.match(values["email"]):
        raise ProfileValidationError(
            "invalid_email",
            "Invalid email format",
            "Please enter a valid email address",
        )

    if not PHONE_RE.match(values["phone"]):
        raise ProfileValidationError(
            "invalid_phone",
            "Invalid phone format",
            "Please enter a valid phone number",
        )

    if values["budget"] not in BUDGET_BUCKETS:
        raise ProfileValidationError(
            "invalid_budget",
            "Invalid budget range",
            "Please choose one of: " + ", ".join(BUDGET_BUCKETS),
        )

    allowed = [i.value for i in Industry] + list(WILDCARD_INDUSTRIES)
    if values["industry"] not in allowed:
        raise ProfileValidationError(
            "invalid_industry",
            "Invalid industry",
            "Please choose one of: " + ", ".join(allowed),
        )

    return Profile(**values)
