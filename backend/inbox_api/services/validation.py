"""Query-string validation for the mails list: present params must be numeric strings."""

import re

from inbox_api.core.errors import ValidationError
from inbox_api.schemas.pagination import PaginationParams

# Optional sign, optional decimal part; "5.5" and "-1" pass here, range checks happen after parsing
NUMERIC_STRING = re.compile(r"[+-]?([0-9]*\.)?[0-9]+")

PAGINATION_FIELDS = ("take", "skip")


def is_numeric_string(value: str) -> bool:
    return NUMERIC_STRING.fullmatch(value) is not None


def validate_pagination_params(params: PaginationParams) -> list[str]:
    """Return one message per present field that is not a numeric string (empty list = valid)."""
    messages = []
    for field in PAGINATION_FIELDS:
        value = getattr(params, field)
        if value is not None and not is_numeric_string(value):
            messages.append(f"{field} must be a valid number")
    return messages


def check_pagination_params(params: PaginationParams) -> ValidationError | None:
    messages = validate_pagination_params(params)
    return ValidationError(messages) if messages else None
