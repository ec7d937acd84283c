"""Validators para Email (SendGrid)."""

from api.validators.email.content import (
    MAX_CATEGORIES,
    MAX_CATEGORY_LENGTH,
    MAX_SCHEDULE_AHEAD,
    parse_send_at,
    validate_categories,
    validate_send_at,
    validate_subject,
)

__all__ = [
    "MAX_CATEGORIES",
    "MAX_CATEGORY_LENGTH",
    "MAX_SCHEDULE_AHEAD",
    "parse_send_at",
    "validate_categories",
    "validate_send_at",
    "validate_subject",
]
