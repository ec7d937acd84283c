"""Validators para push notifications (Firebase Cloud Messaging)."""

from api.validators.push.notification import (
    HEX_COLOR_PATTERN,
    MAX_CONDITION_LENGTH,
    MAX_TIME_TO_LIVE,
    MAX_TITLE_LENGTH,
    TOPIC_PATTERN,
    is_valid_topic,
    validate_condition_expression,
    validate_hex_color,
    validate_image_url,
)

__all__ = [
    "HEX_COLOR_PATTERN",
    "MAX_CONDITION_LENGTH",
    "MAX_TIME_TO_LIVE",
    "MAX_TITLE_LENGTH",
    "TOPIC_PATTERN",
    "is_valid_topic",
    "validate_condition_expression",
    "validate_hex_color",
    "validate_image_url",
]
