"""Validadores de propriedades de push notification (FCM)."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from channel_schema.types.errors import ValidationError
from channel_schema.types.values import PropertyValue

HEX_COLOR_PATTERN = re.compile(r"#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")
TOPIC_PATTERN = re.compile(r"[a-zA-Z0-9\-_.~%]{1,900}")
QUOTED_TOPIC_PATTERN = re.compile(r"'([^']*)'")

MAX_TITLE_LENGTH = 256
MAX_TIME_TO_LIVE = 2_419_200  # 4 semanas
MAX_CONDITION_LENGTH = 1000


def validate_image_url(value: PropertyValue) -> list[ValidationError]:
    """URL absoluta http/https."""
    if not isinstance(value, str):
        return []
    parsed = urlparse(value)
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return []
    return [
        ValidationError.for_member("ImageUrl must be a valid HTTP or HTTPS URL", "ImageUrl")
    ]


def validate_hex_color(value: PropertyValue) -> list[ValidationError]:
    """Cor #rrggbb ou #aarrggbb."""
    if not isinstance(value, str) or HEX_COLOR_PATTERN.fullmatch(value):
        return []
    return [
        ValidationError.for_member(
            "Color must be in hexadecimal format (#rrggbb or #aarrggbb)", "Color"
        )
    ]


def is_valid_topic(topic: str) -> bool:
    """Nome de tópico FCM (aceita o prefixo /topics/)."""
    return TOPIC_PATTERN.fullmatch(topic.removeprefix("/topics/")) is not None


def validate_condition_expression(value: PropertyValue) -> list[ValidationError]:
    """
    Condição FCM: tópicos entre aspas simples combinados por && e ||.

    Ex: "'news' in topics && ('br' in topics || 'pt' in topics)"
    """
    if not isinstance(value, str):
        return []

    member = "ConditionExpression"
    if len(value) > MAX_CONDITION_LENGTH:
        return [
            ValidationError.for_member(
                f"Condition expression cannot exceed {MAX_CONDITION_LENGTH} characters", member
            )
        ]

    topics = QUOTED_TOPIC_PATTERN.findall(value)
    if not topics:
        return [
            ValidationError.for_member(
                "Condition expression must reference topics in single quotes", member
            )
        ]

    invalid = sorted(topic for topic in set(topics) if not is_valid_topic(topic))
    if invalid:
        return [
            ValidationError.for_member(
                f"Condition expression has invalid topic names: {', '.join(invalid)}", member
            )
        ]
    return []
