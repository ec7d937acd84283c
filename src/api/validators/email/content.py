"""Validadores de propriedades de email (SendGrid)."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from channel_schema.types.errors import ValidationError
from channel_schema.types.values import PropertyValue

MAX_CATEGORIES = 10
MAX_CATEGORY_LENGTH = 255

# Janela máxima de agendamento aceita pelo SendGrid
MAX_SCHEDULE_AHEAD = timedelta(hours=72)


def validate_subject(value: PropertyValue) -> list[ValidationError]:
    """Assunto não pode ser só espaços."""
    if isinstance(value, str) and not value.strip():
        return [ValidationError.for_member("Subject cannot be empty", "Subject")]
    return []


def validate_categories(value: PropertyValue) -> list[ValidationError]:
    """Lista separada por vírgula: no máximo 10 categorias de até 255 caracteres."""
    if not isinstance(value, str):
        return []

    categories = [item.strip() for item in value.split(",") if item.strip()]
    errors: list[ValidationError] = []

    if len(categories) > MAX_CATEGORIES:
        errors.append(
            ValidationError.for_member(
                f"Cannot specify more than {MAX_CATEGORIES} categories", "Categories"
            )
        )
    if any(len(category) > MAX_CATEGORY_LENGTH for category in categories):
        errors.append(
            ValidationError.for_member(
                f"Category name cannot exceed {MAX_CATEGORY_LENGTH} characters", "Categories"
            )
        )
    return errors


def parse_send_at(value: str) -> datetime | None:
    """Interpreta data ISO-8601; sem fuso é tratada como UTC."""
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def validate_send_at(value: PropertyValue) -> list[ValidationError]:
    """Agendamento ISO-8601 no futuro e dentro de 72 horas."""
    if not isinstance(value, str):
        return []

    send_at = parse_send_at(value)
    if send_at is None:
        return [
            ValidationError.for_member(
                "SendAt must be a valid ISO 8601 date and time", "SendAt"
            )
        ]

    now = datetime.now(UTC)
    if send_at <= now:
        return [ValidationError.for_member("SendAt must be in the future", "SendAt")]
    if send_at - now > MAX_SCHEDULE_AHEAD:
        return [
            ValidationError.for_member(
                "SendAt cannot be more than 72 hours in the future", "SendAt"
            )
        ]
    return []
