"""Validadores de números de telefone para SMS e WhatsApp."""

from __future__ import annotations

import re

from channel_schema.types.errors import ValidationError
from channel_schema.types.values import PropertyValue

E164_PATTERN = re.compile(r"\+[1-9][0-9]{1,14}")
WHATSAPP_PATTERN = re.compile(r"whatsapp:\+[1-9][0-9]{1,14}")

# Limite de corpo de SMS concatenado aceito pela Twilio
MAX_SMS_BODY_LENGTH = 1600


def validate_e164_recipient(value: PropertyValue) -> list[ValidationError]:
    """Valida número de destino em formato E.164 (ex: +5511999999999)."""
    if not isinstance(value, str) or E164_PATTERN.fullmatch(value):
        return []
    return [ValidationError.for_member("To must be a phone number in E.164 format", "To")]


def validate_e164_sender(value: PropertyValue) -> list[ValidationError]:
    """Valida número de origem em formato E.164."""
    if not isinstance(value, str) or E164_PATTERN.fullmatch(value):
        return []
    return [
        ValidationError.for_member(
            "FromNumber must be a phone number in E.164 format", "FromNumber"
        )
    ]


def validate_whatsapp_recipient(value: PropertyValue) -> list[ValidationError]:
    """Valida destino WhatsApp no formato whatsapp:+<E.164>."""
    if not isinstance(value, str) or WHATSAPP_PATTERN.fullmatch(value):
        return []
    return [
        ValidationError.for_member(
            "To must be a WhatsApp address in the format whatsapp:+<E.164 number>", "To"
        )
    ]


def validate_whatsapp_sender(value: PropertyValue) -> list[ValidationError]:
    """Valida remetente WhatsApp no formato whatsapp:+<E.164>."""
    if not isinstance(value, str) or WHATSAPP_PATTERN.fullmatch(value):
        return []
    return [
        ValidationError.for_member(
            "FromNumber must be a WhatsApp address in the format whatsapp:+<E.164 number>",
            "FromNumber",
        )
    ]
