"""Validators para SMS e WhatsApp (Twilio)."""

from api.validators.sms.phone import (
    E164_PATTERN,
    MAX_SMS_BODY_LENGTH,
    WHATSAPP_PATTERN,
    validate_e164_recipient,
    validate_e164_sender,
    validate_whatsapp_recipient,
    validate_whatsapp_sender,
)

__all__ = [
    "E164_PATTERN",
    "MAX_SMS_BODY_LENGTH",
    "WHATSAPP_PATTERN",
    "validate_e164_recipient",
    "validate_e164_sender",
    "validate_whatsapp_recipient",
    "validate_whatsapp_sender",
]
