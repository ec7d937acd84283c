"""Twilio: schemas de SMS/WhatsApp e conectores."""

from api.connectors.twilio.connector import TwilioSmsConnector, TwilioWhatsAppConnector
from api.connectors.twilio.schemas import (
    PROVIDER,
    SMS_CHANNEL,
    WHATSAPP_CHANNEL,
    bulk_sms_schema,
    notification_sms_schema,
    simple_sms_schema,
    simple_whatsapp_schema,
    twilio_sms_schema,
    twilio_whatsapp_schema,
    whatsapp_templates_schema,
)

__all__ = [
    "PROVIDER",
    "SMS_CHANNEL",
    "WHATSAPP_CHANNEL",
    "TwilioSmsConnector",
    "TwilioWhatsAppConnector",
    "bulk_sms_schema",
    "notification_sms_schema",
    "simple_sms_schema",
    "simple_whatsapp_schema",
    "twilio_sms_schema",
    "twilio_whatsapp_schema",
    "whatsapp_templates_schema",
]
