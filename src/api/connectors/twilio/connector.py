"""Conectores Twilio registráveis no ChannelRegistry."""

from __future__ import annotations

from api.connectors.twilio.schemas import twilio_sms_schema, twilio_whatsapp_schema
from app.connectors import TransportChannelConnector
from app.registry import channel_schema_factory


@channel_schema_factory(twilio_sms_schema)
class TwilioSmsConnector(TransportChannelConnector):
    """SMS via Twilio Messaging API."""


@channel_schema_factory(twilio_whatsapp_schema)
class TwilioWhatsAppConnector(TransportChannelConnector):
    """WhatsApp Business via Twilio."""
