"""Schemas master da Twilio (SMS e WhatsApp) e variantes derivadas.

Variantes são obtidas apenas por remoção/estreitamento do master,
portanto são restrições válidas dele.
"""

from __future__ import annotations

from functools import lru_cache

from api.validators.sms import (
    MAX_SMS_BODY_LENGTH,
    validate_e164_recipient,
    validate_e164_sender,
    validate_whatsapp_recipient,
    validate_whatsapp_sender,
)
from api.validators.shared import json_validator
from channel_schema import (
    AuthenticationType,
    ChannelCapability,
    ChannelSchema,
    DataType,
    EndpointType,
    MessageContentType,
    derive_from,
    new_schema,
)

PROVIDER = "Twilio"
SMS_CHANNEL = "SMS"
WHATSAPP_CHANNEL = "WhatsApp"
SCHEMA_VERSION = "1.0.0"

# 4 horas na fila de saída da Twilio
DEFAULT_VALIDITY_PERIOD = 14400
MAX_VALIDITY_PERIOD = 36000


@lru_cache(maxsize=1)
def twilio_sms_schema() -> ChannelSchema:
    """Schema master de SMS da Twilio."""
    return (
        new_schema(PROVIDER, SMS_CHANNEL, SCHEMA_VERSION, display_name="Twilio SMS Connector")
        .with_capabilities(
            ChannelCapability.SEND_MESSAGES
            | ChannelCapability.RECEIVE_MESSAGES
            | ChannelCapability.MESSAGE_STATUS_QUERY
            | ChannelCapability.BULK_MESSAGING
            | ChannelCapability.HEALTH_CHECK
        )
        .add_required_parameter(
            "AccountSid",
            DataType.STRING,
            pattern=r"AC[0-9a-fA-F]{32}",
            description="Account SID do Console da Twilio",
        )
        .add_required_parameter(
            "AuthToken",
            DataType.STRING,
            sensitive=True,
            description="Auth Token do Console da Twilio",
        )
        .add_parameter(
            "FromNumber",
            DataType.STRING,
            custom_validator=validate_e164_sender,
            description="Número remetente E.164; opcional quando há MessagingServiceSid",
        )
        .add_parameter("WebhookUrl", DataType.STRING, description="URL de webhooks")
        .add_parameter("StatusCallback", DataType.STRING, description="URL de status de entrega")
        .add_parameter(
            "ValidityPeriod",
            DataType.INTEGER,
            default_value=DEFAULT_VALIDITY_PERIOD,
            min_value=1,
            max_value=MAX_VALIDITY_PERIOD,
            description="Segundos que a mensagem pode aguardar na fila",
        )
        .add_parameter("MaxPrice", DataType.NUMBER, min_value=0, description="Preço máximo em USD")
        .add_parameter("MessagingServiceSid", DataType.STRING, description="Messaging Service SID")
        .add_content_type(MessageContentType.PLAIN_TEXT)
        .add_content_type(MessageContentType.MEDIA)
        .add_endpoint(EndpointType.PHONE_NUMBER)
        .add_endpoint(EndpointType.URL, can_send=False)
        .add_authentication_type(AuthenticationType.BASIC)
        .add_message_property(
            "To",
            DataType.STRING,
            is_required=True,
            custom_validator=validate_e164_recipient,
            description="Número de destino E.164",
        )
        .add_message_property(
            "Body",
            DataType.STRING,
            max_length=MAX_SMS_BODY_LENGTH,
            description="Texto da mensagem",
        )
        .add_message_property("MediaUrl", DataType.STRING, description="URL de mídia")
        .add_message_property(
            "ValidityPeriod",
            DataType.INTEGER,
            min_value=1,
            max_value=MAX_VALIDITY_PERIOD,
            description="Override do período de validade",
        )
        .add_message_property("MaxPrice", DataType.NUMBER, min_value=0)
        .add_message_property("ProvideCallback", DataType.BOOLEAN)
        .add_message_property("AttemptLimits", DataType.INTEGER, min_value=1)
        .add_message_property("SmartEncoded", DataType.BOOLEAN)
        .add_message_property("PersistentAction", DataType.STRING)
        .build()
    )


@lru_cache(maxsize=1)
def twilio_whatsapp_schema() -> ChannelSchema:
    """Schema master de WhatsApp Business da Twilio."""
    return (
        new_schema(
            PROVIDER,
            WHATSAPP_CHANNEL,
            SCHEMA_VERSION,
            display_name="Twilio WhatsApp Business API Connector",
        )
        .with_capabilities(
            ChannelCapability.SEND_MESSAGES
            | ChannelCapability.RECEIVE_MESSAGES
            | ChannelCapability.MESSAGE_STATUS_QUERY
            | ChannelCapability.TEMPLATES
            | ChannelCapability.MEDIA_ATTACHMENTS
            | ChannelCapability.HEALTH_CHECK
        )
        .add_required_parameter("AccountSid", DataType.STRING, pattern=r"AC[0-9a-fA-F]{32}")
        .add_required_parameter("AuthToken", DataType.STRING, sensitive=True)
        .add_required_parameter(
            "FromNumber",
            DataType.STRING,
            custom_validator=validate_whatsapp_sender,
            description="Número WhatsApp Business (whatsapp:+<E.164>)",
        )
        .add_parameter("WebhookUrl", DataType.STRING)
        .add_parameter("StatusCallback", DataType.STRING)
        .add_parameter("ContentSid", DataType.STRING, description="Content SID de template")
        .add_parameter(
            "ContentVariables",
            DataType.STRING,
            custom_validator=json_validator("ContentVariables", dict),
        )
        .add_content_type(MessageContentType.PLAIN_TEXT)
        .add_content_type(MessageContentType.MEDIA)
        .add_content_type(MessageContentType.TEMPLATE)
        .add_endpoint(EndpointType.PHONE_NUMBER)
        .add_endpoint(EndpointType.URL, can_send=False)
        .add_authentication_type(AuthenticationType.BASIC)
        .add_message_property(
            "To",
            DataType.STRING,
            is_required=True,
            custom_validator=validate_whatsapp_recipient,
        )
        .add_message_property("Body", DataType.STRING)
        .add_message_property("MediaUrl", DataType.STRING)
        .add_message_property("ContentSid", DataType.STRING)
        .add_message_property(
            "ContentVariables",
            DataType.STRING,
            custom_validator=json_validator("ContentVariables", dict),
        )
        .add_message_property("ProvideCallback", DataType.BOOLEAN)
        .add_message_property("PersistentAction", DataType.STRING)
        .build()
    )


@lru_cache(maxsize=1)
def simple_sms_schema() -> ChannelSchema:
    """SMS só de envio, sem webhooks nem mídia; FromNumber obrigatório."""
    return (
        derive_from(twilio_sms_schema(), "Twilio Simple SMS")
        .remove_capability(ChannelCapability.RECEIVE_MESSAGES)
        .remove_capability(ChannelCapability.BULK_MESSAGING)
        .remove_parameter("WebhookUrl")
        .remove_parameter("StatusCallback")
        .remove_parameter("MessagingServiceSid")
        .update_parameter("FromNumber", is_required=True)
        .remove_content_type(MessageContentType.MEDIA)
        .remove_message_property("MediaUrl")
        .remove_message_property("ProvideCallback")
        .remove_message_property("PersistentAction")
        .remove_message_property("SmartEncoded")
        .build()
    )


@lru_cache(maxsize=1)
def notification_sms_schema() -> ChannelSchema:
    """SMS de notificação: envio com status de entrega, sem recebimento."""
    return (
        derive_from(twilio_sms_schema(), "Twilio Notification SMS")
        .remove_capability(ChannelCapability.RECEIVE_MESSAGES)
        .remove_parameter("WebhookUrl")
        .remove_content_type(MessageContentType.MEDIA)
        .remove_message_property("MediaUrl")
        .remove_message_property("PersistentAction")
        .build()
    )


@lru_cache(maxsize=1)
def bulk_sms_schema() -> ChannelSchema:
    """SMS em massa via Messaging Service (que escolhe o remetente)."""
    return (
        derive_from(twilio_sms_schema(), "Twilio Bulk SMS")
        .remove_capability(ChannelCapability.RECEIVE_MESSAGES)
        .update_parameter("MessagingServiceSid", is_required=True)
        .remove_parameter("FromNumber")
        .remove_message_property("PersistentAction")
        .build()
    )


@lru_cache(maxsize=1)
def simple_whatsapp_schema() -> ChannelSchema:
    """WhatsApp de texto/mídia sem templates nem webhooks."""
    return (
        derive_from(twilio_whatsapp_schema(), "Twilio Simple WhatsApp")
        .remove_capability(ChannelCapability.RECEIVE_MESSAGES)
        .remove_capability(ChannelCapability.TEMPLATES)
        .remove_parameter("WebhookUrl")
        .remove_parameter("StatusCallback")
        .remove_parameter("ContentSid")
        .remove_parameter("ContentVariables")
        .remove_content_type(MessageContentType.TEMPLATE)
        .remove_message_property("ContentSid")
        .remove_message_property("ContentVariables")
        .remove_message_property("ProvideCallback")
        .remove_message_property("PersistentAction")
        .build()
    )


@lru_cache(maxsize=1)
def whatsapp_templates_schema() -> ChannelSchema:
    """WhatsApp restrito a templates aprovados (ContentSid obrigatório)."""
    return (
        derive_from(twilio_whatsapp_schema(), "Twilio WhatsApp Templates")
        .remove_capability(ChannelCapability.RECEIVE_MESSAGES)
        .remove_capability(ChannelCapability.MEDIA_ATTACHMENTS)
        .update_parameter("ContentSid", is_required=True)
        .remove_content_type(MessageContentType.MEDIA)
        .remove_message_property("MediaUrl")
        .build()
    )
