"""Schema master do SendGrid (email) e variantes derivadas."""

from __future__ import annotations

from functools import lru_cache

from api.validators.email import validate_categories, validate_send_at, validate_subject
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

PROVIDER = "SendGrid"
EMAIL_CHANNEL = "Email"
SCHEMA_VERSION = "1.0.0"

# Limite de linha do RFC 2822
MAX_SUBJECT_LENGTH = 998


@lru_cache(maxsize=1)
def sendgrid_email_schema() -> ChannelSchema:
    """Schema master de email do SendGrid."""
    return (
        new_schema(PROVIDER, EMAIL_CHANNEL, SCHEMA_VERSION, display_name="SendGrid Email Connector")
        .with_capabilities(
            ChannelCapability.SEND_MESSAGES
            | ChannelCapability.RECEIVE_MESSAGES
            | ChannelCapability.MESSAGE_STATUS_QUERY
            | ChannelCapability.HANDLE_MESSAGE_STATE
            | ChannelCapability.BULK_MESSAGING
            | ChannelCapability.TEMPLATES
            | ChannelCapability.MEDIA_ATTACHMENTS
            | ChannelCapability.HEALTH_CHECK
        )
        .add_required_parameter(
            "ApiKey",
            DataType.STRING,
            sensitive=True,
            description="API Key do SendGrid (Settings > API Keys)",
        )
        .add_parameter("SandboxMode", DataType.BOOLEAN, default_value=False)
        .add_parameter("WebhookUrl", DataType.STRING)
        .add_parameter("TrackingSettings", DataType.BOOLEAN, default_value=True)
        .add_parameter("DefaultFromName", DataType.STRING)
        .add_parameter("DefaultReplyTo", DataType.STRING)
        .add_content_type(MessageContentType.PLAIN_TEXT)
        .add_content_type(MessageContentType.HTML)
        .add_content_type(MessageContentType.TEMPLATE)
        .add_content_type(MessageContentType.MULTIPART)
        .add_endpoint(EndpointType.EMAIL_ADDRESS, is_required=True)
        .add_endpoint(EndpointType.URL, can_send=False)
        .add_authentication_type(AuthenticationType.API_KEY)
        .add_message_property(
            "Subject",
            DataType.STRING,
            is_required=True,
            max_length=MAX_SUBJECT_LENGTH,
            custom_validator=validate_subject,
        )
        .add_message_property(
            "Priority",
            DataType.STRING,
            allowed_values=("low", "normal", "high"),
        )
        .add_message_property("Categories", DataType.STRING, custom_validator=validate_categories)
        .add_message_property(
            "CustomArgs",
            DataType.STRING,
            custom_validator=json_validator("CustomArgs", dict),
        )
        .add_message_property(
            "SendAt",
            DataType.STRING,
            custom_validator=validate_send_at,
            description="Agendamento ISO-8601 (até 72 horas)",
        )
        .add_message_property("BatchId", DataType.STRING)
        .add_message_property("IpPoolName", DataType.STRING)
        .add_message_property("AsmGroupId", DataType.INTEGER, min_value=1)
        .build()
    )


@lru_cache(maxsize=1)
def simple_email_schema() -> ChannelSchema:
    """Email simples: texto/HTML, sem webhooks, templates nem agendamento."""
    return (
        derive_from(sendgrid_email_schema(), "SendGrid Simple Email")
        .restrict_capabilities(
            ChannelCapability.SEND_MESSAGES
            | ChannelCapability.MESSAGE_STATUS_QUERY
            | ChannelCapability.HEALTH_CHECK
        )
        .remove_parameter("WebhookUrl")
        .remove_parameter("TrackingSettings")
        .restrict_content_types(MessageContentType.PLAIN_TEXT, MessageContentType.HTML)
        .remove_message_property("Categories")
        .remove_message_property("CustomArgs")
        .remove_message_property("SendAt")
        .remove_message_property("BatchId")
        .remove_message_property("IpPoolName")
        .remove_message_property("AsmGroupId")
        .build()
    )


@lru_cache(maxsize=1)
def transactional_email_schema() -> ChannelSchema:
    """Email transacional (recibos, notificações) com tracking."""
    return (
        derive_from(sendgrid_email_schema(), "SendGrid Transactional Email")
        .remove_capability(ChannelCapability.RECEIVE_MESSAGES)
        .remove_capability(ChannelCapability.HANDLE_MESSAGE_STATE)
        .remove_capability(ChannelCapability.BULK_MESSAGING)
        .remove_capability(ChannelCapability.TEMPLATES)
        .remove_parameter("WebhookUrl")
        .update_parameter("TrackingSettings", default_value=True)
        .remove_content_type(MessageContentType.TEMPLATE)
        .remove_message_property("SendAt")
        .remove_message_property("BatchId")
        .remove_message_property("IpPoolName")
        .build()
    )
