"""Schema master do Facebook Messenger e variantes derivadas."""

from __future__ import annotations

from functools import lru_cache

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

PROVIDER = "Facebook"
MESSENGER_CHANNEL = "Messenger"
SCHEMA_VERSION = "1.0.0"

NOTIFICATION_TYPES = ("REGULAR", "SILENT_PUSH", "NO_PUSH")
MESSAGING_TYPES = ("RESPONSE", "UPDATE", "MESSAGE_TAG")


@lru_cache(maxsize=1)
def facebook_messenger_schema() -> ChannelSchema:
    """Schema master do Messenger (Graph API)."""
    return (
        new_schema(
            PROVIDER,
            MESSENGER_CHANNEL,
            SCHEMA_VERSION,
            display_name="Facebook Messenger Connector",
        )
        .with_capabilities(
            ChannelCapability.SEND_MESSAGES
            | ChannelCapability.RECEIVE_MESSAGES
            | ChannelCapability.MEDIA_ATTACHMENTS
            | ChannelCapability.HEALTH_CHECK
        )
        .add_required_parameter("PageAccessToken", DataType.STRING, sensitive=True)
        .add_required_parameter("PageId", DataType.STRING)
        .add_parameter("WebhookUrl", DataType.STRING)
        .add_parameter("VerifyToken", DataType.STRING, is_sensitive=True)
        .add_content_type(MessageContentType.PLAIN_TEXT)
        .add_content_type(MessageContentType.MEDIA)
        .add_endpoint(EndpointType.USER_ID, is_required=True, description="PSID do usuário")
        .add_endpoint(EndpointType.EMAIL_ADDRESS, can_receive=False)
        .add_endpoint(EndpointType.URL, can_send=False)
        .add_authentication_type(AuthenticationType.TOKEN)
        .add_message_property(
            "QuickReplies",
            DataType.STRING,
            custom_validator=json_validator("QuickReplies", list),
        )
        .add_message_property(
            "NotificationType",
            DataType.STRING,
            allowed_values=NOTIFICATION_TYPES,
            ignore_case=True,
        )
        .add_message_property(
            "MessagingType",
            DataType.STRING,
            allowed_values=MESSAGING_TYPES,
            ignore_case=True,
        )
        .add_message_property("Tag", DataType.STRING, description="Tag fora da janela de 24h")
        .build()
    )


@lru_cache(maxsize=1)
def simple_messenger_schema() -> ChannelSchema:
    """Messenger só de envio de texto."""
    return (
        derive_from(facebook_messenger_schema(), "Facebook Simple Messenger")
        .remove_capability(ChannelCapability.RECEIVE_MESSAGES)
        .remove_capability(ChannelCapability.MEDIA_ATTACHMENTS)
        .remove_parameter("WebhookUrl")
        .remove_parameter("VerifyToken")
        .remove_content_type(MessageContentType.MEDIA)
        .remove_message_property("QuickReplies")
        .remove_message_property("Tag")
        .build()
    )


@lru_cache(maxsize=1)
def notification_messenger_schema() -> ChannelSchema:
    """Messenger de notificação: envio com mídia, sem recebimento."""
    return (
        derive_from(facebook_messenger_schema(), "Facebook Notification Messenger")
        .remove_capability(ChannelCapability.RECEIVE_MESSAGES)
        .remove_parameter("WebhookUrl")
        .remove_parameter("VerifyToken")
        .remove_message_property("QuickReplies")
        .update_message_property("MessagingType", allowed_values=("UPDATE", "MESSAGE_TAG"))
        .build()
    )
