"""Schema master do Firebase Cloud Messaging e variante simples."""

from __future__ import annotations

from functools import lru_cache

from api.validators.push import (
    MAX_TIME_TO_LIVE,
    MAX_TITLE_LENGTH,
    validate_condition_expression,
    validate_hex_color,
    validate_image_url,
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

PROVIDER = "Firebase"
PUSH_CHANNEL = "FCM"
SCHEMA_VERSION = "1.0.0"


@lru_cache(maxsize=1)
def firebase_push_schema() -> ChannelSchema:
    """Schema master de push do FCM (envio apenas)."""
    return (
        new_schema(
            PROVIDER,
            PUSH_CHANNEL,
            SCHEMA_VERSION,
            display_name="Firebase Cloud Messaging (FCM) Connector",
        )
        .with_capabilities(
            ChannelCapability.SEND_MESSAGES
            | ChannelCapability.BULK_MESSAGING
            | ChannelCapability.HEALTH_CHECK
        )
        .add_required_parameter("ProjectId", DataType.STRING)
        .add_required_parameter(
            "ServiceAccountKey",
            DataType.STRING,
            sensitive=True,
            custom_validator=json_validator("ServiceAccountKey", dict),
            description="JSON da service account (Project Settings > Service Accounts)",
        )
        .add_parameter("DryRun", DataType.BOOLEAN, default_value=False)
        .add_content_type(MessageContentType.JSON)
        .add_content_type(MessageContentType.PLAIN_TEXT)
        .add_endpoint(EndpointType.DEVICE_ID, can_send=False, is_required=True)
        .add_endpoint(EndpointType.TOPIC, can_send=False)
        .add_authentication_type(AuthenticationType.CERTIFICATE)
        .add_message_property("Title", DataType.STRING, max_length=MAX_TITLE_LENGTH)
        .add_message_property("ImageUrl", DataType.STRING, custom_validator=validate_image_url)
        .add_message_property("Sound", DataType.STRING)
        .add_message_property("Badge", DataType.INTEGER, min_value=0)
        .add_message_property("ClickAction", DataType.STRING)
        .add_message_property("Color", DataType.STRING, custom_validator=validate_hex_color)
        .add_message_property("Tag", DataType.STRING)
        .add_message_property("Priority", DataType.STRING, allowed_values=("normal", "high"))
        .add_message_property(
            "TimeToLive",
            DataType.INTEGER,
            min_value=0,
            max_value=MAX_TIME_TO_LIVE,
            description="TTL em segundos (até 4 semanas)",
        )
        .add_message_property("CollapseKey", DataType.STRING)
        .add_message_property("RestrictedPackageName", DataType.STRING)
        .add_message_property("MutableContent", DataType.BOOLEAN)
        .add_message_property("ContentAvailable", DataType.BOOLEAN)
        .add_message_property("ThreadId", DataType.STRING)
        .add_message_property(
            "CustomData",
            DataType.STRING,
            custom_validator=json_validator("CustomData", dict),
        )
        .add_message_property(
            "ConditionExpression",
            DataType.STRING,
            custom_validator=validate_condition_expression,
        )
        .build()
    )


@lru_cache(maxsize=1)
def simple_push_schema() -> ChannelSchema:
    """Push simples: título e texto para dispositivos."""
    builder = derive_from(firebase_push_schema(), "Firebase Simple Push")
    builder.remove_capability(ChannelCapability.BULK_MESSAGING).remove_parameter("DryRun")
    for name in (
        "ImageUrl",
        "Sound",
        "Badge",
        "ClickAction",
        "Color",
        "Tag",
        "Priority",
        "TimeToLive",
        "CollapseKey",
        "RestrictedPackageName",
        "MutableContent",
        "ContentAvailable",
        "ThreadId",
        "CustomData",
        "ConditionExpression",
    ):
        builder.remove_message_property(name)
    return builder.remove_endpoint(EndpointType.TOPIC).build()
