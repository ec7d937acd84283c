"""Facebook: schema do Messenger e conector."""

from api.connectors.facebook.connector import FacebookMessengerConnector
from api.connectors.facebook.schemas import (
    MESSENGER_CHANNEL,
    PROVIDER,
    facebook_messenger_schema,
    notification_messenger_schema,
    simple_messenger_schema,
)

__all__ = [
    "MESSENGER_CHANNEL",
    "PROVIDER",
    "FacebookMessengerConnector",
    "facebook_messenger_schema",
    "notification_messenger_schema",
    "simple_messenger_schema",
]
