"""Firebase: schema de push e conector."""

from api.connectors.firebase.connector import FirebasePushConnector
from api.connectors.firebase.schemas import (
    PROVIDER,
    PUSH_CHANNEL,
    firebase_push_schema,
    simple_push_schema,
)

__all__ = [
    "PROVIDER",
    "PUSH_CHANNEL",
    "FirebasePushConnector",
    "firebase_push_schema",
    "simple_push_schema",
]
