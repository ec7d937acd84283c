"""Conector FCM registrável no ChannelRegistry."""

from __future__ import annotations

from api.connectors.firebase.schemas import firebase_push_schema
from app.connectors import TransportChannelConnector
from app.registry import channel_schema_factory


@channel_schema_factory(firebase_push_schema)
class FirebasePushConnector(TransportChannelConnector):
    """Push notifications via FCM HTTP v1."""
