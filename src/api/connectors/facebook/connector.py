"""Conector Messenger registrável no ChannelRegistry."""

from __future__ import annotations

from api.connectors.facebook.schemas import facebook_messenger_schema
from app.connectors import TransportChannelConnector
from app.registry import channel_schema_factory


@channel_schema_factory(facebook_messenger_schema)
class FacebookMessengerConnector(TransportChannelConnector):
    """Messenger via Graph API Send API."""
