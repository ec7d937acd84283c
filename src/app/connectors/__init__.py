"""Conectores de canal governados por schema."""

from app.connectors.base import ChannelConnectorBase
from app.connectors.results import ConnectorState, SendResult
from app.connectors.transport import TransportChannelConnector

__all__ = [
    "ChannelConnectorBase",
    "ConnectorState",
    "SendResult",
    "TransportChannelConnector",
]
