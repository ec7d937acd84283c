"""Protocolos e contratos do core da aplicação."""

from .connector import ChannelConnectorProtocol
from .transport import MessageTransportProtocol

__all__ = [
    "ChannelConnectorProtocol",
    "MessageTransportProtocol",
]
