"""Associação entre tipo de conector e seu schema master."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from channel_schema.schema.model import ChannelSchema

SchemaFactory = Callable[[], ChannelSchema]

SCHEMA_FACTORY_ATTRIBUTE = "__channel_schema_factory__"

_ConnectorT = TypeVar("_ConnectorT", bound=type)


def channel_schema_factory(factory: SchemaFactory) -> Callable[[_ConnectorT], _ConnectorT]:
    """
    Anexa a factory do schema master a uma classe de conector.

    Uso:
        @channel_schema_factory(twilio_sms_schema)
        class TwilioSmsConnector(TransportChannelConnector): ...

    Args:
        factory: Callable sem argumentos que retorna o schema master

    Returns:
        Decorator de classe
    """

    def decorate(connector_type: _ConnectorT) -> _ConnectorT:
        setattr(connector_type, SCHEMA_FACTORY_ATTRIBUTE, staticmethod(factory))
        return connector_type

    return decorate


def get_schema_factory(connector_type: type) -> SchemaFactory | None:
    """Factory do schema master declarada na classe (None se ausente)."""
    return getattr(connector_type, SCHEMA_FACTORY_ATTRIBUTE, None)
