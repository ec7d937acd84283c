"""Registry de conectores e associação conector → schema master."""

from app.registry.decorators import (
    SCHEMA_FACTORY_ATTRIBUTE,
    SchemaFactory,
    channel_schema_factory,
    get_schema_factory,
)
from app.registry.models import ConnectorDescriptor
from app.registry.registry import ChannelRegistry

__all__ = [
    "SCHEMA_FACTORY_ATTRIBUTE",
    "ChannelRegistry",
    "ConnectorDescriptor",
    "SchemaFactory",
    "channel_schema_factory",
    "get_schema_factory",
]
