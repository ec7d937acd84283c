"""
Exports públicos de channel_schema/schema.

Modelo imutável ChannelSchema e builder/álgebra de restrição.
"""

from channel_schema.schema.builder import (
    ChannelSchemaBuilder,
    derive_from,
    new_schema,
)
from channel_schema.schema.model import ChannelSchema

__all__ = [
    "ChannelSchema",
    "ChannelSchemaBuilder",
    "derive_from",
    "new_schema",
]
