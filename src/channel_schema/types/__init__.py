"""
Exports públicos de channel_schema/types.

Enumerações, flags de capacidade e o registro ValidationError.
"""

from channel_schema.types.capability import (
    ALL_CAPABILITIES,
    DEFAULT_CAPABILITIES,
    NO_CAPABILITIES,
    ChannelCapability,
    capability_names,
    iter_capabilities,
    undefined_bits,
)
from channel_schema.types.errors import ValidationError
from channel_schema.types.kinds import (
    AuthenticationType,
    DataType,
    EndpointType,
    MessageContentType,
)
from channel_schema.types.values import PropertyValue

__all__ = [
    "ALL_CAPABILITIES",
    "DEFAULT_CAPABILITIES",
    "NO_CAPABILITIES",
    "AuthenticationType",
    "ChannelCapability",
    "DataType",
    "EndpointType",
    "MessageContentType",
    "PropertyValue",
    "ValidationError",
    "capability_names",
    "iter_capabilities",
    "undefined_bits",
]
