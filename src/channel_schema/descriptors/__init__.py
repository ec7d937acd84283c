"""Exports públicos de channel_schema/descriptors."""

from channel_schema.descriptors.endpoint import EndpointDescriptor
from channel_schema.descriptors.field import (
    CustomValidator,
    FieldDescriptor,
    MessagePropertyDescriptor,
    ParameterDescriptor,
    compile_pattern,
)

__all__ = [
    "CustomValidator",
    "EndpointDescriptor",
    "FieldDescriptor",
    "MessagePropertyDescriptor",
    "ParameterDescriptor",
    "compile_pattern",
]
