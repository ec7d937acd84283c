"""
channel_schema - Engine de definição, derivação e validação de schemas de canal.

Engine puro e síncrono: descreve o contrato de um canal (capacidades,
parâmetros, propriedades, endpoints, tipos de conteúdo e autenticação),
deriva variantes restritas de um schema master e valida settings,
mensagens e schemas candidatos. Não faz I/O e não loga.
"""

from channel_schema.compat import is_compatible, validate_as_restriction_of
from channel_schema.descriptors import (
    EndpointDescriptor,
    FieldDescriptor,
    MessagePropertyDescriptor,
    ParameterDescriptor,
)
from channel_schema.rules import evaluate
from channel_schema.schema import (
    ChannelSchema,
    ChannelSchemaBuilder,
    derive_from,
    new_schema,
)
from channel_schema.types import (
    AuthenticationType,
    ChannelCapability,
    DataType,
    EndpointType,
    MessageContentType,
    PropertyValue,
    ValidationError,
)
from channel_schema.validators import (
    ConnectionSettings,
    Endpoint,
    Message,
    MessageContent,
    validate_authentication,
    validate_connection_settings,
    validate_message,
)

__all__ = [
    "AuthenticationType",
    "ChannelCapability",
    "ChannelSchema",
    "ChannelSchemaBuilder",
    "ConnectionSettings",
    "DataType",
    "Endpoint",
    "EndpointDescriptor",
    "EndpointType",
    "FieldDescriptor",
    "Message",
    "MessageContent",
    "MessageContentType",
    "MessagePropertyDescriptor",
    "ParameterDescriptor",
    "PropertyValue",
    "ValidationError",
    "derive_from",
    "evaluate",
    "is_compatible",
    "new_schema",
    "validate_as_restriction_of",
    "validate_authentication",
    "validate_connection_settings",
    "validate_message",
]
