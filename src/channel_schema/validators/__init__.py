"""
Exports públicos de channel_schema/validators.

Validação de connection settings e mensagens contra um schema.
"""

from channel_schema.validators.authentication import (
    AUTHENTICATION_CREDENTIALS,
    authentication_parameter_names,
    validate_authentication,
)
from channel_schema.validators.bags import (
    ConnectionSettings,
    Endpoint,
    Message,
    MessageContent,
)
from channel_schema.validators.connection import validate_connection_settings
from channel_schema.validators.message import validate_message
from channel_schema.validators.sources import (
    ContentSource,
    EndpointSource,
    MessageSource,
    SettingsSource,
)

__all__ = [
    "AUTHENTICATION_CREDENTIALS",
    "ConnectionSettings",
    "ContentSource",
    "Endpoint",
    "EndpointSource",
    "Message",
    "MessageContent",
    "MessageSource",
    "SettingsSource",
    "authentication_parameter_names",
    "validate_authentication",
    "validate_connection_settings",
    "validate_message",
]
