"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConnectorAlreadyRegisteredError,
    ConnectorInitializationError,
    ConnectorNotReadyError,
    ConnectorNotRegisteredError,
    ConnectorRegistrationError,
    DuplicateElementError,
    ElementNotFoundError,
    InvalidArgumentError,
    RegistryError,
    RuntimeSchemaNotAllowedError,
    SchemaDefinitionError,
    SchemaDerivationError,
    SchemaIncompatibleError,
)

__all__ = [
    "ConnectorAlreadyRegisteredError",
    "ConnectorInitializationError",
    "ConnectorNotReadyError",
    "ConnectorNotRegisteredError",
    "ConnectorRegistrationError",
    "DuplicateElementError",
    "ElementNotFoundError",
    "InvalidArgumentError",
    "RegistryError",
    "RuntimeSchemaNotAllowedError",
    "SchemaDefinitionError",
    "SchemaDerivationError",
    "SchemaIncompatibleError",
]
