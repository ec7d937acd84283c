"""Exceções de domínio para erros de definição de schema e de registry.

Erros de dados (settings ou mensagens que violam o schema) nunca são
levantados: são retornados como lista de ValidationError. As exceções
abaixo indicam bug de programação (schema mal definido) ou falha dura
do registry ao criar conectores.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from channel_schema.types.errors import ValidationError


class SchemaDefinitionError(ValueError):
    """Base para falhas de construção de schema ou descriptor."""


class InvalidArgumentError(SchemaDefinitionError):
    """Argumento de construção inválido (nome vazio, limites incoerentes)."""


class DuplicateElementError(SchemaDefinitionError):
    """Elemento com mesmo nome/tipo já existe no schema em construção."""


class ElementNotFoundError(SchemaDefinitionError):
    """Elemento a ser atualizado não existe no schema."""


class SchemaDerivationError(SchemaDefinitionError):
    """Operação que amplia o schema foi chamada em um schema derivado."""


class RegistryError(RuntimeError):
    """Base para falhas do registry de conectores."""


class ConnectorRegistrationError(RegistryError):
    """Tipo de conector não pode ser registrado."""


class ConnectorAlreadyRegisteredError(ConnectorRegistrationError):
    """Tipo de conector já registrado."""


class ConnectorNotRegisteredError(RegistryError):
    """Tipo de conector não está registrado."""


class RuntimeSchemaNotAllowedError(RegistryError):
    """Schemas de runtime desabilitados por configuração."""


class SchemaIncompatibleError(RegistryError):
    """Schema de runtime não é uma restrição válida do schema master."""

    def __init__(self, message: str, errors: Sequence[ValidationError]) -> None:
        super().__init__(message)
        self.errors = tuple(errors)


class ConnectorInitializationError(RuntimeError):
    """Conector rejeitou as connection settings na inicialização."""

    def __init__(self, message: str, errors: Sequence[ValidationError] = ()) -> None:
        super().__init__(message)
        self.errors = tuple(errors)


class ConnectorNotReadyError(RuntimeError):
    """Operação exige conector inicializado (estado READY)."""
