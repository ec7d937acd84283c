"""
Descriptors de campos nomeados e tipados.

Um FieldDescriptor declara tipo e restrições de um parâmetro de
conexão (ParameterDescriptor) ou de uma propriedade de mensagem
(MessagePropertyDescriptor). Descriptors são imutáveis: derivações
criam novas instâncias via dataclasses.replace.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from channel_schema.types.errors import ValidationError
from channel_schema.types.kinds import DataType
from channel_schema.types.values import PropertyValue
from utils.errors import InvalidArgumentError

# Assinatura de validador customizado: deve ser puro e sem efeitos colaterais
CustomValidator = Callable[[PropertyValue], Iterable[ValidationError]]


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compila (com cache) a expressão regular de um descriptor."""
    return re.compile(pattern)


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """
    Especificação declarativa de um campo configurável.

    Attributes:
        name: Nome único do campo no schema (comparação case-insensitive)
        data_type: Tipo de dado esperado
        is_required: Campo obrigatório
        is_sensitive: Valor nunca deve ser logado nem ecoado em erros
        default_value: Valor usado quando o campo está ausente
        min_length: Tamanho mínimo (strings)
        max_length: Tamanho máximo (strings)
        min_value: Valor mínimo (numéricos)
        max_value: Valor máximo (numéricos)
        allowed_values: Enumeração de valores aceitos
        pattern: Expressão regular (full-match) para strings
        custom_validator: Função pura (valor) -> erros, avaliada por último
        ignore_case: Compara allowed_values de string sem diferenciar caixa
        description: Descrição para documentação
        display_name: Nome amigável para UI
    """

    name: str
    data_type: DataType
    is_required: bool = False
    is_sensitive: bool = False
    default_value: PropertyValue | None = None
    min_length: int | None = None
    max_length: int | None = None
    min_value: float | None = None
    max_value: float | None = None
    allowed_values: tuple[PropertyValue, ...] | None = None
    pattern: str | None = None
    custom_validator: CustomValidator | None = None
    ignore_case: bool = False
    description: str | None = field(default=None, compare=False)
    display_name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Valida invariantes de construção (falha rápida: erro de programação)."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError("name do descriptor não pode ser vazio")

        if not isinstance(self.data_type, DataType):
            try:
                object.__setattr__(self, "data_type", DataType(self.data_type))
            except ValueError as exc:
                raise InvalidArgumentError(
                    f"data_type inválido para '{self.name}': {self.data_type}"
                ) from exc

        for bound in ("min_length", "max_length"):
            value = getattr(self, bound)
            if value is not None and value < 0:
                raise InvalidArgumentError(f"{bound} de '{self.name}' não pode ser negativo")

        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise InvalidArgumentError(
                f"min_length > max_length em '{self.name}': "
                f"{self.min_length} > {self.max_length}"
            )

        if (
            self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise InvalidArgumentError(
                f"min_value > max_value em '{self.name}': "
                f"{self.min_value} > {self.max_value}"
            )

        # Cópia própria: nunca compartilhar a lista do chamador
        if self.allowed_values is not None:
            object.__setattr__(self, "allowed_values", tuple(self.allowed_values))

        if self.pattern is not None:
            try:
                compile_pattern(self.pattern)
            except re.error as exc:
                raise InvalidArgumentError(
                    f"pattern inválido em '{self.name}': {exc}"
                ) from exc

    @property
    def key(self) -> str:
        """Chave de lookup case-insensitive."""
        return self.name.casefold()

    @property
    def compiled_pattern(self) -> re.Pattern[str] | None:
        """Expressão regular compilada (None se não houver pattern)."""
        if self.pattern is None:
            return None
        return compile_pattern(self.pattern)

    @property
    def has_default(self) -> bool:
        """Verifica se há valor padrão declarado."""
        return self.default_value is not None

    def to_log_dict(self) -> dict[str, Any]:
        """Resumo seguro para logs (sem default de campos sensíveis)."""
        return {
            "name": self.name,
            "data_type": str(self.data_type),
            "is_required": self.is_required,
            "is_sensitive": self.is_sensitive,
            "has_default": self.has_default,
            "has_custom_validator": self.custom_validator is not None,
        }


@dataclass(frozen=True, slots=True)
class ParameterDescriptor(FieldDescriptor):
    """Parâmetro de conexão (connection settings) de um canal."""


@dataclass(frozen=True, slots=True)
class MessagePropertyDescriptor(FieldDescriptor):
    """Propriedade aceita em mensagens enviadas pelo canal."""
