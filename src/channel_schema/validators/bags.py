"""
Modelos concretos de connection settings e mensagens.

Implementam os protocolos de channel_schema.validators.sources com
valores tipados (PropertyValue). Lookup de chave: exato primeiro,
depois case-insensitive.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from channel_schema.types.kinds import EndpointType, MessageContentType
from channel_schema.types.values import PropertyValue


def _lookup(values: Mapping[str, PropertyValue | None], name: str) -> PropertyValue | None:
    if name in values:
        return values[name]
    wanted = name.casefold()
    for key, value in values.items():
        if key.casefold() == wanted:
            return value
    return None


class ConnectionSettings(BaseModel):
    """Parâmetros de conexão fornecidos pelo chamador para um conector."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    parameters: dict[str, PropertyValue | None] = Field(
        default_factory=dict,
        description="Valores dos parâmetros por nome.",
    )

    def get_parameter(self, name: str) -> PropertyValue | None:
        """Valor do parâmetro (None se ausente)."""
        return _lookup(self.parameters, name)

    def has_parameter(self, name: str) -> bool:
        """Verifica se o parâmetro está presente com valor não nulo."""
        return self.get_parameter(name) is not None

    def keys(self) -> list[str]:
        """Nomes dos parâmetros presentes."""
        return list(self.parameters)

    def with_parameter(self, name: str, value: PropertyValue | None) -> ConnectionSettings:
        """Retorna cópia com o parâmetro definido."""
        return self.model_copy(update={"parameters": {**self.parameters, name: value}})


class Endpoint(BaseModel):
    """Endpoint de origem ou destino de uma mensagem."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: EndpointType = Field(..., description="Tipo do endpoint.")
    address: str = Field(..., description="Endereço do endpoint.")


class MessageContent(BaseModel):
    """Conteúdo de uma mensagem."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    content_type: MessageContentType = Field(..., description="Tipo do conteúdo.")
    body: str | None = Field(default=None, description="Corpo textual, quando houver.")


class Message(BaseModel):
    """Mensagem a ser validada antes de ser entregue ao provider."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(default="", description="Identificador da mensagem.")
    sender: Endpoint | None = Field(default=None, description="Remetente.")
    receiver: Endpoint | None = Field(default=None, description="Destinatário.")
    content: MessageContent | None = Field(default=None, description="Conteúdo.")
    properties: dict[str, PropertyValue | None] = Field(
        default_factory=dict,
        description="Propriedades específicas do canal.",
    )

    def get_property(self, name: str) -> PropertyValue | None:
        """Valor da propriedade (lookup case-insensitive)."""
        return _lookup(self.properties, name)

    def property_names(self) -> list[str]:
        """Nomes das propriedades presentes."""
        return list(self.properties)
