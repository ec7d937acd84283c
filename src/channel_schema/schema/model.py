"""
Modelo imutável de schema de canal.

ChannelSchema é construído uma vez por módulo de provider (via
ChannelSchemaBuilder) e compartilhado sem lock entre validações
concorrentes. Schemas derivados são novas instâncias, nunca
mutações do schema de origem.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from channel_schema.descriptors.endpoint import EndpointDescriptor
from channel_schema.descriptors.field import (
    FieldDescriptor,
    MessagePropertyDescriptor,
    ParameterDescriptor,
)
from channel_schema.types.capability import (
    DEFAULT_CAPABILITIES,
    ChannelCapability,
    capability_names,
    undefined_bits,
)
from channel_schema.types.kinds import AuthenticationType, EndpointType, MessageContentType
from utils.errors import DuplicateElementError, InvalidArgumentError


def _ensure_unique_names(kind: str, descriptors: tuple[FieldDescriptor, ...]) -> None:
    seen: set[str] = set()
    for descriptor in descriptors:
        if descriptor.key in seen:
            raise DuplicateElementError(f"{kind} '{descriptor.name}' duplicado no schema")
        seen.add(descriptor.key)


def _find_field(
    descriptors: tuple[FieldDescriptor, ...],
    name: str,
) -> FieldDescriptor | None:
    key = name.casefold()
    for descriptor in descriptors:
        if descriptor.key == key:
            return descriptor
    return None


@dataclass(frozen=True, slots=True)
class ChannelSchema:
    """
    Contrato declarativo de um canal.

    Attributes:
        provider: Nome do provider (ex: "Twilio")
        channel_type: Tipo do canal (ex: "SMS")
        version: Versão semântica do schema
        display_name: Nome amigável (opcional)
        capabilities: Flags de capacidade
        content_types: Tipos de conteúdo aceitos
        authentication_types: Tipos de autenticação aceitos
        parameters: Descriptors de parâmetros de conexão
        message_properties: Descriptors de propriedades de mensagem
        endpoints: Descriptors de endpoint (um por tipo)
        is_strict: Rejeita chaves não declaradas em settings/mensagens
    """

    provider: str
    channel_type: str
    version: str
    display_name: str | None = None
    capabilities: ChannelCapability = DEFAULT_CAPABILITIES
    content_types: frozenset[MessageContentType] = frozenset()
    authentication_types: frozenset[AuthenticationType] = frozenset()
    parameters: tuple[ParameterDescriptor, ...] = ()
    message_properties: tuple[MessagePropertyDescriptor, ...] = ()
    endpoints: tuple[EndpointDescriptor, ...] = ()
    is_strict: bool = False

    def __post_init__(self) -> None:
        """Valida identidade e unicidade dos elementos."""
        for attr in ("provider", "channel_type", "version"):
            value = getattr(self, attr)
            if not isinstance(value, str) or not value.strip():
                raise InvalidArgumentError(f"{attr} do schema não pode ser vazio")

        extra_bits = undefined_bits(self.capabilities)
        if extra_bits:
            raise InvalidArgumentError(
                f"capabilities contém bits não definidos: {extra_bits:#x}"
            )

        object.__setattr__(self, "capabilities", ChannelCapability(self.capabilities))
        object.__setattr__(self, "content_types", frozenset(self.content_types))
        object.__setattr__(self, "authentication_types", frozenset(self.authentication_types))
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "message_properties", tuple(self.message_properties))
        object.__setattr__(self, "endpoints", tuple(self.endpoints))

        _ensure_unique_names("Parâmetro", self.parameters)
        _ensure_unique_names("Propriedade de mensagem", self.message_properties)

        endpoint_types: set[EndpointType] = set()
        for endpoint in self.endpoints:
            if endpoint.endpoint_type in endpoint_types:
                raise DuplicateElementError(
                    f"Endpoint '{endpoint.endpoint_type.name}' duplicado no schema"
                )
            endpoint_types.add(endpoint.endpoint_type)

    # Superfície de consulta

    def get_capabilities(self) -> ChannelCapability:
        """Flags de capacidade do canal."""
        return self.capabilities

    def get_content_types(self) -> frozenset[MessageContentType]:
        """Tipos de conteúdo aceitos."""
        return self.content_types

    def get_authentication_types(self) -> frozenset[AuthenticationType]:
        """Tipos de autenticação aceitos."""
        return self.authentication_types

    def get_parameters(self) -> tuple[ParameterDescriptor, ...]:
        """Descriptors de parâmetros de conexão."""
        return self.parameters

    def get_message_properties(self) -> tuple[MessagePropertyDescriptor, ...]:
        """Descriptors de propriedades de mensagem."""
        return self.message_properties

    def get_endpoints(self) -> tuple[EndpointDescriptor, ...]:
        """Descriptors de endpoint."""
        return self.endpoints

    def get_logical_identity(self) -> str:
        """Identidade estável provider/tipo/versão (chave de mapas e logs)."""
        return f"{self.provider}/{self.channel_type}/{self.version}"

    @property
    def logical_identity(self) -> str:
        """Alias de get_logical_identity()."""
        return self.get_logical_identity()

    def has_capability(self, capability: ChannelCapability) -> bool:
        """Verifica se todas as flags informadas estão presentes."""
        return (self.capabilities & capability) == capability

    def supports_content_type(self, content_type: MessageContentType) -> bool:
        """Verifica se o tipo de conteúdo é aceito."""
        return content_type in self.content_types

    def get_parameter(self, name: str) -> ParameterDescriptor | None:
        """Busca parâmetro pelo nome (case-insensitive)."""
        found = _find_field(self.parameters, name)
        return found if isinstance(found, ParameterDescriptor) else None

    def get_message_property(self, name: str) -> MessagePropertyDescriptor | None:
        """Busca propriedade de mensagem pelo nome (case-insensitive)."""
        found = _find_field(self.message_properties, name)
        return found if isinstance(found, MessagePropertyDescriptor) else None

    def get_endpoint(self, endpoint_type: EndpointType) -> EndpointDescriptor | None:
        """Busca o descriptor declarado exatamente para o tipo."""
        for endpoint in self.endpoints:
            if endpoint.endpoint_type == endpoint_type:
                return endpoint
        return None

    def find_endpoint(self, endpoint_type: EndpointType) -> EndpointDescriptor | None:
        """Descriptor que cobre o tipo: exato primeiro, depois curinga ANY."""
        exact = self.get_endpoint(endpoint_type)
        if exact is not None:
            return exact
        return self.get_endpoint(EndpointType.ANY)

    def structurally_equals(self, other: ChannelSchema) -> bool:
        """
        Compara estrutura ignorando display_name e ordem dos elementos.

        Args:
            other: Schema a comparar

        Returns:
            True se identidade, capacidades e conjuntos de elementos coincidem
        """
        return (
            self.get_logical_identity() == other.get_logical_identity()
            and self.capabilities == other.capabilities
            and self.content_types == other.content_types
            and self.authentication_types == other.authentication_types
            and set(self.parameters) == set(other.parameters)
            and set(self.message_properties) == set(other.message_properties)
            and set(self.endpoints) == set(other.endpoints)
            and self.is_strict == other.is_strict
        )

    def to_log_dict(self) -> dict[str, Any]:
        """Resumo do schema seguro para logs (sem valores de parâmetros)."""
        return {
            "schema": self.get_logical_identity(),
            "display_name": self.display_name,
            "capabilities": capability_names(self.capabilities),
            "content_types": sorted(str(c) for c in self.content_types),
            "authentication_types": sorted(str(a) for a in self.authentication_types),
            "parameters": [p.name for p in self.parameters],
            "message_properties": [p.name for p in self.message_properties],
            "endpoints": [e.endpoint_type.name for e in self.endpoints],
            "is_strict": self.is_strict,
        }
