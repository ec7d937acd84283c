"""
Builder de schemas e álgebra de restrição.

Dois caminhos de construção:
- Do zero: new_schema(...) seguido de add_* / with_* e build()
- Por derivação: derive_from(master) seguido de remove_* / restrict_* /
  update_* e build()

Um builder derivado recusa operações que ampliam o schema (add_*,
with_capabilities, allow_any_endpoint): o resultado de remove_* e de
update_* que estreitam restrições é, por construção, uma restrição
válida do master. Schemas vindos de fora do processo devem ser
verificados por channel_schema.compat.validate_as_restriction_of.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any, TypeVar

from channel_schema.descriptors.endpoint import EndpointDescriptor
from channel_schema.descriptors.field import (
    FieldDescriptor,
    MessagePropertyDescriptor,
    ParameterDescriptor,
)
from channel_schema.schema.model import ChannelSchema
from channel_schema.types.capability import (
    DEFAULT_CAPABILITIES,
    ChannelCapability,
    undefined_bits,
)
from channel_schema.types.kinds import (
    AuthenticationType,
    DataType,
    EndpointType,
    MessageContentType,
)
from utils.errors import (
    DuplicateElementError,
    ElementNotFoundError,
    InvalidArgumentError,
    SchemaDerivationError,
)

_F = TypeVar("_F", bound=FieldDescriptor)


def _require_text(value: object, attr: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{attr} não pode ser vazio")
    return value


def _checked_capabilities(capabilities: ChannelCapability | int) -> ChannelCapability:
    extra_bits = undefined_bits(capabilities)
    if extra_bits:
        raise InvalidArgumentError(f"capabilities contém bits não definidos: {extra_bits:#x}")
    return ChannelCapability(capabilities)


def _apply_changes(
    current: _F,
    mutator: Callable[[_F], _F] | None,
    changes: dict[str, Any],
) -> _F:
    updated = current
    if mutator is not None:
        updated = mutator(updated)
    if changes:
        updated = replace(updated, **changes)
    return updated


class ChannelSchemaBuilder:
    """
    Builder mutável finalizado por build().

    O builder nunca é exposto a validadores: apenas o ChannelSchema
    imutável produzido por build() é usado fora da construção.
    """

    __slots__ = (
        "_authentication_types",
        "_capabilities",
        "_channel_type",
        "_content_types",
        "_derived_from",
        "_display_name",
        "_endpoints",
        "_is_strict",
        "_message_properties",
        "_parameters",
        "_provider",
        "_version",
    )

    def __init__(
        self,
        provider: str,
        channel_type: str,
        version: str,
        *,
        display_name: str | None = None,
    ) -> None:
        """
        Inicia um schema do zero.

        Args:
            provider: Nome do provider
            channel_type: Tipo do canal
            version: Versão do schema
            display_name: Nome amigável opcional

        Raises:
            InvalidArgumentError: Se algum identificador for vazio
        """
        self._provider = _require_text(provider, "provider")
        self._channel_type = _require_text(channel_type, "channel_type")
        self._version = _require_text(version, "version")
        self._display_name = display_name
        self._capabilities = DEFAULT_CAPABILITIES
        self._content_types: list[MessageContentType] = []
        self._authentication_types: list[AuthenticationType] = []
        self._parameters: dict[str, ParameterDescriptor] = {}
        self._message_properties: dict[str, MessagePropertyDescriptor] = {}
        self._endpoints: dict[EndpointType, EndpointDescriptor] = {}
        self._is_strict = False
        self._derived_from: str | None = None

    @classmethod
    def derive_from(
        cls,
        master: ChannelSchema,
        display_name: str | None = None,
    ) -> ChannelSchemaBuilder:
        """
        Copia todos os elementos do master em coleções independentes.

        Args:
            master: Schema de origem (não é modificado)
            display_name: Nome do derivado (padrão: "<nome do master> (Copy)")

        Returns:
            Builder derivado, restrito a operações que estreitam o schema
        """
        builder = cls(
            master.provider,
            master.channel_type,
            master.version,
            display_name=(
                display_name
                if display_name is not None
                else f"{master.display_name or master.get_logical_identity()} (Copy)"
            ),
        )
        builder._capabilities = master.capabilities
        builder._content_types = list(master.content_types)
        builder._authentication_types = list(master.authentication_types)
        # Descriptors são imutáveis: copiar as coleções basta para independência
        builder._parameters = {p.key: p for p in master.parameters}
        builder._message_properties = {p.key: p for p in master.message_properties}
        builder._endpoints = {e.endpoint_type: e for e in master.endpoints}
        builder._is_strict = master.is_strict
        builder._derived_from = master.get_logical_identity()
        return builder

    @property
    def is_derived(self) -> bool:
        """Builder criado por derive_from."""
        return self._derived_from is not None

    def _ensure_not_derived(self, operation: str) -> None:
        if self._derived_from is not None:
            raise SchemaDerivationError(
                f"{operation} amplia o schema e não é permitido em derivado de "
                f"{self._derived_from}"
            )

    # Construção do zero

    def add_parameter(
        self,
        parameter: ParameterDescriptor | str,
        data_type: DataType | None = None,
        **options: Any,
    ) -> ChannelSchemaBuilder:
        """
        Adiciona parâmetro de conexão.

        Aceita um ParameterDescriptor pronto ou (nome, tipo, **opções).

        Raises:
            DuplicateElementError: Se já existe parâmetro com o mesmo nome
        """
        self._ensure_not_derived("add_parameter")
        descriptor = _make_field(ParameterDescriptor, parameter, data_type, options)
        if descriptor.key in self._parameters:
            raise DuplicateElementError(
                f"Parâmetro '{descriptor.name}' já existe no schema"
            )
        self._parameters[descriptor.key] = descriptor
        return self

    def add_required_parameter(
        self,
        name: str,
        data_type: DataType,
        *,
        sensitive: bool = False,
        **options: Any,
    ) -> ChannelSchemaBuilder:
        """Atalho para parâmetro obrigatório."""
        return self.add_parameter(
            name, data_type, is_required=True, is_sensitive=sensitive, **options
        )

    def add_message_property(
        self,
        message_property: MessagePropertyDescriptor | str,
        data_type: DataType | None = None,
        **options: Any,
    ) -> ChannelSchemaBuilder:
        """
        Adiciona propriedade de mensagem.

        Raises:
            DuplicateElementError: Se já existe propriedade com o mesmo nome
        """
        self._ensure_not_derived("add_message_property")
        descriptor = _make_field(
            MessagePropertyDescriptor, message_property, data_type, options
        )
        if descriptor.key in self._message_properties:
            raise DuplicateElementError(
                f"Propriedade de mensagem '{descriptor.name}' já existe no schema"
            )
        self._message_properties[descriptor.key] = descriptor
        return self

    def add_endpoint(
        self,
        endpoint: EndpointDescriptor | EndpointType,
        **options: Any,
    ) -> ChannelSchemaBuilder:
        """
        Declara como um tipo de endpoint participa do canal.

        Raises:
            DuplicateElementError: Se o tipo de endpoint já foi declarado
        """
        self._ensure_not_derived("add_endpoint")
        if isinstance(endpoint, EndpointDescriptor):
            if options:
                endpoint = replace(endpoint, **options)
            descriptor = endpoint
        else:
            descriptor = EndpointDescriptor(endpoint, **options)

        if descriptor.endpoint_type in self._endpoints:
            raise DuplicateElementError(
                f"Endpoint '{descriptor.endpoint_type.name}' já existe no schema"
            )
        self._endpoints[descriptor.endpoint_type] = descriptor
        return self

    def allow_any_endpoint(self) -> ChannelSchemaBuilder:
        """Declara o endpoint curinga ANY (envio e recebimento)."""
        return self.add_endpoint(EndpointType.ANY, can_send=True, can_receive=True)

    def add_content_type(self, content_type: MessageContentType) -> ChannelSchemaBuilder:
        """
        Adiciona tipo de conteúdo aceito.

        Raises:
            DuplicateElementError: Se o tipo já foi declarado
        """
        self._ensure_not_derived("add_content_type")
        content_type = MessageContentType(content_type)
        if content_type in self._content_types:
            raise DuplicateElementError(
                f"Tipo de conteúdo '{content_type.name}' já existe no schema"
            )
        self._content_types.append(content_type)
        return self

    def add_authentication_type(
        self,
        authentication_type: AuthenticationType,
    ) -> ChannelSchemaBuilder:
        """
        Adiciona tipo de autenticação aceito.

        Raises:
            DuplicateElementError: Se o tipo já foi declarado
        """
        self._ensure_not_derived("add_authentication_type")
        authentication_type = AuthenticationType(authentication_type)
        if authentication_type in self._authentication_types:
            raise DuplicateElementError(
                f"Autenticação '{authentication_type.name}' já existe no schema"
            )
        self._authentication_types.append(authentication_type)
        return self

    def with_capabilities(self, capabilities: ChannelCapability) -> ChannelSchemaBuilder:
        """Substitui o conjunto de capacidades."""
        self._ensure_not_derived("with_capabilities")
        self._capabilities = _checked_capabilities(capabilities)
        return self

    def with_capability(self, capability: ChannelCapability) -> ChannelSchemaBuilder:
        """Acrescenta uma capacidade ao conjunto atual."""
        self._ensure_not_derived("with_capability")
        self._capabilities |= _checked_capabilities(capability)
        return self

    def with_display_name(self, display_name: str | None) -> ChannelSchemaBuilder:
        """Define o nome amigável."""
        self._display_name = display_name
        return self

    def with_strict_mode(self, is_strict: bool = True) -> ChannelSchemaBuilder:
        """Ativa/desativa rejeição de chaves não declaradas."""
        self._is_strict = is_strict
        return self

    # Restrição (remove_* sobre elemento inexistente é no-op)

    def remove_capability(self, capability: ChannelCapability) -> ChannelSchemaBuilder:
        """Remove uma ou mais flags de capacidade."""
        self._capabilities &= ~capability
        return self

    def restrict_capabilities(self, allowed: ChannelCapability) -> ChannelSchemaBuilder:
        """Mantém apenas as capacidades presentes em allowed."""
        self._capabilities &= allowed
        return self

    def remove_parameter(self, name: str) -> ChannelSchemaBuilder:
        """Remove parâmetro pelo nome (case-insensitive)."""
        self._parameters.pop(_require_text(name, "name").casefold(), None)
        return self

    def remove_message_property(self, name: str) -> ChannelSchemaBuilder:
        """Remove propriedade de mensagem pelo nome (case-insensitive)."""
        self._message_properties.pop(_require_text(name, "name").casefold(), None)
        return self

    def remove_content_type(self, content_type: MessageContentType) -> ChannelSchemaBuilder:
        """Remove tipo de conteúdo."""
        if content_type in self._content_types:
            self._content_types.remove(content_type)
        return self

    def restrict_content_types(
        self,
        *allowed: MessageContentType,
    ) -> ChannelSchemaBuilder:
        """Mantém apenas os tipos de conteúdo informados que já existem."""
        allowed_set = set(allowed)
        self._content_types = [c for c in self._content_types if c in allowed_set]
        return self

    def remove_authentication_type(
        self,
        authentication_type: AuthenticationType,
    ) -> ChannelSchemaBuilder:
        """Remove tipo de autenticação."""
        if authentication_type in self._authentication_types:
            self._authentication_types.remove(authentication_type)
        return self

    def restrict_authentication_types(
        self,
        *allowed: AuthenticationType,
    ) -> ChannelSchemaBuilder:
        """Mantém apenas os tipos de autenticação informados que já existem."""
        allowed_set = set(allowed)
        self._authentication_types = [
            a for a in self._authentication_types if a in allowed_set
        ]
        return self

    def remove_endpoint(self, endpoint_type: EndpointType) -> ChannelSchemaBuilder:
        """Remove descriptor de endpoint do tipo informado."""
        self._endpoints.pop(endpoint_type, None)
        return self

    # Atualização (update_* sobre elemento inexistente falha)

    def update_parameter(
        self,
        name: str,
        mutator: Callable[[ParameterDescriptor], ParameterDescriptor] | None = None,
        **changes: Any,
    ) -> ChannelSchemaBuilder:
        """
        Substitui um parâmetro por versão atualizada.

        Args:
            name: Nome do parâmetro (case-insensitive)
            mutator: Função (descriptor) -> novo descriptor
            **changes: Campos a substituir via dataclasses.replace

        Raises:
            ElementNotFoundError: Se o parâmetro não existe
            InvalidArgumentError: Se a atualização tenta renomear o campo
        """
        key = _require_text(name, "name").casefold()
        current = self._parameters.get(key)
        if current is None:
            raise ElementNotFoundError(f"Parâmetro '{name}' não encontrado no schema")
        self._parameters[key] = _checked_update(current, mutator, changes)
        return self

    def update_message_property(
        self,
        name: str,
        mutator: Callable[[MessagePropertyDescriptor], MessagePropertyDescriptor] | None = None,
        **changes: Any,
    ) -> ChannelSchemaBuilder:
        """
        Substitui uma propriedade de mensagem por versão atualizada.

        Raises:
            ElementNotFoundError: Se a propriedade não existe
        """
        key = _require_text(name, "name").casefold()
        current = self._message_properties.get(key)
        if current is None:
            raise ElementNotFoundError(
                f"Propriedade de mensagem '{name}' não encontrada no schema"
            )
        self._message_properties[key] = _checked_update(current, mutator, changes)
        return self

    def update_endpoint(
        self,
        endpoint_type: EndpointType,
        mutator: Callable[[EndpointDescriptor], EndpointDescriptor] | None = None,
        **changes: Any,
    ) -> ChannelSchemaBuilder:
        """
        Substitui o descriptor de endpoint do tipo informado.

        Raises:
            ElementNotFoundError: Se o tipo de endpoint não foi declarado
            InvalidArgumentError: Se a atualização muda o tipo do endpoint
        """
        current = self._endpoints.get(endpoint_type)
        if current is None:
            raise ElementNotFoundError(
                f"Endpoint '{EndpointType(endpoint_type).name}' não encontrado no schema"
            )
        updated = current
        if mutator is not None:
            updated = mutator(updated)
        if changes:
            updated = replace(updated, **changes)
        if (
            not isinstance(updated, EndpointDescriptor)
            or updated.endpoint_type != current.endpoint_type
        ):
            raise InvalidArgumentError("update_endpoint não pode alterar o tipo do endpoint")
        self._endpoints[endpoint_type] = updated
        return self

    def build(self) -> ChannelSchema:
        """
        Produz o schema imutável.

        Pode ser chamado várias vezes; cada chamada gera instância independente.
        """
        return ChannelSchema(
            provider=self._provider,
            channel_type=self._channel_type,
            version=self._version,
            display_name=self._display_name,
            capabilities=self._capabilities,
            content_types=frozenset(self._content_types),
            authentication_types=frozenset(self._authentication_types),
            parameters=tuple(self._parameters.values()),
            message_properties=tuple(self._message_properties.values()),
            endpoints=tuple(self._endpoints.values()),
            is_strict=self._is_strict,
        )


def _make_field(
    kind: type[_F],
    value: FieldDescriptor | str,
    data_type: DataType | None,
    options: dict[str, Any],
) -> _F:
    if isinstance(value, FieldDescriptor):
        if not isinstance(value, kind):
            raise InvalidArgumentError(
                f"esperado {kind.__name__}, recebido {type(value).__name__}"
            )
        return replace(value, **options) if options else value

    if data_type is None:
        raise InvalidArgumentError(f"data_type é obrigatório para '{value}'")
    return kind(value, data_type, **options)


def _checked_update(
    current: _F,
    mutator: Callable[[_F], _F] | None,
    changes: dict[str, Any],
) -> _F:
    updated = _apply_changes(current, mutator, changes)
    if not isinstance(updated, type(current)) or updated.key != current.key:
        raise InvalidArgumentError(
            f"Atualização de '{current.name}' não pode renomear nem trocar o tipo do campo"
        )
    return updated


def new_schema(
    provider: str,
    channel_type: str,
    version: str,
    *,
    display_name: str | None = None,
) -> ChannelSchemaBuilder:
    """Inicia a construção de um schema do zero."""
    return ChannelSchemaBuilder(provider, channel_type, version, display_name=display_name)


def derive_from(master: ChannelSchema, display_name: str | None = None) -> ChannelSchemaBuilder:
    """Inicia a derivação de um schema restrito a partir de um master."""
    return ChannelSchemaBuilder.derive_from(master, display_name)

