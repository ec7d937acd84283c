"""
Contratos de leitura de settings e mensagens.

O engine só lê os bags através destes protocolos; nunca serializa
nem persiste os valores.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from channel_schema.types.kinds import EndpointType, MessageContentType


class SettingsSource(Protocol):
    """Bag de connection settings."""

    def get_parameter(self, name: str) -> object:
        """Valor do parâmetro (None se ausente)."""
        ...

    def keys(self) -> Iterable[str]:
        """Nomes dos parâmetros presentes."""
        ...


class EndpointSource(Protocol):
    """Endpoint de origem/destino."""

    @property
    def type(self) -> EndpointType:
        """Tipo do endpoint."""
        ...

    @property
    def address(self) -> str:
        """Endereço (número, email, token…)."""
        ...


class ContentSource(Protocol):
    """Conteúdo de mensagem."""

    @property
    def content_type(self) -> MessageContentType:
        """Tipo do conteúdo."""
        ...


class MessageSource(Protocol):
    """Mensagem a ser validada antes do envio."""

    @property
    def sender(self) -> EndpointSource | None:
        """Remetente (opcional)."""
        ...

    @property
    def receiver(self) -> EndpointSource | None:
        """Destinatário (opcional)."""
        ...

    @property
    def content(self) -> ContentSource | None:
        """Conteúdo (opcional)."""
        ...

    def get_property(self, name: str) -> object:
        """Valor da propriedade (None se ausente)."""
        ...

    def property_names(self) -> Iterable[str]:
        """Nomes das propriedades presentes."""
        ...
