"""Protocolo de conectores de canal."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.connectors.results import SendResult
    from channel_schema.schema.model import ChannelSchema
    from channel_schema.validators.sources import MessageSource


@runtime_checkable
class ChannelConnectorProtocol(Protocol):
    """Contrato mínimo de um conector criado pelo registry."""

    @property
    def schema(self) -> ChannelSchema:
        """Schema que governa o conector (master ou restrição)."""
        ...

    async def initialize(self) -> None:
        """Valida configuração e prepara o conector."""
        ...

    async def send_message(self, message: MessageSource) -> SendResult:
        """Valida e envia uma mensagem."""
        ...
