"""Conector que delega o envio a um transporte injetado."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.connectors.base import ChannelConnectorBase

if TYPE_CHECKING:
    from app.connectors.results import SendResult
    from app.protocols.transport import MessageTransportProtocol
    from channel_schema.schema.model import ChannelSchema
    from channel_schema.validators.sources import MessageSource, SettingsSource


class TransportChannelConnector(ChannelConnectorBase):
    """Conector cujo envio é feito por um MessageTransportProtocol.

    Base dos conectores de provider: o transporte (HTTP/SDK) é
    injetado na criação, o schema continua governando tudo.
    """

    def __init__(
        self,
        schema: ChannelSchema,
        settings: SettingsSource | None = None,
        *,
        transport: MessageTransportProtocol,
        check_authentication: bool = False,
    ) -> None:
        super().__init__(schema, settings, check_authentication=check_authentication)
        self._transport = transport

    async def _send_message_core(self, message: MessageSource) -> SendResult:
        return await self._transport.send(self.schema, message)
