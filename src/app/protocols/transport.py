"""Protocolo de transporte outbound dos conectores.

O transporte faz a chamada HTTP/SDK do provider; só é acionado
depois que a mensagem passou pela validação do schema.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.connectors.results import SendResult
    from channel_schema.schema.model import ChannelSchema
    from channel_schema.validators.sources import MessageSource


class MessageTransportProtocol(ABC):
    """Contrato mínimo para entregar uma mensagem validada ao provider."""

    @abstractmethod
    async def send(self, schema: ChannelSchema, message: MessageSource) -> SendResult:
        """Entrega a mensagem.

        Args:
            schema: Schema que validou a mensagem
            message: Mensagem já validada

        Returns:
            Resultado do envio (message_id do provider em caso de sucesso)
        """
