"""Classe base de conectores governados por schema.

Toda mensagem e toda configuração passa pelos validadores do
channel_schema antes de qualquer trabalho específico do provider.
Lista de erros não vazia = rejeição, nunca envio parcial.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from app.connectors.results import ConnectorState, SendResult
from channel_schema.types.capability import ChannelCapability
from channel_schema.types.errors import ValidationError
from channel_schema.validators import (
    ConnectionSettings,
    validate_connection_settings,
    validate_message,
)
from config.logging import get_logger
from utils.errors import ConnectorInitializationError, ConnectorNotReadyError

if TYPE_CHECKING:
    from channel_schema.schema.model import ChannelSchema
    from channel_schema.validators.sources import MessageSource, SettingsSource

logger = get_logger(__name__)


class ChannelConnectorBase(ABC):
    """Conector de canal governado por um ChannelSchema.

    Subclasses implementam apenas _send_message_core (e opcionalmente
    _initialize_core); validação e controle de estado ficam aqui.

    Args:
        schema: Schema master ou restrição validada pelo registry
        settings: Connection settings do conector
        check_authentication: Exige credenciais de algum tipo de autenticação
    """

    def __init__(
        self,
        schema: ChannelSchema,
        settings: SettingsSource | None = None,
        *,
        check_authentication: bool = False,
    ) -> None:
        self._schema = schema
        self._settings: SettingsSource = settings if settings is not None else ConnectionSettings()
        self._check_authentication = check_authentication
        self._state = ConnectorState.UNINITIALIZED

    @property
    def schema(self) -> ChannelSchema:
        """Schema que governa o conector."""
        return self._schema

    @property
    def settings(self) -> SettingsSource:
        """Connection settings do conector."""
        return self._settings

    @property
    def state(self) -> ConnectorState:
        """Estado atual do ciclo de vida."""
        return self._state

    @property
    def is_ready(self) -> bool:
        """True se o conector pode enviar mensagens."""
        return self._state == ConnectorState.READY

    def validate_settings(self) -> list[ValidationError]:
        """Valida as connection settings contra o schema."""
        return validate_connection_settings(
            self._schema,
            self._settings,
            check_authentication=self._check_authentication,
        )

    async def initialize(self) -> None:
        """Valida as connection settings e prepara o conector.

        Raises:
            ConnectorInitializationError: Settings violam o schema
        """
        errors = self.validate_settings()
        if errors:
            self._state = ConnectorState.ERROR
            logger.warning(
                "connector_initialization_rejected",
                extra={
                    "component": "connector",
                    "action": "initialize",
                    "result": "rejected",
                    "schema": self._schema.logical_identity,
                    "errors": [error.to_log_dict() for error in errors],
                },
            )
            raise ConnectorInitializationError(
                f"Connection settings inválidas para {self._schema.logical_identity}",
                errors,
            )

        await self._initialize_core()
        self._state = ConnectorState.READY
        logger.info(
            "connector_initialized",
            extra={
                "component": "connector",
                "action": "initialize",
                "result": "ok",
                "schema": self._schema.logical_identity,
            },
        )

    async def send_message(self, message: MessageSource) -> SendResult:
        """Valida e envia uma mensagem.

        Args:
            message: Mensagem a enviar

        Returns:
            SendResult; falha sem chamada ao provider se a mensagem violar o schema

        Raises:
            ConnectorNotReadyError: Conector não inicializado
        """
        if not self.is_ready:
            raise ConnectorNotReadyError(
                f"Conector {self._schema.logical_identity} não está pronto "
                f"(estado: {self._state})"
            )

        if not self._schema.has_capability(ChannelCapability.SEND_MESSAGES):
            return self._reject(
                [
                    ValidationError.for_member(
                        f"Schema '{self._schema.logical_identity}' does not support "
                        "sending messages.",
                        "Capabilities",
                    )
                ]
            )

        errors = validate_message(self._schema, message)
        if errors:
            return self._reject(errors)

        result = await self._send_message_core(message)
        logger.info(
            "message_sent" if result.success else "message_send_failed",
            extra={
                "component": "connector",
                "action": "send_message",
                "result": "ok" if result.success else "failed",
                "schema": self._schema.logical_identity,
                **result.to_log_dict(),
            },
        )
        return result

    def _reject(self, errors: list[ValidationError]) -> SendResult:
        logger.info(
            "message_rejected",
            extra={
                "component": "connector",
                "action": "send_message",
                "result": "rejected",
                "schema": self._schema.logical_identity,
                "errors": [error.to_log_dict() for error in errors],
            },
        )
        return SendResult.failed(errors)

    async def _initialize_core(self) -> None:
        """Hook de inicialização específico do provider (opcional)."""
        return None

    @abstractmethod
    async def _send_message_core(self, message: MessageSource) -> SendResult:
        """Entrega ao provider uma mensagem já validada."""
