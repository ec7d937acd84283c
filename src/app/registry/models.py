"""Entrada do registry: tipo de conector e seu schema master."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from channel_schema.schema.model import ChannelSchema
from channel_schema.types.capability import ChannelCapability


@dataclass(frozen=True, slots=True)
class ConnectorDescriptor:
    """Conector registrado.

    Attributes:
        connector_type: Classe do conector
        schema: Schema master do tipo
    """

    connector_type: type
    schema: ChannelSchema

    @property
    def provider(self) -> str:
        """Provider do schema master."""
        return self.schema.provider

    @property
    def channel_type(self) -> str:
        """Tipo de canal do schema master."""
        return self.schema.channel_type

    @property
    def capabilities(self) -> ChannelCapability:
        """Capacidades do schema master."""
        return self.schema.capabilities

    def matches(self, provider: str, channel_type: str) -> bool:
        """Compara provider e tipo de canal (case-insensitive)."""
        return (
            self.schema.provider.casefold() == provider.casefold()
            and self.schema.channel_type.casefold() == channel_type.casefold()
        )

    def to_log_dict(self) -> dict[str, Any]:
        """Resumo para logs estruturados."""
        return {
            "connector_type": self.connector_type.__name__,
            "schema": self.schema.logical_identity,
        }
