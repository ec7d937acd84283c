"""Estado do conector e resultado de envio."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from channel_schema.types.errors import ValidationError


class ConnectorState(StrEnum):
    """Ciclo de vida de um conector."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class SendResult:
    """Resultado do envio de uma mensagem.

    Attributes:
        success: Mensagem aceita pelo provider
        message_id: ID atribuído pelo provider (quando houver)
        errors: Erros de validação ou do provider
    """

    success: bool
    message_id: str | None = None
    errors: tuple[ValidationError, ...] = ()

    @classmethod
    def ok(cls, message_id: str | None = None) -> SendResult:
        """Resultado de sucesso."""
        return cls(success=True, message_id=message_id)

    @classmethod
    def failed(cls, errors: Iterable[ValidationError]) -> SendResult:
        """Resultado de falha com os erros que a causaram."""
        return cls(success=False, errors=tuple(errors))

    def to_log_dict(self) -> dict[str, Any]:
        """Resumo para logs estruturados."""
        return {
            "success": self.success,
            "message_id": self.message_id,
            "error_count": len(self.errors),
        }
