"""
Registro de erro de validação.

ValidationError é dado, não exceção: validadores sempre retornam
listas destes registros para que o chamador reporte todos os
problemas de uma vez.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    Erro de validação estruturado.

    Attributes:
        message: Descrição legível do problema (nunca contém valores sensíveis)
        member_names: Campos/caminhos aos quais o erro se refere
    """

    message: str
    member_names: tuple[str, ...] = ()

    @classmethod
    def for_member(cls, message: str, *member_names: str) -> ValidationError:
        """Cria erro referenciando um ou mais campos."""
        return cls(message=message, member_names=tuple(member_names))

    def references(self, member_name: str) -> bool:
        """Verifica se o erro referencia o campo (case-insensitive)."""
        wanted = member_name.casefold()
        return any(name.casefold() == wanted for name in self.member_names)

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs estruturados."""
        return {
            "message": self.message,
            "member_names": list(self.member_names),
        }

    def __str__(self) -> str:
        return self.message
