"""Correlation_id das operações do registry e dos conectores.

Usa ContextVar para ser thread/async-safe; o filter de logging lê o
valor atual via get_correlation_id.

Uso:
    from app.observability import correlation_scope

    with correlation_scope() as correlation_id:
        connector = await registry.create_connector(TwilioSmsConnector)
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define correlation_id durante o bloco, reaproveitando o atual se houver.

    Args:
        correlation_id: ID explícito; sem ele, mantém o do contexto ou gera um novo.

    Yields:
        correlation_id em vigor dentro do bloco.
    """
    token = set_correlation_id(correlation_id or get_correlation_id() or None)
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)
