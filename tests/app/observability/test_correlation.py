"""Testes do correlation_id via ContextVar."""

from __future__ import annotations

import asyncio

import pytest

from app.observability import (
    correlation_scope,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    """set/get/reset do correlation_id."""

    def test_default_is_empty(self) -> None:
        """Sem definição o valor é vazio."""
        assert get_correlation_id() == ""

    def test_set_and_reset(self) -> None:
        """reset restaura o valor anterior."""
        token = set_correlation_id("abc")
        assert get_correlation_id() == "abc"
        reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_set_without_value_generates_uuid(self) -> None:
        """Sem valor explícito um UUID é gerado."""
        token = set_correlation_id()
        try:
            assert len(get_correlation_id()) == 36
        finally:
            reset_correlation_id(token)


class TestCorrelationScope:
    """correlation_scope."""

    def test_scope_generates_and_restores(self) -> None:
        """Escopo novo gera ID e restaura ao sair."""
        with correlation_scope() as correlation_id:
            assert correlation_id
            assert get_correlation_id() == correlation_id
        assert get_correlation_id() == ""

    def test_nested_scope_reuses_current(self) -> None:
        """Escopo aninhado mantém o ID do externo."""
        with correlation_scope("outer") as outer:
            with correlation_scope() as inner:
                assert inner == outer == "outer"

    def test_explicit_id_overrides(self) -> None:
        """ID explícito prevalece dentro do bloco."""
        with correlation_scope("outer"):
            with correlation_scope("inner") as inner:
                assert inner == "inner"
            assert get_correlation_id() == "outer"

    @pytest.mark.asyncio
    async def test_isolated_between_tasks(self) -> None:
        """Cada task tem seu próprio contexto."""

        async def worker(name: str) -> str:
            with correlation_scope(name):
                await asyncio.sleep(0)
                return get_correlation_id()

        results = await asyncio.gather(worker("a"), worker("b"))
        assert results == ["a", "b"]
