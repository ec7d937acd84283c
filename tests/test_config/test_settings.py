"""Testes para config.settings (base e registry)."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    RegistrySettings,
    get_base_settings,
    get_registry_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Limpa cache dos getters entre testes."""
    get_base_settings.cache_clear()
    get_registry_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_registry_settings.cache_clear()


class TestBaseSettings:
    """Testes para BaseSettings."""

    def test_defaults_are_valid(self) -> None:
        """Defaults passam na validação."""
        settings = BaseSettings()
        assert settings.validate() == []
        assert settings.is_development
        assert not settings.is_production

    def test_invalid_log_level(self) -> None:
        """LOG_LEVEL desconhecido é reportado."""
        errors = BaseSettings(log_level="LOUD").validate()
        assert errors == ["LOG_LEVEL inválido: LOUD"]

    def test_empty_service_name(self) -> None:
        """SERVICE_NAME vazio é reportado."""
        assert BaseSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Variáveis de ambiente são lidas e normalizadas."""
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("SERVICE_NAME", "channels")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = get_base_settings()

        assert settings.is_production
        assert settings.service_name == "channels"
        assert settings.debug is True
        assert settings.log_level == "DEBUG"

    def test_getter_is_cached(self) -> None:
        """Getter retorna a mesma instância."""
        assert get_base_settings() is get_base_settings()


class TestRegistrySettings:
    """Testes para RegistrySettings."""

    def test_defaults(self) -> None:
        """Schemas de runtime aceitos, sem inicialização automática."""
        settings = RegistrySettings()
        assert settings.allow_runtime_schemas is True
        assert settings.initialize_connectors is False
        assert settings.check_authentication is False
        assert settings.validate() == []

    def test_check_authentication_requires_initialization(self) -> None:
        """check_authentication sem inicialização não tem efeito e é reportado."""
        errors = RegistrySettings(check_authentication=True).validate()
        assert len(errors) == 1
        assert "REGISTRY_INITIALIZE_CONNECTORS" in errors[0]

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Flags são lidas do ambiente."""
        monkeypatch.setenv("REGISTRY_ALLOW_RUNTIME_SCHEMAS", "false")
        monkeypatch.setenv("REGISTRY_INITIALIZE_CONNECTORS", "1")
        monkeypatch.setenv("REGISTRY_CHECK_AUTHENTICATION", "yes")

        settings = get_registry_settings()

        assert settings.allow_runtime_schemas is False
        assert settings.initialize_connectors is True
        assert settings.check_authentication is True
        assert settings.validate() == []

    def test_blank_env_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Variável vazia mantém o default."""
        monkeypatch.setenv("REGISTRY_ALLOW_RUNTIME_SCHEMAS", "  ")
        assert get_registry_settings().allow_runtime_schemas is True
