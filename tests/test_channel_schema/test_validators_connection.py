"""Testes de validação de connection settings e autenticação."""

from __future__ import annotations

import pytest

from channel_schema import (
    AuthenticationType,
    ChannelSchema,
    ConnectionSettings,
    DataType,
    new_schema,
    validate_authentication,
    validate_connection_settings,
)
from channel_schema.validators import authentication_parameter_names


@pytest.fixture
def api_key_schema() -> ChannelSchema:
    """Schema com ApiKey obrigatória e sensível."""
    return (
        new_schema("Acme", "Email", "1.0.0")
        .add_required_parameter("ApiKey", DataType.STRING, sensitive=True)
        .add_parameter("SandboxMode", DataType.BOOLEAN, default_value=False)
        .add_parameter("Timeout", DataType.INTEGER, min_value=1, max_value=60)
        .add_authentication_type(AuthenticationType.API_KEY)
        .build()
    )


class TestConnectionSettingsModel:
    """Modelo ConnectionSettings."""

    def test_lookup_exact_then_case_insensitive(self) -> None:
        """get_parameter tenta chave exata e depois ignora caixa."""
        settings = ConnectionSettings(parameters={"ApiKey": "abc"})
        assert settings.get_parameter("ApiKey") == "abc"
        assert settings.get_parameter("apikey") == "abc"
        assert settings.get_parameter("Other") is None

    def test_with_parameter_returns_copy(self) -> None:
        """with_parameter não altera a instância de origem."""
        settings = ConnectionSettings()
        updated = settings.with_parameter("ApiKey", "abc")
        assert not settings.has_parameter("ApiKey")
        assert updated.has_parameter("ApiKey")

    def test_values_keep_their_type(self) -> None:
        """bool continua bool e int continua int."""
        settings = ConnectionSettings(parameters={"A": True, "B": 5, "C": "5"})
        assert settings.get_parameter("A") is True
        assert settings.get_parameter("B") == 5
        assert settings.get_parameter("C") == "5"


class TestValidateConnectionSettings:
    """validate_connection_settings."""

    def test_missing_required_sensitive_parameter(self, api_key_schema: ChannelSchema) -> None:
        """Settings vazias geram exatamente um erro referenciando ApiKey."""
        errors = validate_connection_settings(api_key_schema, ConnectionSettings())
        assert len(errors) == 1
        assert errors[0].references("ApiKey")

    def test_valid_settings(self, api_key_schema: ChannelSchema) -> None:
        """Settings completas são válidas."""
        settings = ConnectionSettings(parameters={"ApiKey": "SG.key", "Timeout": "30"})
        assert validate_connection_settings(api_key_schema, settings) == []

    def test_errors_are_aggregated(self, api_key_schema: ChannelSchema) -> None:
        """Todos os problemas são reportados de uma vez."""
        settings = ConnectionSettings(parameters={"Timeout": 120, "SandboxMode": "maybe"})
        errors = validate_connection_settings(api_key_schema, settings)
        members = sorted(name for error in errors for name in error.member_names)
        assert members == ["ApiKey", "SandboxMode", "Timeout"]

    def test_unknown_keys_ignored_when_not_strict(self, api_key_schema: ChannelSchema) -> None:
        """Chaves não declaradas são ignoradas fora do modo estrito."""
        settings = ConnectionSettings(parameters={"ApiKey": "k", "Region": "us"})
        assert validate_connection_settings(api_key_schema, settings) == []

    def test_unknown_keys_rejected_when_strict(self) -> None:
        """Modo estrito rejeita cada chave desconhecida."""
        schema = (
            new_schema("Acme", "Email", "1.0.0")
            .add_parameter("Region", DataType.STRING)
            .add_authentication_type(AuthenticationType.API_KEY)
            .with_strict_mode()
            .build()
        )
        settings = ConnectionSettings(parameters={"region": "us", "ApiKey": "k", "Foo": 1})
        errors = validate_connection_settings(schema, settings)
        assert len(errors) == 1
        assert errors[0].message == (
            "Parameter 'Foo' is not supported by schema 'Acme/Email/1.0.0'."
        )
        assert errors[0].references("Foo")

    def test_sensitive_value_not_in_messages(self) -> None:
        """Erros sobre parâmetros sensíveis não ecoam o valor."""
        schema = (
            new_schema("Acme", "Email", "1.0.0")
            .add_required_parameter(
                "Secret", DataType.STRING, sensitive=True, allowed_values=("a",)
            )
            .build()
        )
        settings = ConnectionSettings(parameters={"Secret": "hunter2"})
        errors = validate_connection_settings(schema, settings)
        assert errors
        assert all("hunter2" not in error.message for error in errors)

    def test_authentication_check_is_opt_in(self) -> None:
        """Checagem de autenticação só roda quando solicitada."""
        schema = (
            new_schema("Acme", "SMS", "1.0.0")
            .add_authentication_type(AuthenticationType.BASIC)
            .build()
        )
        settings = ConnectionSettings()
        assert validate_connection_settings(schema, settings) == []
        errors = validate_connection_settings(schema, settings, check_authentication=True)
        assert len(errors) == 1
        assert errors[0].references("Authentication")


class TestValidateAuthentication:
    """validate_authentication."""

    def test_no_declared_types_is_valid(self) -> None:
        """Sem autenticação declarada não há exigência."""
        schema = new_schema("Acme", "SMS", "1").build()
        assert validate_authentication(schema, ConnectionSettings()) == []

    def test_none_type_is_valid(self) -> None:
        """NONE aceita settings sem credenciais."""
        schema = (
            new_schema("Acme", "SMS", "1")
            .add_authentication_type(AuthenticationType.NONE)
            .add_authentication_type(AuthenticationType.TOKEN)
            .build()
        )
        assert validate_authentication(schema, ConnectionSettings()) == []

    def test_basic_requires_complete_pair(self) -> None:
        """BASIC exige os dois parâmetros de um mesmo grupo."""
        schema = (
            new_schema("Acme", "SMS", "1")
            .add_authentication_type(AuthenticationType.BASIC)
            .build()
        )
        partial = ConnectionSettings(parameters={"AccountSid": "AC1"})
        complete = partial.with_parameter("AuthToken", "tok")
        assert len(validate_authentication(schema, partial)) == 1
        assert validate_authentication(schema, complete) == []

    def test_any_declared_type_suffices(self) -> None:
        """Basta um dos tipos declarados estar satisfeito."""
        schema = (
            new_schema("Acme", "SMS", "1")
            .add_authentication_type(AuthenticationType.BASIC)
            .add_authentication_type(AuthenticationType.API_KEY)
            .build()
        )
        settings = ConnectionSettings(parameters={"apikey": "k"})
        assert validate_authentication(schema, settings) == []

    def test_blank_credentials_do_not_count(self) -> None:
        """Credencial em branco não satisfaz a autenticação."""
        schema = (
            new_schema("Acme", "SMS", "1")
            .add_authentication_type(AuthenticationType.TOKEN)
            .build()
        )
        settings = ConnectionSettings(parameters={"Token": "  "})
        errors = validate_authentication(schema, settings)
        assert "TOKEN requires one of" in errors[0].message

    def test_authentication_parameter_names(self) -> None:
        """Nomes conhecidos incluem parâmetros auxiliares."""
        schema = (
            new_schema("Acme", "Push", "1")
            .add_authentication_type(AuthenticationType.CERTIFICATE)
            .build()
        )
        names = authentication_parameter_names(schema)
        assert "certificate" in names
        assert "pfxpassword" in names
