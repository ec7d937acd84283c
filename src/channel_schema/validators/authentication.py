"""
Requisitos de credenciais por tipo de autenticação.

Cada AuthenticationType aceita grupos alternativos de parâmetros;
um grupo é satisfeito quando todos os seus parâmetros estão presentes.
"""

from __future__ import annotations

from channel_schema.rules.coercion import is_absent
from channel_schema.schema.model import ChannelSchema
from channel_schema.types.errors import ValidationError
from channel_schema.types.kinds import AuthenticationType
from channel_schema.validators.sources import SettingsSource

CredentialGroups = tuple[tuple[str, ...], ...]

CUSTOM_AUTHENTICATION_PARAMETERS: tuple[str, ...] = (
    "CustomAuth",
    "AuthenticationData",
    "Credentials",
    "AuthConfig",
    "SecretKey",
    "PrivateKey",
    "Signature",
    "Hash",
)

AUTHENTICATION_CREDENTIALS: dict[AuthenticationType, CredentialGroups] = {
    AuthenticationType.BASIC: (
        ("Username", "Password"),
        ("AccountSid", "AuthToken"),
        ("User", "Pass"),
        ("ClientId", "ClientSecret"),
    ),
    AuthenticationType.API_KEY: (("ApiKey",), ("Key",), ("AccessKey",)),
    AuthenticationType.TOKEN: (
        ("Token",),
        ("AccessToken",),
        ("BearerToken",),
        ("AuthToken",),
        ("PageAccessToken",),
    ),
    AuthenticationType.CLIENT_CREDENTIALS: (("ClientId", "ClientSecret"),),
    AuthenticationType.CERTIFICATE: (
        ("Certificate",),
        ("CertificatePath",),
        ("CertificateThumbprint",),
        ("PfxFile",),
        ("ServiceAccountKey",),
    ),
    AuthenticationType.CUSTOM: tuple((name,) for name in CUSTOM_AUTHENTICATION_PARAMETERS),
}

# Parâmetros auxiliares reconhecidos, mas que não satisfazem a autenticação sozinhos
_AUXILIARY_PARAMETERS: dict[AuthenticationType, tuple[str, ...]] = {
    AuthenticationType.CERTIFICATE: ("CertificatePassword", "PfxPassword"),
}


def authentication_parameter_names(schema: ChannelSchema) -> set[str]:
    """
    Nomes (casefold) de parâmetros conhecidos pelos tipos de autenticação do schema.

    Usado pelo modo estrito para não rejeitar credenciais como chaves desconhecidas.
    """
    names: set[str] = set()
    for auth_type in schema.authentication_types:
        for group in AUTHENTICATION_CREDENTIALS.get(auth_type, ()):
            names.update(name.casefold() for name in group)
        names.update(name.casefold() for name in _AUXILIARY_PARAMETERS.get(auth_type, ()))
    return names


def _describe(groups: CredentialGroups) -> str:
    return " or ".join(f"({', '.join(group)})" for group in groups)


def _is_satisfied(groups: CredentialGroups, settings: SettingsSource) -> bool:
    return any(
        all(not is_absent(settings.get_parameter(name)) for name in group)
        for group in groups
    )


def validate_authentication(
    schema: ChannelSchema,
    settings: SettingsSource,
) -> list[ValidationError]:
    """
    Verifica se as settings satisfazem algum tipo de autenticação do schema.

    Args:
        schema: Schema com os tipos de autenticação aceitos
        settings: Connection settings

    Returns:
        Lista vazia se sem autenticação declarada, se NONE é aceito, ou se
        algum tipo declarado está satisfeito; senão um erro em 'Authentication'
    """
    declared = schema.authentication_types
    if not declared or AuthenticationType.NONE in declared:
        return []

    failures: list[str] = []
    for auth_type in sorted(declared, key=str):
        groups = AUTHENTICATION_CREDENTIALS.get(auth_type, ())
        if _is_satisfied(groups, settings):
            return []
        failures.append(f"{auth_type.name} requires one of {_describe(groups)}")

    return [
        ValidationError.for_member(
            "Connection settings do not satisfy any of the supported authentication "
            f"types: {'; '.join(failures)}.",
            "Authentication",
        )
    ]
