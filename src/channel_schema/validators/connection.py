"""
Validação de connection settings contra um schema.

Problemas nos dados nunca viram exceção: retornam como lista de
ValidationError para o conector rejeitar antes de tocar no provider.
"""

from __future__ import annotations

from channel_schema.rules.constraints import evaluate
from channel_schema.schema.model import ChannelSchema
from channel_schema.types.errors import ValidationError
from channel_schema.validators.authentication import (
    authentication_parameter_names,
    validate_authentication,
)
from channel_schema.validators.sources import SettingsSource


def _unknown_parameters(schema: ChannelSchema, settings: SettingsSource) -> list[ValidationError]:
    known = {parameter.key for parameter in schema.parameters}
    known |= authentication_parameter_names(schema)

    return [
        ValidationError.for_member(
            f"Parameter '{key}' is not supported by schema '{schema.logical_identity}'.",
            key,
        )
        for key in settings.keys()
        if key.casefold() not in known
    ]


def validate_connection_settings(
    schema: ChannelSchema,
    settings: SettingsSource,
    *,
    check_authentication: bool = False,
) -> list[ValidationError]:
    """
    Valida connection settings contra os parâmetros declarados no schema.

    Chaves não declaradas são ignoradas, exceto em schemas estritos
    (cada chave desconhecida vira um erro).

    Args:
        schema: Schema do canal
        settings: Connection settings
        check_authentication: Também exige credenciais de algum tipo de autenticação

    Returns:
        Lista agregada de erros (vazia = válido)
    """
    errors: list[ValidationError] = []

    for parameter in schema.parameters:
        errors.extend(evaluate(parameter, settings.get_parameter(parameter.name)))

    if schema.is_strict:
        errors.extend(_unknown_parameters(schema, settings))

    if check_authentication:
        errors.extend(validate_authentication(schema, settings))

    return errors
