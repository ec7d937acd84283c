"""Validação de propriedades que carregam JSON serializado."""

from __future__ import annotations

import json
from collections.abc import Callable
from functools import lru_cache

from channel_schema.types.errors import ValidationError
from channel_schema.types.values import PropertyValue

JsonValidator = Callable[[PropertyValue], list[ValidationError]]


@lru_cache(maxsize=None)
def json_validator(member_name: str, expected: type | None = None) -> JsonValidator:
    """
    Validador de JSON para a propriedade informada.

    Cacheado: a mesma propriedade recebe sempre o mesmo validador, o que
    mantém schemas derivados comparáveis ao master.

    Args:
        member_name: Nome da propriedade (usado na mensagem de erro)
        expected: Tipo exigido do documento (dict, list) ou None para qualquer JSON

    Returns:
        Callable compatível com custom_validator
    """

    def validate(value: PropertyValue) -> list[ValidationError]:
        if not isinstance(value, str) or not value.strip():
            return []
        try:
            document = json.loads(value)
        except json.JSONDecodeError:
            return [ValidationError.for_member(f"{member_name} must be valid JSON", member_name)]

        if expected is not None and not isinstance(document, expected):
            kind = "object" if expected is dict else "array"
            return [
                ValidationError.for_member(
                    f"{member_name} must be a JSON {kind}", member_name
                )
            ]
        return []

    validate.__name__ = f"validate_{member_name.lower()}_json"
    return validate
