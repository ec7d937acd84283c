"""
Regras explícitas de coerção de valores de property bags.

Cada DataType aceita um conjunto fechado de representações. Nada é
convertido implicitamente além do descrito aqui, evitando confusão
silenciosa de tipos (ex: bool tratado como int).
"""

from __future__ import annotations

import math
import re

from channel_schema.types.kinds import DataType
from channel_schema.types.values import PropertyValue

_TRUE_STRINGS = frozenset({"true"})
_FALSE_STRINGS = frozenset({"false"})

# Apenas dígitos ASCII, sem separador "_" aceito por int()/float()
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
_NUMBER_TEXT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class CoercionError(ValueError):
    """Valor não pode ser convertido para o DataType declarado."""


def is_absent(value: object) -> bool:
    """Valor ausente: None ou string vazia/só espaços."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _to_string(value: object) -> str:
    if isinstance(value, str):
        return value
    raise CoercionError(f"expected string, got {type(value).__name__}")


def _to_boolean(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
    raise CoercionError(f"expected boolean, got {type(value).__name__}")


def _to_integer(value: object) -> int:
    # bool é subclasse de int: rejeitar explicitamente
    if isinstance(value, bool):
        raise CoercionError("expected integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not _INTEGER_TEXT.fullmatch(text):
            raise CoercionError(f"'{value}' is not an integer")
        return int(text)
    raise CoercionError(f"expected integer, got {type(value).__name__}")


def _to_number(value: object) -> int | float:
    if isinstance(value, bool):
        raise CoercionError("expected number, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise CoercionError("number must be finite")
        return value
    if isinstance(value, str):
        text = value.strip()
        if not _NUMBER_TEXT.fullmatch(text):
            raise CoercionError(f"'{value}' is not a number")
        number = float(text)
        if not math.isfinite(number):
            raise CoercionError("number must be finite")
        return number
    raise CoercionError(f"expected number, got {type(value).__name__}")


_COERCERS = {
    DataType.STRING: _to_string,
    DataType.BOOLEAN: _to_boolean,
    DataType.INTEGER: _to_integer,
    DataType.NUMBER: _to_number,
}


def coerce_value(data_type: DataType, value: object) -> PropertyValue:
    """
    Converte valor para a representação canônica do DataType.

    Args:
        data_type: Tipo declarado no descriptor
        value: Valor bruto do property bag (não ausente)

    Returns:
        Valor tipado (str, bool, int ou float)

    Raises:
        CoercionError: Se o valor não for compatível com o tipo
    """
    return _COERCERS[DataType(data_type)](value)


def can_coerce(data_type: DataType, value: object) -> bool:
    """Verifica se o valor é compatível com o DataType."""
    try:
        coerce_value(data_type, value)
    except CoercionError:
        return False
    return True
