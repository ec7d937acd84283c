"""Tipos de valor aceitos em property bags (settings e mensagens)."""

from typing import TypeAlias

# Soma tipada dos valores possíveis de um parâmetro ou propriedade.
# bool vem antes de int porque bool é subclasse de int em Python.
PropertyValue: TypeAlias = bool | int | float | str

# Conversores explícitos vivem em channel_schema.rules.coercion
__all__ = ["PropertyValue"]
