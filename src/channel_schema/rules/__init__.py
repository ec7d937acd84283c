"""
Exports públicos de channel_schema/rules.

Coerção de tipos e avaliação de restrições de descriptors.
"""

from channel_schema.rules.coercion import (
    CoercionError,
    can_coerce,
    coerce_value,
    is_absent,
)
from channel_schema.rules.constraints import (
    allowed_set,
    evaluate,
    field_label,
    normalize_allowed,
)

__all__ = [
    "CoercionError",
    "allowed_set",
    "can_coerce",
    "coerce_value",
    "evaluate",
    "field_label",
    "is_absent",
    "normalize_allowed",
]
