"""
Exports públicos de channel_schema/compat.

Verificação de identidade e de restrição entre schemas.
"""

from channel_schema.compat.restriction import (
    compare_endpoints,
    compare_fields,
    is_compatible,
    validate_as_restriction_of,
)

__all__ = [
    "compare_endpoints",
    "compare_fields",
    "is_compatible",
    "validate_as_restriction_of",
]
