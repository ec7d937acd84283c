"""Agregador de settings.

Re-exporta settings e getters de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.registry import (
    RegistrySettings,
    get_registry_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "RegistrySettings",
    "get_base_settings",
    "get_registry_settings",
]
