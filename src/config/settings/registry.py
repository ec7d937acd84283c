"""Settings do registry de conectores.

Controla se schemas fornecidos em runtime são aceitos e o que é
verificado na criação de um conector.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class RegistrySettings:
    """Configurações do ChannelRegistry.

    Attributes:
        allow_runtime_schemas: Aceita schema candidato em create_connector
        initialize_connectors: Chama initialize() no conector recém-criado
        check_authentication: Exige credenciais na validação de settings
    """

    allow_runtime_schemas: bool = True
    initialize_connectors: bool = False
    check_authentication: bool = False

    def validate(self) -> list[str]:
        """Valida configurações do registry.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.check_authentication and not self.initialize_connectors:
            errors.append(
                "REGISTRY_CHECK_AUTHENTICATION exige REGISTRY_INITIALIZE_CONNECTORS=true"
            )
        return errors


def _load_registry_from_env() -> RegistrySettings:
    """Carrega RegistrySettings de variáveis de ambiente."""
    return RegistrySettings(
        allow_runtime_schemas=_env_flag("REGISTRY_ALLOW_RUNTIME_SCHEMAS", True),
        initialize_connectors=_env_flag("REGISTRY_INITIALIZE_CONNECTORS", False),
        check_authentication=_env_flag("REGISTRY_CHECK_AUTHENTICATION", False),
    )


@lru_cache(maxsize=1)
def get_registry_settings() -> RegistrySettings:
    """Retorna instância cacheada de RegistrySettings."""
    return _load_registry_from_env()
