"""Bootstrap do host: logging e validação de settings.

Composition root mínimo: configura logging JSON com o correlation_id
do registry e valida settings antes de registrar conectores.

Uso:
    from app.bootstrap import initialize_app
    from app.registry import ChannelRegistry

    initialize_app()
    registry = ChannelRegistry()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_registry_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging a partir de BaseSettings e valida settings.

    Deve ser chamada uma vez no início do host.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def initialize_test_app() -> None:
    """Configura logging DEBUG para testes, com correlation_id."""
    settings = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{settings.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings base e do registry.

    Em produção falha rápido; nos demais ambientes apenas registra alerta.

    Raises:
        RuntimeError: Settings inválidas em produção.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"registry: {error}" for error in get_registry_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_production:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
