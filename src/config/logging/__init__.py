"""Logging estruturado JSON do registry e dos conectores.

O engine (channel_schema) nunca loga; apenas registry e conectores
emitem eventos.

Uso:
    from app.observability import get_correlation_id
    from config.logging import configure_logging, get_logger

    configure_logging(
        level="INFO",
        service_name="channel_schema",
        correlation_id_getter=get_correlation_id,
    )

    logger = get_logger(__name__)
    logger.info("connector_registered", extra={"component": "registry"})

Sem correlation_id_getter o campo correlation_id sai vazio. No host,
app.bootstrap.initialize_app() faz a chamada a partir de BaseSettings
já com get_correlation_id.

Campos presentes em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
