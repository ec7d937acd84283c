"""Formatter JSON dos logs estruturados.

Campos de extra (component, action, result, schema, ...) são
serializados junto com os campos fixos.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos fixos de todo record
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "INFO",
            "logger": "app.registry.registry",
            "message": "connector_registered",
            "correlation_id": "",
            "service": "channel_schema",
            "component": "registry"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
