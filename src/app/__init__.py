"""App: orquestração de conectores governados por schema.

Subpastas:
- registry/: registro de tipos de conector e gate de schemas de runtime
- connectors/: classe base que valida antes de enviar
- protocols/: contratos (conector, transporte)
- observability/: correlation_id para logs estruturados

Padrão: channel_schema valida; app orquestra; api declara providers; config configura.
"""
