"""Registry de conectores de canal.

Guarda um schema master por tipo de conector e é o único ponto que
aceita schemas fornecidos em runtime: um candidato só governa um
conector novo se for restrição válida do master.

Thread-safe: um lock protege o mapa; cada tipo é inserido uma única vez.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from app.connectors.base import ChannelConnectorBase
from app.observability import correlation_scope
from app.protocols import ChannelConnectorProtocol
from app.registry.decorators import SchemaFactory, get_schema_factory
from app.registry.models import ConnectorDescriptor
from channel_schema.compat import validate_as_restriction_of
from channel_schema.schema.model import ChannelSchema
from channel_schema.types.errors import ValidationError
from config.logging import get_logger
from config.settings import RegistrySettings, get_registry_settings
from utils.errors import (
    ConnectorAlreadyRegisteredError,
    ConnectorNotRegisteredError,
    ConnectorRegistrationError,
    RuntimeSchemaNotAllowedError,
    SchemaIncompatibleError,
)

logger = get_logger(__name__)


class ChannelRegistry:
    """Registry de tipos de conector e seus schemas master."""

    def __init__(self, settings: RegistrySettings | None = None) -> None:
        self._settings = settings or get_registry_settings()
        self._lock = threading.Lock()
        self._connectors: dict[type, ConnectorDescriptor] = {}

    @property
    def settings(self) -> RegistrySettings:
        """Configuração em uso."""
        return self._settings

    def register_connector(
        self,
        connector_type: type,
        schema_factory: SchemaFactory | None = None,
    ) -> ConnectorDescriptor:
        """
        Registra um tipo de conector com seu schema master.

        Args:
            connector_type: Subclasse de ChannelConnectorBase
            schema_factory: Factory do schema master; sem ela, usa a
                declarada via @channel_schema_factory

        Returns:
            Descriptor registrado

        Raises:
            ConnectorRegistrationError: Tipo inválido, sem factory ou factory falhou
            ConnectorAlreadyRegisteredError: Tipo já registrado
        """
        if not isinstance(connector_type, type) or not issubclass(
            connector_type, ChannelConnectorBase
        ):
            raise ConnectorRegistrationError(
                f"{connector_type!r} não é uma subclasse de ChannelConnectorBase"
            )

        factory = schema_factory or get_schema_factory(connector_type)
        if factory is None:
            raise ConnectorRegistrationError(
                f"{connector_type.__name__} não declara schema master "
                "(use @channel_schema_factory)"
            )

        try:
            schema = factory()
        except Exception as exc:
            raise ConnectorRegistrationError(
                f"Falha ao obter schema master de {connector_type.__name__}: {exc}"
            ) from exc

        if not isinstance(schema, ChannelSchema):
            raise ConnectorRegistrationError(
                f"Factory de {connector_type.__name__} não retornou ChannelSchema"
            )

        descriptor = ConnectorDescriptor(connector_type=connector_type, schema=schema)
        with self._lock:
            if connector_type in self._connectors:
                raise ConnectorAlreadyRegisteredError(
                    f"{connector_type.__name__} já está registrado"
                )
            self._connectors[connector_type] = descriptor

        logger.info(
            "connector_registered",
            extra={
                "component": "registry",
                "action": "register",
                "result": "ok",
                **descriptor.to_log_dict(),
            },
        )
        return descriptor

    def unregister_connector(self, connector_type: type) -> bool:
        """Remove o tipo do registry. Retorna False se não estava registrado."""
        with self._lock:
            removed = self._connectors.pop(connector_type, None)

        if removed is not None:
            logger.info(
                "connector_unregistered",
                extra={
                    "component": "registry",
                    "action": "unregister",
                    "result": "ok",
                    **removed.to_log_dict(),
                },
            )
        return removed is not None

    def is_connector_registered(self, connector_type: type) -> bool:
        """Verifica se o tipo está registrado."""
        with self._lock:
            return connector_type in self._connectors

    def get_connector_schema(self, connector_type: type) -> ChannelSchema:
        """
        Schema master do tipo de conector.

        Raises:
            ConnectorNotRegisteredError: Tipo não registrado
        """
        return self._get_descriptor(connector_type).schema

    def find_schema(
        self,
        provider: str,
        channel_type: str,
        version: str | None = None,
    ) -> ChannelSchema | None:
        """Schema master por provider/tipo (e versão, se informada)."""
        for descriptor in self._snapshot():
            if not descriptor.matches(provider, channel_type):
                continue
            if version is None or descriptor.schema.version == version:
                return descriptor.schema
        return None

    def find_connector(self, provider: str, channel_type: str) -> type | None:
        """Tipo de conector registrado para provider/tipo de canal."""
        for descriptor in self._snapshot():
            if descriptor.matches(provider, channel_type):
                return descriptor.connector_type
        return None

    def get_connector_types(self) -> list[type]:
        """Tipos de conector registrados."""
        return [descriptor.connector_type for descriptor in self._snapshot()]

    def get_connector_descriptors(
        self,
        predicate: Callable[[ConnectorDescriptor], bool] | None = None,
    ) -> list[ConnectorDescriptor]:
        """Descriptors registrados, opcionalmente filtrados."""
        descriptors = self._snapshot()
        if predicate is None:
            return descriptors
        return [descriptor for descriptor in descriptors if predicate(descriptor)]

    def query_schemas(self, predicate: Callable[[ChannelSchema], bool]) -> list[ChannelSchema]:
        """Schemas master que satisfazem o predicado."""
        return [d.schema for d in self._snapshot() if predicate(d.schema)]

    def validate_schema(
        self,
        connector_type: type,
        runtime_schema: ChannelSchema,
    ) -> list[ValidationError]:
        """
        Verifica se um schema de runtime é restrição do master do tipo.

        Raises:
            ConnectorNotRegisteredError: Tipo não registrado
        """
        master = self.get_connector_schema(connector_type)
        return validate_as_restriction_of(runtime_schema, master)

    async def create_connector(
        self,
        connector_type: type,
        runtime_schema: ChannelSchema | None = None,
        *,
        settings: Any = None,
        **options: Any,
    ) -> ChannelConnectorProtocol:
        """
        Cria um conector governado pelo master ou por uma restrição dele.

        Args:
            connector_type: Tipo registrado
            runtime_schema: Schema candidato (None = schema master)
            settings: Connection settings repassadas ao conector
            **options: Argumentos adicionais do construtor (ex: transport)

        Returns:
            Conector criado (inicializado se configurado)

        Raises:
            ConnectorNotRegisteredError: Tipo não registrado
            RuntimeSchemaNotAllowedError: Schemas de runtime desabilitados
            SchemaIncompatibleError: Candidato não é restrição do master
            ConnectorInitializationError: Settings rejeitadas na inicialização
        """
        with correlation_scope():
            descriptor = self._get_descriptor(connector_type)
            schema = descriptor.schema

            if runtime_schema is not None:
                schema = self._accept_runtime_schema(descriptor, runtime_schema)

            connector = connector_type(
                schema,
                settings,
                check_authentication=self._settings.check_authentication,
                **options,
            )

            if self._settings.initialize_connectors:
                await connector.initialize()

            logger.info(
                "connector_created",
                extra={
                    "component": "registry",
                    "action": "create_connector",
                    "result": "ok",
                    "runtime_schema": runtime_schema is not None,
                    **descriptor.to_log_dict(),
                },
            )
            return connector

    def _accept_runtime_schema(
        self,
        descriptor: ConnectorDescriptor,
        runtime_schema: ChannelSchema,
    ) -> ChannelSchema:
        name = descriptor.connector_type.__name__
        if not self._settings.allow_runtime_schemas:
            raise RuntimeSchemaNotAllowedError(
                f"Schemas de runtime desabilitados (conector {name})"
            )

        errors = validate_as_restriction_of(runtime_schema, descriptor.schema)
        if errors:
            logger.warning(
                "runtime_schema_rejected",
                extra={
                    "component": "registry",
                    "action": "create_connector",
                    "result": "rejected",
                    "candidate": runtime_schema.logical_identity,
                    "errors": [error.to_log_dict() for error in errors],
                    **descriptor.to_log_dict(),
                },
            )
            raise SchemaIncompatibleError(
                f"Schema {runtime_schema.logical_identity} não é restrição válida "
                f"do master de {name}",
                errors,
            )
        return runtime_schema

    def _get_descriptor(self, connector_type: type) -> ConnectorDescriptor:
        with self._lock:
            descriptor = self._connectors.get(connector_type)
        if descriptor is None:
            name = getattr(connector_type, "__name__", repr(connector_type))
            raise ConnectorNotRegisteredError(f"{name} não está registrado")
        return descriptor

    def _snapshot(self) -> list[ConnectorDescriptor]:
        with self._lock:
            return list(self._connectors.values())
