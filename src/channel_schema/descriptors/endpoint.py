"""
Descriptor de participação de um tipo de endpoint no canal.

No máximo um descriptor por tipo de endpoint por schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from channel_schema.types.kinds import EndpointType
from utils.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class EndpointDescriptor:
    """
    Como um tipo de endpoint participa do canal.

    Attributes:
        endpoint_type: Tipo do endpoint (ANY = curinga)
        can_send: Endpoint pode ser remetente
        can_receive: Endpoint pode ser destinatário
        is_required: Mensagem deve conter endpoint deste tipo
        description: Descrição para documentação
    """

    endpoint_type: EndpointType
    can_send: bool = True
    can_receive: bool = True
    is_required: bool = False
    description: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Normaliza e valida o tipo de endpoint."""
        if not isinstance(self.endpoint_type, EndpointType):
            try:
                object.__setattr__(self, "endpoint_type", EndpointType(self.endpoint_type))
            except ValueError as exc:
                raise InvalidArgumentError(
                    f"endpoint_type inválido: {self.endpoint_type}"
                ) from exc

    @property
    def is_wildcard(self) -> bool:
        """Descriptor curinga (aceita qualquer tipo)."""
        return self.endpoint_type == EndpointType.ANY

    def matches(self, endpoint_type: EndpointType) -> bool:
        """Verifica se o descriptor cobre o tipo informado."""
        return self.is_wildcard or self.endpoint_type == endpoint_type

    def __str__(self) -> str:
        return self.endpoint_type.name
