"""
Validação de mensagens contra um schema.

Verifica endpoints de origem/destino, tipo de conteúdo e propriedades.
"""

from __future__ import annotations

from channel_schema.rules.constraints import evaluate
from channel_schema.schema.model import ChannelSchema
from channel_schema.types.errors import ValidationError
from channel_schema.validators.sources import EndpointSource, MessageSource

SENDER_MEMBER = "Sender"
RECEIVER_MEMBER = "Receiver"
CONTENT_MEMBER = "Content"


def _supported(schema: ChannelSchema, *, sending: bool) -> str:
    names = sorted(
        str(descriptor)
        for descriptor in schema.endpoints
        if (descriptor.can_send if sending else descriptor.can_receive)
    )
    return ", ".join(names)


def _validate_endpoint(
    schema: ChannelSchema,
    endpoint: EndpointSource,
    *,
    sending: bool,
) -> list[ValidationError]:
    role = "Sender" if sending else "Receiver"
    member = SENDER_MEMBER if sending else RECEIVER_MEMBER
    descriptor = schema.find_endpoint(endpoint.type)

    if descriptor is None:
        return [
            ValidationError.for_member(
                f"{role} endpoint type '{endpoint.type.name}' is not supported. "
                f"Supported types: [{_supported(schema, sending=sending)}].",
                member,
            )
        ]

    allowed = descriptor.can_send if sending else descriptor.can_receive
    if not allowed:
        action = "send" if sending else "receive"
        return [
            ValidationError.for_member(
                f"Endpoint type '{endpoint.type.name}' cannot {action} messages "
                f"and is not valid as {role.lower()}.",
                member,
            )
        ]
    return []


def _validate_required_endpoints(
    schema: ChannelSchema,
    message: MessageSource,
) -> list[ValidationError]:
    present = [ep for ep in (message.sender, message.receiver) if ep is not None]
    errors: list[ValidationError] = []

    for descriptor in schema.endpoints:
        if not descriptor.is_required:
            continue
        if descriptor.is_wildcard:
            satisfied = bool(present)
        else:
            satisfied = any(ep.type == descriptor.endpoint_type for ep in present)
        if not satisfied:
            errors.append(
                ValidationError.for_member(
                    f"Required endpoint type '{descriptor}' is missing.",
                    str(descriptor),
                )
            )
    return errors


def _validate_content(schema: ChannelSchema, message: MessageSource) -> list[ValidationError]:
    content = message.content
    if content is None or content.content_type in schema.content_types:
        return []

    supported = ", ".join(sorted(ct.name for ct in schema.content_types))
    return [
        ValidationError.for_member(
            f"Content type '{content.content_type.name}' is not supported. "
            f"Supported content types: [{supported}].",
            CONTENT_MEMBER,
        )
    ]


def _validate_properties(schema: ChannelSchema, message: MessageSource) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for descriptor in schema.message_properties:
        errors.extend(evaluate(descriptor, message.get_property(descriptor.name)))

    if schema.is_strict:
        known = {descriptor.key for descriptor in schema.message_properties}
        errors.extend(
            ValidationError.for_member(
                f"Message property '{name}' is not supported by schema "
                f"'{schema.logical_identity}'.",
                name,
            )
            for name in message.property_names()
            if name.casefold() not in known
        )
    return errors


def validate_message(schema: ChannelSchema, message: MessageSource) -> list[ValidationError]:
    """
    Valida uma mensagem contra o schema do canal.

    Args:
        schema: Schema do canal
        message: Mensagem a enviar

    Returns:
        Lista agregada de erros; não vazia = rejeitar antes de qualquer chamada ao provider
    """
    errors: list[ValidationError] = []

    if message.sender is not None:
        errors.extend(_validate_endpoint(schema, message.sender, sending=True))
    if message.receiver is not None:
        errors.extend(_validate_endpoint(schema, message.receiver, sending=False))
    errors.extend(_validate_required_endpoints(schema, message))

    errors.extend(_validate_content(schema, message))
    errors.extend(_validate_properties(schema, message))
    return errors
