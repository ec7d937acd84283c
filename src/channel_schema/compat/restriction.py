"""
Verificador de compatibilidade entre schemas.

Um schema candidato (ex: fornecido em runtime) só pode governar um
conector se for restrição do master: mesma identidade, superfície
declarada contida na do master e restrições iguais ou mais rígidas.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from channel_schema.descriptors.endpoint import EndpointDescriptor
from channel_schema.descriptors.field import FieldDescriptor
from channel_schema.rules.coercion import CoercionError, coerce_value
from channel_schema.rules.constraints import field_label
from channel_schema.schema.model import ChannelSchema
from channel_schema.types.capability import (
    ALL_CAPABILITIES,
    ChannelCapability,
    iter_capabilities,
    undefined_bits,
)
from channel_schema.types.errors import ValidationError
from channel_schema.types.kinds import EndpointType
from channel_schema.types.values import PropertyValue


def is_compatible(master: ChannelSchema, candidate: ChannelSchema) -> bool:
    """
    Verifica apenas identidade: provider e tipo (case-insensitive) e versão.

    Args:
        master: Schema de referência
        candidate: Schema a comparar

    Returns:
        True se ambos descrevem o mesmo canal lógico
    """
    return (
        master.provider.casefold() == candidate.provider.casefold()
        and master.channel_type.casefold() == candidate.channel_type.casefold()
        and master.version == candidate.version
    )


def _relaxed(descriptor: FieldDescriptor, detail: str) -> ValidationError:
    return ValidationError.for_member(
        f"{field_label(descriptor)} '{descriptor.name}' relaxes the master schema: {detail}.",
        descriptor.name,
    )


def _comparable_values(
    values: Iterable[PropertyValue],
    descriptor: FieldDescriptor,
    fold: bool,
) -> set[PropertyValue]:
    result: set[PropertyValue] = set()
    for value in values:
        try:
            typed = coerce_value(descriptor.data_type, value)
        except CoercionError:
            # Valor não coercível nunca é aceito pelo avaliador
            continue
        result.add(typed.casefold() if fold and isinstance(typed, str) else typed)
    return result


def _compare_bounds(
    candidate: FieldDescriptor,
    master: FieldDescriptor,
) -> list[ValidationError]:
    errors: list[ValidationError] = []

    for attr in ("min_length", "min_value"):
        floor = getattr(master, attr)
        if floor is None:
            continue
        value = getattr(candidate, attr)
        if value is None:
            errors.append(_relaxed(candidate, f"{attr} {floor} was dropped"))
        elif value < floor:
            errors.append(_relaxed(candidate, f"{attr} lowered from {floor} to {value}"))

    for attr in ("max_length", "max_value"):
        ceiling = getattr(master, attr)
        if ceiling is None:
            continue
        value = getattr(candidate, attr)
        if value is None:
            errors.append(_relaxed(candidate, f"{attr} {ceiling} was dropped"))
        elif value > ceiling:
            errors.append(_relaxed(candidate, f"{attr} raised from {ceiling} to {value}"))

    return errors


def _compare_allowed(
    candidate: FieldDescriptor,
    master: FieldDescriptor,
) -> list[ValidationError]:
    if not master.allowed_values:
        return []
    if not candidate.allowed_values:
        return [_relaxed(candidate, "allowed values restriction was dropped")]

    errors: list[ValidationError] = []
    if candidate.ignore_case and not master.ignore_case:
        errors.append(_relaxed(candidate, "allowed values compared case-insensitively"))

    fold = master.ignore_case or candidate.ignore_case
    master_values = _comparable_values(master.allowed_values, master, fold)
    extra = _comparable_values(candidate.allowed_values, candidate, fold) - master_values
    if extra:
        shown = ", ".join(sorted(str(value) for value in extra))
        errors.append(_relaxed(candidate, f"allowed values not in master: [{shown}]"))
    return errors


def compare_fields(
    candidate: FieldDescriptor,
    master: FieldDescriptor,
) -> list[ValidationError]:
    """
    Compara um descriptor candidato com o correspondente do master.

    Args:
        candidate: Descriptor do schema candidato
        master: Descriptor de mesmo nome no master

    Returns:
        Um erro por relaxamento detectado
    """
    if candidate.data_type != master.data_type:
        return [
            ValidationError.for_member(
                f"{field_label(candidate)} '{candidate.name}' has data type "
                f"{candidate.data_type} but the master declares {master.data_type}.",
                candidate.name,
            )
        ]

    errors: list[ValidationError] = []

    if master.is_required and not candidate.is_required:
        errors.append(_relaxed(candidate, "required in master but optional here"))
    if master.is_required and not master.has_default and candidate.has_default:
        errors.append(_relaxed(candidate, "default value satisfies a required value"))
    if master.is_sensitive and not candidate.is_sensitive:
        errors.append(_relaxed(candidate, "sensitive in master but not here"))

    errors.extend(_compare_bounds(candidate, master))

    if master.pattern is not None and candidate.pattern != master.pattern:
        if candidate.pattern is None:
            errors.append(_relaxed(candidate, "pattern was dropped"))
        else:
            errors.append(_relaxed(candidate, "pattern differs from master"))

    errors.extend(_compare_allowed(candidate, master))

    replaced = candidate.custom_validator is not master.custom_validator
    if master.custom_validator is not None and replaced:
        if candidate.custom_validator is None:
            errors.append(_relaxed(candidate, "custom validator was dropped"))
        else:
            errors.append(_relaxed(candidate, "custom validator was replaced"))

    return errors


def _compare_field_sets(
    candidates: Iterable[FieldDescriptor],
    lookup: Callable[[str], FieldDescriptor | None],
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for candidate in candidates:
        master = lookup(candidate.name)
        if master is None:
            errors.append(
                ValidationError.for_member(
                    f"{field_label(candidate)} '{candidate.name}' is not declared "
                    "by the master schema.",
                    candidate.name,
                )
            )
            continue
        errors.extend(compare_fields(candidate, master))
    return errors


def compare_endpoints(
    candidate: EndpointDescriptor,
    master: EndpointDescriptor,
) -> list[ValidationError]:
    """Compara um endpoint candidato com o descriptor do master que o cobre."""
    errors: list[ValidationError] = []
    name = str(candidate)

    def relaxed(detail: str) -> ValidationError:
        return ValidationError.for_member(
            f"Endpoint '{name}' relaxes the master schema: {detail}.",
            name,
        )

    if candidate.can_send and not master.can_send:
        errors.append(relaxed("can send where the master cannot"))
    if candidate.can_receive and not master.can_receive:
        errors.append(relaxed("can receive where the master cannot"))
    if (
        master.endpoint_type == candidate.endpoint_type
        and master.is_required
        and not candidate.is_required
    ):
        errors.append(relaxed("required in master but optional here"))
    return errors


def _compare_endpoint_sets(
    candidate: ChannelSchema,
    master: ChannelSchema,
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for endpoint in candidate.endpoints:
        if endpoint.endpoint_type == EndpointType.ANY:
            covering = master.get_endpoint(EndpointType.ANY)
        else:
            covering = master.find_endpoint(endpoint.endpoint_type)

        if covering is None:
            errors.append(
                ValidationError.for_member(
                    f"Endpoint '{endpoint}' is not declared by the master schema.",
                    str(endpoint),
                )
            )
            continue
        errors.extend(compare_endpoints(endpoint, covering))
    return errors


def validate_as_restriction_of(
    candidate: ChannelSchema,
    master: ChannelSchema,
) -> list[ValidationError]:
    """
    Verifica se o candidato é restrição do master.

    Args:
        candidate: Schema candidato (ex: fornecido em runtime)
        master: Schema master do tipo de conector

    Returns:
        Um erro por violação, nomeando o elemento e o relaxamento
        (lista vazia = restrição válida)
    """
    if not is_compatible(master, candidate):
        return [
            ValidationError.for_member(
                f"Schema '{candidate.get_logical_identity()}' is not compatible with "
                f"master schema '{master.get_logical_identity()}'.",
                "Provider",
                "ChannelType",
                "Version",
            )
        ]

    errors: list[ValidationError] = []

    extra_bits = int(candidate.capabilities) & ~int(master.capabilities)
    for capability in iter_capabilities(ChannelCapability(extra_bits & int(ALL_CAPABILITIES))):
        errors.append(
            ValidationError.for_member(
                f"Capability '{capability.name}' is not supported by the master schema.",
                capability.name,
            )
        )
    unnamed = undefined_bits(extra_bits)
    if unnamed:
        errors.append(
            ValidationError.for_member(
                f"Capabilities {unnamed:#x} are not defined and not supported by the "
                "master schema.",
                "Capabilities",
            )
        )

    for content_type in sorted(candidate.content_types - master.content_types, key=str):
        errors.append(
            ValidationError.for_member(
                f"Content type '{content_type.name}' is not supported by the master schema.",
                content_type.name,
            )
        )

    extra_auth = candidate.authentication_types - master.authentication_types
    for auth_type in sorted(extra_auth, key=str):
        errors.append(
            ValidationError.for_member(
                f"Authentication type '{auth_type.name}' is not supported by the master schema.",
                auth_type.name,
            )
        )

    errors.extend(_compare_field_sets(candidate.parameters, master.get_parameter))
    errors.extend(
        _compare_field_sets(candidate.message_properties, master.get_message_property)
    )
    errors.extend(_compare_endpoint_sets(candidate, master))

    if master.is_strict and not candidate.is_strict:
        errors.append(
            ValidationError.for_member(
                "Schema relaxes the master schema: strict mode was disabled.",
                "IsStrict",
            )
        )

    return errors
