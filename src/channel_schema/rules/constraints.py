"""
Avaliador de restrições de um descriptor contra um valor concreto.

Ordem de avaliação:
1. Ausente + default declarado → avalia o default no lugar do valor
2. Ausente + obrigatório → um erro, encerra
3. Ausente + opcional → nenhum erro
4. Coerção de tipo → um erro, encerra (demais checks exigem valor tipado)
5. Tamanho (strings) / faixa (numéricos), independentes
6. Pattern (full-match, strings)
7. Pertinência em allowed_values
8. Validador customizado (sempre por último)

Função pura: mesmo (descriptor, valor) produz sempre o mesmo resultado.
"""

from __future__ import annotations

from channel_schema.descriptors.field import FieldDescriptor, MessagePropertyDescriptor
from channel_schema.rules.coercion import CoercionError, coerce_value, is_absent
from channel_schema.types.errors import ValidationError
from channel_schema.types.kinds import DataType
from channel_schema.types.values import PropertyValue


def field_label(descriptor: FieldDescriptor) -> str:
    """Rótulo do tipo de campo usado nas mensagens de erro."""
    if isinstance(descriptor, MessagePropertyDescriptor):
        return "Message property"
    return "Parameter"


def _display(descriptor: FieldDescriptor, value: object) -> str:
    # Valores sensíveis nunca aparecem em mensagens
    if descriptor.is_sensitive:
        return "***"
    return str(value)


def _check_length(descriptor: FieldDescriptor, value: str) -> list[ValidationError]:
    errors: list[ValidationError] = []
    label = field_label(descriptor)
    length = len(value)
    # Tamanho de valor sensível também não aparece
    actual = "" if descriptor.is_sensitive else f" (actual: {length})"

    if descriptor.min_length is not None and length < descriptor.min_length:
        errors.append(
            ValidationError.for_member(
                f"{label} '{descriptor.name}' must be at least "
                f"{descriptor.min_length} characters long{actual}.",
                descriptor.name,
            )
        )
    if descriptor.max_length is not None and length > descriptor.max_length:
        errors.append(
            ValidationError.for_member(
                f"{label} '{descriptor.name}' must be at most "
                f"{descriptor.max_length} characters long{actual}.",
                descriptor.name,
            )
        )
    return errors


def _check_range(descriptor: FieldDescriptor, value: int | float) -> list[ValidationError]:
    errors: list[ValidationError] = []
    label = field_label(descriptor)
    shown = _display(descriptor, value)

    if descriptor.min_value is not None and value < descriptor.min_value:
        errors.append(
            ValidationError.for_member(
                f"{label} '{descriptor.name}' value {shown} is less than "
                f"the minimum {descriptor.min_value}.",
                descriptor.name,
            )
        )
    if descriptor.max_value is not None and value > descriptor.max_value:
        errors.append(
            ValidationError.for_member(
                f"{label} '{descriptor.name}' value {shown} is greater than "
                f"the maximum {descriptor.max_value}.",
                descriptor.name,
            )
        )
    return errors


def _check_pattern(descriptor: FieldDescriptor, value: str) -> list[ValidationError]:
    pattern = descriptor.compiled_pattern
    if pattern is None or pattern.fullmatch(value) is not None:
        return []
    return [
        ValidationError.for_member(
            f"{field_label(descriptor)} '{descriptor.name}' does not match "
            f"the required pattern '{descriptor.pattern}'.",
            descriptor.name,
        )
    ]


def normalize_allowed(descriptor: FieldDescriptor, value: PropertyValue) -> PropertyValue:
    """Forma de comparação de um valor para allowed_values."""
    if isinstance(value, str) and descriptor.ignore_case:
        return value.casefold()
    return value


def allowed_set(descriptor: FieldDescriptor) -> set[PropertyValue]:
    """
    Conjunto normalizado dos allowed_values do descriptor.

    Valores declarados que não são coercíveis para o tipo do campo
    são ignorados (nunca poderiam ser aceitos).
    """
    normalized: set[PropertyValue] = set()
    for allowed in descriptor.allowed_values or ():
        try:
            typed = coerce_value(descriptor.data_type, allowed)
        except CoercionError:
            continue
        normalized.add(normalize_allowed(descriptor, typed))
    return normalized


def _check_allowed(descriptor: FieldDescriptor, value: PropertyValue) -> list[ValidationError]:
    if not descriptor.allowed_values:
        return []
    if normalize_allowed(descriptor, value) in allowed_set(descriptor):
        return []

    allowed_text = ", ".join(str(v) for v in descriptor.allowed_values)
    return [
        ValidationError.for_member(
            f"{field_label(descriptor)} '{descriptor.name}' has an invalid value "
            f"'{_display(descriptor, value)}'. Allowed values: [{allowed_text}].",
            descriptor.name,
        )
    ]


def _run_custom(descriptor: FieldDescriptor, value: PropertyValue) -> list[ValidationError]:
    if descriptor.custom_validator is None:
        return []
    return list(descriptor.custom_validator(value))


def evaluate(descriptor: FieldDescriptor, value: object) -> list[ValidationError]:
    """
    Avalia um valor contra as restrições de um descriptor.

    Args:
        descriptor: Descriptor do parâmetro ou propriedade
        value: Valor bruto (None = ausente)

    Returns:
        Lista de erros (vazia = válido)
    """
    if is_absent(value) and descriptor.has_default:
        value = descriptor.default_value

    if is_absent(value):
        if descriptor.is_required:
            return [
                ValidationError.for_member(
                    f"Required {field_label(descriptor).lower()} "
                    f"'{descriptor.name}' is missing.",
                    descriptor.name,
                )
            ]
        return []

    try:
        typed = coerce_value(descriptor.data_type, value)
    except CoercionError:
        return [
            ValidationError.for_member(
                f"{field_label(descriptor)} '{descriptor.name}' has an incompatible type. "
                f"Expected: {descriptor.data_type}, Actual: {type(value).__name__}.",
                descriptor.name,
            )
        ]

    errors: list[ValidationError] = []

    if isinstance(typed, str):
        errors.extend(_check_length(descriptor, typed))
    elif descriptor.data_type in (DataType.INTEGER, DataType.NUMBER):
        errors.extend(_check_range(descriptor, typed))

    if isinstance(typed, str):
        errors.extend(_check_pattern(descriptor, typed))

    errors.extend(_check_allowed(descriptor, typed))
    errors.extend(_run_custom(descriptor, typed))
    return errors
