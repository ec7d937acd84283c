"""
Capacidades que um canal pode expor.

Capacidades são flags combináveis: um schema declara o conjunto
completo e um schema derivado só pode manter um subconjunto.
"""

from collections.abc import Iterator
from enum import IntFlag


class ChannelCapability(IntFlag):
    """
    Flags de capacidade de um canal de mensagens.

    Valores estáveis (bit a bit) para permitir comparação de subconjunto
    com operadores `&` e `|`.
    """

    SEND_MESSAGES = 1
    RECEIVE_MESSAGES = 2
    MESSAGE_STATUS_QUERY = 4
    HANDLE_MESSAGE_STATE = 8
    MEDIA_ATTACHMENTS = 16
    TEMPLATES = 32
    BULK_MESSAGING = 64
    HEALTH_CHECK = 128


# Nenhuma capacidade
NO_CAPABILITIES = ChannelCapability(0)

# Capacidade padrão de um schema novo
DEFAULT_CAPABILITIES = ChannelCapability.SEND_MESSAGES

# Todas as flags definidas
ALL_CAPABILITIES = ChannelCapability(sum(capability.value for capability in ChannelCapability))


def undefined_bits(flags: ChannelCapability | int) -> int:
    """Bits presentes em flags que não correspondem a nenhuma capacidade."""
    return int(flags) & ~int(ALL_CAPABILITIES)


def iter_capabilities(flags: ChannelCapability) -> Iterator[ChannelCapability]:
    """
    Itera as flags individuais presentes em um valor combinado.

    Args:
        flags: Valor combinado de capacidades

    Yields:
        Cada ChannelCapability simples contida em flags, em ordem de bit
    """
    for capability in ChannelCapability:
        if capability in flags:
            yield capability


def capability_names(flags: ChannelCapability) -> list[str]:
    """Retorna os nomes das flags presentes (útil para mensagens e logs)."""
    return [capability.name for capability in iter_capabilities(flags)]
