"""Testes do modelo de descriptors e tipos básicos."""

from __future__ import annotations

import pytest

from channel_schema.descriptors import (
    EndpointDescriptor,
    MessagePropertyDescriptor,
    ParameterDescriptor,
)
from channel_schema.types import (
    ALL_CAPABILITIES,
    ChannelCapability,
    DataType,
    EndpointType,
    ValidationError,
    capability_names,
    iter_capabilities,
    undefined_bits,
)
from utils.errors import InvalidArgumentError, SchemaDefinitionError


class TestFieldDescriptorConstruction:
    """Invariantes de construção de FieldDescriptor."""

    def test_valid_descriptor_keeps_options(self) -> None:
        """Opções informadas ficam disponíveis no descriptor."""
        param = ParameterDescriptor(
            "ApiKey", DataType.STRING, is_required=True, is_sensitive=True, min_length=8
        )
        assert param.name == "ApiKey"
        assert param.is_required is True
        assert param.is_sensitive is True
        assert param.min_length == 8

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, name: object) -> None:
        """Nome vazio ou nulo é erro de programação."""
        with pytest.raises(InvalidArgumentError):
            ParameterDescriptor(name, DataType.STRING)  # type: ignore[arg-type]

    def test_invalid_argument_is_schema_definition_error(self) -> None:
        """InvalidArgumentError pertence à hierarquia de erros de definição."""
        with pytest.raises(SchemaDefinitionError):
            ParameterDescriptor("", DataType.STRING)

    def test_data_type_string_coerced(self) -> None:
        """data_type informado como string vira DataType."""
        param = ParameterDescriptor("Retries", "integer")  # type: ignore[arg-type]
        assert param.data_type is DataType.INTEGER

    def test_unknown_data_type_rejected(self) -> None:
        """data_type desconhecido é rejeitado."""
        with pytest.raises(InvalidArgumentError, match="data_type"):
            ParameterDescriptor("X", "date")  # type: ignore[arg-type]

    def test_min_length_greater_than_max_rejected(self) -> None:
        """min_length > max_length é incoerente."""
        with pytest.raises(InvalidArgumentError, match="min_length"):
            ParameterDescriptor("X", DataType.STRING, min_length=5, max_length=2)

    def test_min_value_greater_than_max_rejected(self) -> None:
        """min_value > max_value é incoerente."""
        with pytest.raises(InvalidArgumentError, match="min_value"):
            ParameterDescriptor("X", DataType.INTEGER, min_value=10, max_value=1)

    def test_negative_length_rejected(self) -> None:
        """Limites de tamanho não podem ser negativos."""
        with pytest.raises(InvalidArgumentError):
            ParameterDescriptor("X", DataType.STRING, max_length=-1)

    def test_invalid_pattern_rejected(self) -> None:
        """Regex inválida falha na construção."""
        with pytest.raises(InvalidArgumentError, match="pattern"):
            ParameterDescriptor("X", DataType.STRING, pattern="([a-z")

    def test_allowed_values_copied_to_tuple(self) -> None:
        """allowed_values não compartilha a lista do chamador."""
        values = ["low", "high"]
        prop = MessagePropertyDescriptor("Priority", DataType.STRING, allowed_values=values)
        values.append("urgent")
        assert prop.allowed_values == ("low", "high")

    def test_key_is_case_insensitive(self) -> None:
        """key normaliza o nome para lookup."""
        assert ParameterDescriptor("ApiKey", DataType.STRING).key == "apikey"

    def test_has_default(self) -> None:
        """has_default reflete default_value declarado."""
        assert ParameterDescriptor("X", DataType.BOOLEAN, default_value=False).has_default
        assert not ParameterDescriptor("X", DataType.BOOLEAN).has_default

    def test_description_ignored_in_equality(self) -> None:
        """Descrição é documentação, não estrutura."""
        a = ParameterDescriptor("X", DataType.STRING, description="a")
        b = ParameterDescriptor("X", DataType.STRING, description="b")
        assert a == b

    def test_descriptor_is_immutable(self) -> None:
        """Descriptors são congelados."""
        param = ParameterDescriptor("X", DataType.STRING)
        with pytest.raises(AttributeError):
            param.is_required = True  # type: ignore[misc]

    def test_log_dict_hides_default(self) -> None:
        """to_log_dict não expõe valores."""
        param = ParameterDescriptor(
            "Token", DataType.STRING, is_sensitive=True, default_value="secret"
        )
        assert "secret" not in str(param.to_log_dict())


class TestEndpointDescriptor:
    """Testes para EndpointDescriptor."""

    def test_defaults(self) -> None:
        """Endpoint envia e recebe e é opcional por padrão."""
        endpoint = EndpointDescriptor(EndpointType.EMAIL_ADDRESS)
        assert endpoint.can_send and endpoint.can_receive
        assert not endpoint.is_required

    def test_type_string_coerced(self) -> None:
        """Tipo informado pelo valor vira EndpointType."""
        assert EndpointDescriptor("phone").endpoint_type is EndpointType.PHONE_NUMBER  # type: ignore[arg-type]

    def test_invalid_type_rejected(self) -> None:
        """Tipo desconhecido é rejeitado."""
        with pytest.raises(InvalidArgumentError):
            EndpointDescriptor("fax")  # type: ignore[arg-type]

    def test_wildcard_matches_everything(self) -> None:
        """ANY cobre qualquer tipo."""
        wildcard = EndpointDescriptor(EndpointType.ANY)
        assert wildcard.is_wildcard
        assert wildcard.matches(EndpointType.DEVICE_ID)

    def test_exact_matches_only_own_type(self) -> None:
        """Descriptor exato cobre apenas o próprio tipo."""
        endpoint = EndpointDescriptor(EndpointType.PHONE_NUMBER)
        assert endpoint.matches(EndpointType.PHONE_NUMBER)
        assert not endpoint.matches(EndpointType.EMAIL_ADDRESS)

    def test_str_is_type_name(self) -> None:
        """str() usa o nome do tipo."""
        assert str(EndpointDescriptor(EndpointType.EMAIL_ADDRESS)) == "EMAIL_ADDRESS"


class TestCapabilitiesAndErrors:
    """Flags de capacidade e ValidationError."""

    def test_iter_capabilities_in_bit_order(self) -> None:
        """Itera flags simples em ordem de bit."""
        flags = ChannelCapability.TEMPLATES | ChannelCapability.SEND_MESSAGES
        assert list(iter_capabilities(flags)) == [
            ChannelCapability.SEND_MESSAGES,
            ChannelCapability.TEMPLATES,
        ]

    def test_capability_names(self) -> None:
        """Nomes das flags presentes."""
        flags = ChannelCapability.BULK_MESSAGING | ChannelCapability.HEALTH_CHECK
        assert capability_names(flags) == ["BULK_MESSAGING", "HEALTH_CHECK"]

    def test_undefined_bits(self) -> None:
        """Apenas bits fora das flags definidas são retornados."""
        assert int(ALL_CAPABILITIES) == 255
        assert undefined_bits(ChannelCapability.HEALTH_CHECK) == 0
        assert undefined_bits(ChannelCapability(1 | 256 | 1024)) == 256 | 1024

    def test_validation_error_references_case_insensitive(self) -> None:
        """references compara nomes sem diferenciar caixa."""
        error = ValidationError.for_member("boom", "ApiKey")
        assert error.references("apikey")
        assert not error.references("Other")

    def test_validation_error_str_and_log_dict(self) -> None:
        """str() é a mensagem; log dict traz os membros."""
        error = ValidationError.for_member("boom", "A", "B")
        assert str(error) == "boom"
        assert error.to_log_dict() == {"message": "boom", "member_names": ["A", "B"]}
