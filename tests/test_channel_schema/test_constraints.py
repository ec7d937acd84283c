"""Testes do avaliador de restrições de descriptors."""

from __future__ import annotations

from channel_schema.descriptors import MessagePropertyDescriptor, ParameterDescriptor
from channel_schema.rules import evaluate
from channel_schema.types import DataType, ValidationError


class TestAbsentValues:
    """Valores ausentes, obrigatoriedade e defaults."""

    def test_required_missing(self) -> None:
        """Parâmetro obrigatório ausente gera erro único."""
        param = ParameterDescriptor("AccountSid", DataType.STRING, is_required=True)
        errors = evaluate(param, None)
        assert len(errors) == 1
        assert errors[0].message == "Required parameter 'AccountSid' is missing."
        assert errors[0].member_names == ("AccountSid",)

    def test_required_blank_string_is_missing(self) -> None:
        """String só com espaços conta como ausente."""
        param = ParameterDescriptor("AccountSid", DataType.STRING, is_required=True)
        assert len(evaluate(param, "   ")) == 1

    def test_required_property_label(self) -> None:
        """Propriedade de mensagem usa o rótulo próprio."""
        prop = MessagePropertyDescriptor("To", DataType.STRING, is_required=True)
        assert evaluate(prop, None)[0].message == "Required message property 'To' is missing."

    def test_optional_missing_is_valid(self) -> None:
        """Opcional ausente não gera erro."""
        assert evaluate(ParameterDescriptor("X", DataType.STRING), None) == []

    def test_required_with_default_is_satisfied(self) -> None:
        """Default válido satisfaz campo obrigatório ausente."""
        param = ParameterDescriptor(
            "ValidityPeriod", DataType.INTEGER, is_required=True, default_value=14400
        )
        assert evaluate(param, None) == []

    def test_default_is_checked_against_constraints(self) -> None:
        """O default é avaliado como se fosse o valor."""
        param = ParameterDescriptor(
            "Retries", DataType.INTEGER, default_value=50, max_value=10
        )
        errors = evaluate(param, None)
        assert len(errors) == 1
        assert "greater than the maximum" in errors[0].message


class TestTypeChecks:
    """Incompatibilidade de tipo."""

    def test_incompatible_type_stops_evaluation(self) -> None:
        """Erro de tipo é o único erro reportado."""
        param = ParameterDescriptor(
            "Retries", DataType.INTEGER, min_value=1, allowed_values=(1, 2)
        )
        errors = evaluate(param, "many")
        assert errors == [
            ValidationError.for_member(
                "Parameter 'Retries' has an incompatible type. "
                "Expected: integer, Actual: str.",
                "Retries",
            )
        ]

    def test_bool_is_not_integer(self) -> None:
        """bool nunca é aceito como inteiro."""
        assert len(evaluate(ParameterDescriptor("N", DataType.INTEGER), True)) == 1

    def test_string_numeric_accepted_for_integer(self) -> None:
        """String inteira é aceita para INTEGER."""
        assert evaluate(ParameterDescriptor("N", DataType.INTEGER, max_value=100), "42") == []


class TestLengthAndRange:
    """Restrições de tamanho e faixa."""

    def test_min_and_max_length(self) -> None:
        """Tamanho fora dos limites."""
        param = ParameterDescriptor("Code", DataType.STRING, min_length=3, max_length=5)
        assert evaluate(param, "abcd") == []
        assert "at least 3" in evaluate(param, "ab")[0].message
        assert "at most 5" in evaluate(param, "abcdef")[0].message

    def test_range(self) -> None:
        """Valor numérico fora da faixa."""
        param = ParameterDescriptor("Ttl", DataType.NUMBER, min_value=0, max_value=10)
        assert evaluate(param, 5.5) == []
        assert "less than the minimum" in evaluate(param, -1)[0].message
        assert "greater than the maximum" in evaluate(param, 11)[0].message

    def test_length_and_pattern_reported_together(self) -> None:
        """Checks independentes acumulam erros."""
        param = ParameterDescriptor(
            "Code", DataType.STRING, max_length=3, pattern=r"[0-9]+"
        )
        errors = evaluate(param, "abcd")
        assert len(errors) == 2

    def test_sensitive_value_never_echoed(self) -> None:
        """Valor sensível não aparece na mensagem."""
        param = ParameterDescriptor(
            "Pin", DataType.INTEGER, is_sensitive=True, max_value=999
        )
        errors = evaluate(param, 123456)
        assert "123456" not in errors[0].message
        assert "***" in errors[0].message

    def test_sensitive_length_never_echoed(self) -> None:
        """Tamanho real de valor sensível não aparece na mensagem."""
        param = ParameterDescriptor(
            "ApiKey", DataType.STRING, is_sensitive=True, min_length=32, max_length=40
        )
        too_short = evaluate(param, "k" * 7)
        too_long = evaluate(param, "k" * 41)

        assert too_short[0].message == (
            "Parameter 'ApiKey' must be at least 32 characters long."
        )
        assert "41" not in too_long[0].message
        assert "actual" not in too_long[0].message

    def test_non_sensitive_length_shows_actual(self) -> None:
        """Campo comum informa o tamanho recebido."""
        param = ParameterDescriptor("Code", DataType.STRING, max_length=2)
        assert "(actual: 3)" in evaluate(param, "abc")[0].message


class TestPatternAndAllowed:
    """Pattern e allowed_values."""

    def test_pattern_is_full_match(self) -> None:
        """Pattern exige casamento completo."""
        param = ParameterDescriptor("Sid", DataType.STRING, pattern=r"AC[0-9a-f]{4}")
        assert evaluate(param, "ACabcd") == []
        errors = evaluate(param, "ACabcdX")
        assert errors[0].message == (
            "Parameter 'Sid' does not match the required pattern 'AC[0-9a-f]{4}'."
        )

    def test_allowed_values_case_sensitive_by_default(self) -> None:
        """Sem ignore_case a caixa importa."""
        prop = MessagePropertyDescriptor(
            "Priority", DataType.STRING, allowed_values=("low", "high")
        )
        assert evaluate(prop, "low") == []
        errors = evaluate(prop, "LOW")
        assert errors[0].message == (
            "Message property 'Priority' has an invalid value 'LOW'. "
            "Allowed values: [low, high]."
        )

    def test_allowed_values_ignore_case(self) -> None:
        """ignore_case compara sem diferenciar caixa."""
        prop = MessagePropertyDescriptor(
            "Priority", DataType.STRING, allowed_values=("low", "high"), ignore_case=True
        )
        assert evaluate(prop, "HIGH") == []

    def test_allowed_values_compared_after_coercion(self) -> None:
        """Valores numéricos em texto casam com allowed_values numéricos."""
        param = ParameterDescriptor("Level", DataType.INTEGER, allowed_values=(1, 2, 3))
        assert evaluate(param, "2") == []
        assert len(evaluate(param, 4)) == 1

    def test_empty_allowed_values_is_unconstrained(self) -> None:
        """allowed_values vazio não restringe."""
        param = ParameterDescriptor("X", DataType.STRING, allowed_values=())
        assert evaluate(param, "anything") == []


class TestCustomValidator:
    """Validador customizado."""

    def test_custom_validator_runs_last_with_typed_value(self) -> None:
        """Recebe o valor já convertido e seus erros são anexados."""
        seen: list[object] = []

        def even_only(value):
            seen.append(value)
            if value % 2:
                yield ValidationError.for_member("Value must be even", "Count")

        param = ParameterDescriptor(
            "Count", DataType.INTEGER, max_value=5, custom_validator=even_only
        )
        errors = evaluate(param, "7")
        assert seen == [7]
        assert [e.message for e in errors][-1] == "Value must be even"
        assert len(errors) == 2

    def test_custom_validator_skipped_on_type_error(self) -> None:
        """Erro de tipo impede a execução do validador."""
        calls: list[object] = []
        param = ParameterDescriptor(
            "Count",
            DataType.INTEGER,
            custom_validator=lambda v: calls.append(v) or [],
        )
        evaluate(param, "x")
        assert calls == []

    def test_evaluation_is_deterministic(self) -> None:
        """Mesmo descriptor e valor produzem o mesmo resultado."""
        param = ParameterDescriptor("Code", DataType.STRING, max_length=2, pattern="[a-z]+")
        assert evaluate(param, "ABC") == evaluate(param, "ABC")
