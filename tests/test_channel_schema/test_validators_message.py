"""Testes de validação de mensagens contra o schema."""

from __future__ import annotations

import pytest

from channel_schema import (
    ChannelSchema,
    DataType,
    Endpoint,
    EndpointType,
    Message,
    MessageContent,
    MessageContentType,
    new_schema,
    validate_message,
)


@pytest.fixture
def email_schema() -> ChannelSchema:
    """Schema de email com endpoint que não pode receber."""
    return (
        new_schema("Acme", "Email", "1.0.0")
        .add_content_type(MessageContentType.PLAIN_TEXT)
        .add_content_type(MessageContentType.HTML)
        .add_endpoint(EndpointType.EMAIL_ADDRESS, can_receive=False)
        .add_endpoint(EndpointType.USER_ID)
        .add_message_property(
            "Priority", DataType.STRING, allowed_values=("low", "normal", "high")
        )
        .build()
    )


def _email(address: str = "a@example.com") -> Endpoint:
    return Endpoint(type=EndpointType.EMAIL_ADDRESS, address=address)


def _user(user_id: str = "u-1") -> Endpoint:
    return Endpoint(type=EndpointType.USER_ID, address=user_id)


class TestProperties:
    """Propriedades de mensagem."""

    def test_value_outside_allowed_values(self, email_schema: ChannelSchema) -> None:
        """Priority fora da enumeração gera exatamente um erro."""
        message = Message(properties={"Priority": "urgent"})
        errors = validate_message(email_schema, message)
        assert len(errors) == 1
        assert errors[0].references("Priority")

    def test_allowed_value_is_valid(self, email_schema: ChannelSchema) -> None:
        """Valor permitido é aceito."""
        assert validate_message(email_schema, Message(properties={"priority": "high"})) == []

    def test_unknown_property_ignored_when_not_strict(
        self, email_schema: ChannelSchema
    ) -> None:
        """Propriedade não declarada é ignorada fora do modo estrito."""
        assert validate_message(email_schema, Message(properties={"Foo": "bar"})) == []

    def test_unknown_property_rejected_when_strict(self) -> None:
        """Modo estrito rejeita propriedade não declarada."""
        schema = (
            new_schema("Acme", "Email", "1.0.0")
            .add_message_property("Subject", DataType.STRING)
            .with_strict_mode()
            .build()
        )
        errors = validate_message(schema, Message(properties={"Subject": "x", "Foo": 1}))
        assert len(errors) == 1
        assert errors[0].message == (
            "Message property 'Foo' is not supported by schema 'Acme/Email/1.0.0'."
        )


class TestEndpoints:
    """Endpoints de origem e destino."""

    def test_endpoint_that_cannot_receive_as_receiver(
        self, email_schema: ChannelSchema
    ) -> None:
        """EMAIL_ADDRESS sem can_receive é inválido como destinatário."""
        errors = validate_message(email_schema, Message(receiver=_email()))
        assert len(errors) == 1
        assert errors[0].references("Receiver")
        assert "cannot receive messages" in errors[0].message

    def test_endpoint_that_cannot_receive_as_sender(
        self, email_schema: ChannelSchema
    ) -> None:
        """O mesmo endpoint como remetente é válido."""
        assert validate_message(email_schema, Message(sender=_email())) == []

    def test_undeclared_endpoint_type(self, email_schema: ChannelSchema) -> None:
        """Tipo não declarado e sem ANY é rejeitado."""
        phone = Endpoint(type=EndpointType.PHONE_NUMBER, address="+5511999999999")
        errors = validate_message(email_schema, Message(sender=phone))
        assert errors[0].message == (
            "Sender endpoint type 'PHONE_NUMBER' is not supported. "
            "Supported types: [EMAIL_ADDRESS, USER_ID]."
        )
        assert errors[0].references("Sender")

    def test_wildcard_accepts_any_type(self) -> None:
        """ANY aceita tipos não declarados explicitamente."""
        schema = new_schema("Acme", "Chat", "1").allow_any_endpoint().build()
        message = Message(
            sender=Endpoint(type=EndpointType.TOPIC, address="news"),
            receiver=Endpoint(type=EndpointType.DEVICE_ID, address="dev-1"),
        )
        assert validate_message(schema, message) == []

    def test_exact_descriptor_overrides_wildcard(self) -> None:
        """Descriptor exato prevalece sobre ANY na checagem de direção."""
        schema = (
            new_schema("Acme", "Chat", "1")
            .allow_any_endpoint()
            .add_endpoint(EndpointType.URL, can_send=False)
            .build()
        )
        message = Message(sender=Endpoint(type=EndpointType.URL, address="https://x"))
        errors = validate_message(schema, message)
        assert len(errors) == 1
        assert "cannot send messages" in errors[0].message

    def test_required_endpoint_missing(self) -> None:
        """Endpoint obrigatório ausente gera erro."""
        schema = (
            new_schema("Acme", "Push", "1")
            .add_endpoint(EndpointType.DEVICE_ID, can_send=False, is_required=True)
            .add_endpoint(EndpointType.APPLICATION_ID)
            .build()
        )
        sender = Endpoint(type=EndpointType.APPLICATION_ID, address="app")
        errors = validate_message(schema, Message(sender=sender))
        assert len(errors) == 1
        assert errors[0].message == "Required endpoint type 'DEVICE_ID' is missing."
        assert errors[0].references("DEVICE_ID")

    def test_required_endpoint_present(self) -> None:
        """Endpoint obrigatório presente satisfaz o schema."""
        schema = (
            new_schema("Acme", "Push", "1")
            .add_endpoint(EndpointType.DEVICE_ID, can_send=False, is_required=True)
            .build()
        )
        receiver = Endpoint(type=EndpointType.DEVICE_ID, address="dev")
        assert validate_message(schema, Message(receiver=receiver)) == []


class TestContent:
    """Tipo de conteúdo."""

    def test_unsupported_content_type(self, email_schema: ChannelSchema) -> None:
        """Conteúdo fora dos tipos declarados é rejeitado."""
        content = MessageContent(content_type=MessageContentType.MEDIA)
        errors = validate_message(email_schema, Message(content=content))
        assert len(errors) == 1
        assert errors[0].references("Content")
        assert "HTML, PLAIN_TEXT" in errors[0].message

    def test_supported_content_type(self, email_schema: ChannelSchema) -> None:
        """Conteúdo declarado é aceito."""
        content = MessageContent(content_type=MessageContentType.HTML, body="<p>oi</p>")
        assert validate_message(email_schema, Message(content=content)) == []

    def test_all_problems_aggregated(self, email_schema: ChannelSchema) -> None:
        """Endpoint, conteúdo e propriedades são reportados juntos."""
        message = Message(
            receiver=_email(),
            content=MessageContent(content_type=MessageContentType.JSON),
            properties={"Priority": "urgent"},
        )
        errors = validate_message(email_schema, message)
        assert {name for e in errors for name in e.member_names} == {
            "Receiver",
            "Content",
            "Priority",
        }
