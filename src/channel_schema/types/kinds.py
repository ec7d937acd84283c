"""
Enumerações de tipos usados pelos descriptors do schema.

Valores são strings estáveis para permitir logs e comparação
sem depender da ordem de declaração.
"""

from enum import StrEnum


class DataType(StrEnum):
    """Tipo de dado de um parâmetro ou propriedade de mensagem."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"


class EndpointType(StrEnum):
    """
    Tipos de endpoint (endereço de origem ou destino) de uma mensagem.

    ANY é o curinga: um descriptor ANY aceita qualquer tipo de endpoint.
    """

    PHONE_NUMBER = "phone"
    EMAIL_ADDRESS = "email"
    URL = "url"
    TOPIC = "topic"
    ID = "endpoint-id"
    USER_ID = "user-id"
    APPLICATION_ID = "app-id"
    DEVICE_ID = "device-id"
    LABEL = "label"
    ANY = "any"


class MessageContentType(StrEnum):
    """Tipos de conteúdo que um canal entende."""

    PLAIN_TEXT = "text/plain"
    HTML = "text/html"
    MULTIPART = "multipart"
    TEMPLATE = "template"
    MEDIA = "media"
    JSON = "application/json"
    BINARY = "binary"


class AuthenticationType(StrEnum):
    """Mecanismos de autenticação aceitos por um canal."""

    NONE = "none"
    API_KEY = "api_key"
    BASIC = "basic"
    TOKEN = "token"
    CLIENT_CREDENTIALS = "client_credentials"
    CERTIFICATE = "certificate"
    CUSTOM = "custom"
