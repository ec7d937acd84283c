"""Connectors por provider: schemas master, variantes e classes de conector.

Estrutura:
- twilio/: SMS e WhatsApp
- sendgrid/: Email
- firebase/: Push (FCM)
- facebook/: Messenger

O envio HTTP/SDK é feito por um MessageTransportProtocol injetado;
aqui ficam apenas os contratos declarados de cada provider.
"""

__all__: list[str] = []
