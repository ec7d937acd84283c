"""Validators por canal usados como custom_validator nos schemas de provider.

Estrutura:
- sms/: números E.164 e endereços WhatsApp (Twilio)
- email/: assunto, categorias e agendamento (SendGrid)
- push/: URLs, cores e condições de tópico (FCM)
- shared/: validação de JSON serializado

Cada validator recebe o valor já convertido para o tipo do campo e
retorna lista de ValidationError (vazia = válido).
"""

__all__: list[str] = []
