"""SendGrid: schema de email e conector."""

from api.connectors.sendgrid.connector import SendGridEmailConnector
from api.connectors.sendgrid.schemas import (
    EMAIL_CHANNEL,
    PROVIDER,
    sendgrid_email_schema,
    simple_email_schema,
    transactional_email_schema,
)

__all__ = [
    "EMAIL_CHANNEL",
    "PROVIDER",
    "SendGridEmailConnector",
    "sendgrid_email_schema",
    "simple_email_schema",
    "transactional_email_schema",
]
