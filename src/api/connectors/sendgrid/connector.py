"""Conector SendGrid registrável no ChannelRegistry."""

from __future__ import annotations

from api.connectors.sendgrid.schemas import sendgrid_email_schema
from app.connectors import TransportChannelConnector
from app.registry import channel_schema_factory


@channel_schema_factory(sendgrid_email_schema)
class SendGridEmailConnector(TransportChannelConnector):
    """Email via SendGrid v3 Mail Send API."""
