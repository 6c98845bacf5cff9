"""Connector Email — adapters de borda para provedores de envio.

Implementações de MailSenderProtocol:
- http_client.py: API HTTP (Resend e compatíveis) via httpx
- smtp_client.py: relay SMTP via aiosmtplib
"""

from api.connectors.email.http_client import (
    HttpMailSender,
    build_api_payload,
    create_http_mail_sender,
)
from api.connectors.email.smtp_client import (
    SmtpMailSender,
    build_mime_message,
    create_smtp_mail_sender,
)

__all__ = [
    "HttpMailSender",
    "SmtpMailSender",
    "build_api_payload",
    "build_mime_message",
    "create_http_mail_sender",
    "create_smtp_mail_sender",
]
