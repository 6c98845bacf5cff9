"""Factories de clientes externos — provedores de envio de email.

A instância criada aqui é compartilhada por todas as requisições e
fechada no shutdown (ver app.app.lifespan).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.email import create_http_mail_sender, create_smtp_mail_sender
from app.infra.mail import MemoryMailSender

if TYPE_CHECKING:
    from app.protocols.mail_sender import MailSenderProtocol
    from config.settings import BaseSettings, EmailSettings

logger = logging.getLogger(__name__)


def create_mail_sender(
    settings: EmailSettings,
    base_settings: BaseSettings | None = None,
) -> MailSenderProtocol:
    """Cria o sender conforme MAIL_BACKEND.

    - "http": HttpMailSender (API HTTP do provedor)
    - "smtp": SmtpMailSender (relay SMTP)
    - "memory": MemoryMailSender (dev/test only)

    Raises:
        ValueError: Se o backend for desconhecido ou faltar credencial
    """
    backend = settings.backend

    if backend == "http":
        sender: MailSenderProtocol = create_http_mail_sender(settings)
        logger.info("mail_sender_created", extra={"backend": "http"})
        return sender

    if backend == "smtp":
        sender = create_smtp_mail_sender(settings)
        logger.info(
            "mail_sender_created",
            extra={"backend": "smtp", "security": settings.smtp_security},
        )
        return sender

    if backend == "memory":
        environment = base_settings.environment if base_settings else "development"
        if environment != "development":
            logger.warning(
                "memory_mail_sender_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("mail_sender_created", extra={"backend": "memory"})
        return MemoryMailSender()

    msg = f"MAIL_BACKEND inválido: {backend}"
    raise ValueError(msg)
