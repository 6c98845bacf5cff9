"""Sender de email via relay SMTP (aiosmtplib).

Cada envio abre a própria conexão (connect → STARTTLS/TLS → login → send
→ quit), então a instância pode ser compartilhada entre requisições
concorrentes sem serializar acesso a um socket.
"""

from __future__ import annotations

import logging
from email.message import EmailMessage
from email.utils import formatdate, make_msgid, parseaddr
from typing import TYPE_CHECKING, Literal

import aiosmtplib

from utils.errors import MailProviderError, MailTransportError

if TYPE_CHECKING:
    from app.protocols.models import OutboundMessage
    from config.settings import EmailSettings

logger = logging.getLogger(__name__)

SmtpSecurity = Literal["starttls", "tls", "none"]


def build_mime_message(message: OutboundMessage) -> EmailMessage:
    """Monta mensagem multipart/alternative (texto + HTML)."""
    mime = EmailMessage()
    mime["From"] = message.from_address
    mime["To"] = message.to
    if message.reply_to:
        mime["Reply-To"] = message.reply_to
    mime["Subject"] = message.subject
    mime["Date"] = formatdate(usegmt=True)

    sender_domain = parseaddr(message.from_address)[1].rpartition("@")[2] or None
    mime["Message-ID"] = make_msgid(domain=sender_domain)

    mime.set_content(message.text_body)
    mime.add_alternative(message.html_body, subtype="html")
    return mime


class SmtpMailSender:
    """Implementação de MailSenderProtocol sobre SMTP."""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str = "",
        password: str = "",
        security: SmtpSecurity = "starttls",
        timeout_seconds: float = 15.0,
    ) -> None:
        if not host:
            raise ValueError("host SMTP é obrigatório")
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._security = security
        self._timeout_seconds = timeout_seconds

    async def send(self, message: OutboundMessage) -> str:
        """Envia a mensagem e retorna o Message-ID gerado.

        Raises:
            MailProviderError: Servidor recusou (auth, remetente, destinatário)
            MailTransportError: Falha de conexão ou timeout
        """
        try:
            mime = build_mime_message(message)
        except ValueError as exc:
            logger.warning(
                "smtp_invalid_message",
                extra={"kind": str(message.kind), "error_type": type(exc).__name__},
            )
            raise MailProviderError(
                f"mensagem inválida: {type(exc).__name__}",
                error_name=type(exc).__name__,
            ) from exc

        try:
            await aiosmtplib.send(
                mime,
                hostname=self._host,
                port=self._port,
                username=self._username or None,
                password=self._password or None,
                use_tls=self._security == "tls",
                start_tls=self._security == "starttls",
                timeout=self._timeout_seconds,
            )
        except (
            aiosmtplib.SMTPConnectError,
            aiosmtplib.SMTPTimeoutError,
            aiosmtplib.SMTPServerDisconnected,
        ) as exc:
            logger.warning(
                "smtp_connection_error",
                extra={"kind": str(message.kind), "error_type": type(exc).__name__},
            )
            raise MailTransportError(f"SMTP connection error: {type(exc).__name__}") from exc
        except aiosmtplib.SMTPResponseException as exc:
            logger.warning(
                "smtp_rejected",
                extra={"kind": str(message.kind), "smtp_code": exc.code},
            )
            raise MailProviderError(
                f"SMTP error {exc.code}: {exc.message}",
                status_code=exc.code,
                error_name=type(exc).__name__,
            ) from exc
        except aiosmtplib.SMTPException as exc:
            logger.warning(
                "smtp_error",
                extra={"kind": str(message.kind), "error_type": type(exc).__name__},
            )
            raise MailProviderError(
                f"SMTP error: {type(exc).__name__}",
                error_name=type(exc).__name__,
            ) from exc
        except (OSError, TimeoutError) as exc:
            logger.warning(
                "smtp_network_error",
                extra={"kind": str(message.kind), "error_type": type(exc).__name__},
            )
            raise MailTransportError(f"SMTP network error: {type(exc).__name__}") from exc

        return str(mime["Message-ID"])

    async def aclose(self) -> None:
        """Sem recursos persistentes: conexões são por envio."""


def create_smtp_mail_sender(settings: EmailSettings) -> SmtpMailSender:
    """Factory para criar o sender SMTP a partir das settings."""
    return SmtpMailSender(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.smtp_username,
        password=settings.smtp_password,
        security=settings.smtp_security,
        timeout_seconds=settings.timeout_seconds,
    )
