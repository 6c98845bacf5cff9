"""Exceções de domínio para falhas de entrega de email."""

from __future__ import annotations


class MailDeliveryError(RuntimeError):
    """Base para falhas do serviço de envio de email.

    Nunca carregar corpo da mensagem ou endereços no texto do erro.
    """


class MailProviderError(MailDeliveryError):
    """Provedor recebeu a requisição e recusou o envio."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_name = error_name


class MailTransportError(MailDeliveryError):
    """Falha de rede, timeout ou conexão com o provedor/relay."""
