"""Protocolo do serviço externo de envio de email."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import OutboundMessage


@runtime_checkable
class MailSenderProtocol(Protocol):
    """Contrato mínimo para enviar um email composto.

    A instância é criada uma vez no startup e compartilhada entre
    requisições: implementações devem suportar chamadas concorrentes.
    """

    async def send(self, message: OutboundMessage) -> str:
        """Envia a mensagem e retorna o id atribuído pelo provedor.

        Raises:
            MailDeliveryError: Se o provedor ou o transporte falhar.
        """
        ...

    async def aclose(self) -> None: ...
