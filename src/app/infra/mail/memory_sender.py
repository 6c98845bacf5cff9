"""Sender em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Nenhum email sai do processo.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from utils.errors import MailDeliveryError

if TYPE_CHECKING:
    from app.protocols.models import MessageKind, OutboundMessage

logger = logging.getLogger(__name__)


class MemoryMailSender:
    """Guarda as mensagens enviadas em uma lista, na ordem de envio.

    Args:
        fail_kinds: Tipos de mensagem que devem falhar (simulação de erro)
    """

    def __init__(self, fail_kinds: frozenset[MessageKind] | None = None) -> None:
        self._sent: list[OutboundMessage] = []
        self._attempts: list[OutboundMessage] = []
        self._fail_kinds = fail_kinds or frozenset()

    @property
    def sent(self) -> list[OutboundMessage]:
        """Mensagens aceitas (cópia para evitar mutação externa)."""
        return list(self._sent)

    @property
    def attempts(self) -> list[OutboundMessage]:
        """Todas as tentativas, incluindo as que falharam."""
        return list(self._attempts)

    async def send(self, message: OutboundMessage) -> str:
        self._attempts.append(message)
        if message.kind in self._fail_kinds:
            raise MailDeliveryError(f"memory sender configurado para falhar em {message.kind}")
        self._sent.append(message)
        message_id = f"memory-{uuid.uuid4().hex}"
        logger.info("memory_mail_stored", extra={"kind": str(message.kind)})
        return message_id

    async def aclose(self) -> None:
        return None

    def clear(self) -> None:
        self._sent.clear()
        self._attempts.clear()
