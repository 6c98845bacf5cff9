"""Envio sequencial dos emails compostos para uma submissão."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from app.protocols.models import DispatchOutcome, DispatchReport
from utils.errors import MailDeliveryError

if TYPE_CHECKING:
    from app.protocols.mail_sender import MailSenderProtocol
    from app.protocols.models import OutboundMessage

logger = logging.getLogger(__name__)

ConfirmationFailurePolicy = Literal["best_effort", "strict"]


class MailDispatcher:
    """Envia os emails em ordem, aguardando cada envio.

    O primeiro email (notificação ao operador) é obrigatório: se falhar,
    os demais não são tentados. Falhas dos seguintes seguem a política:
    - best_effort: sucesso agregado se o primeiro foi enviado
    - strict: qualquer falha torna o resultado falho

    Exceções do sender nunca escapam; viram DispatchOutcome.failure.
    """

    def __init__(
        self,
        sender: MailSenderProtocol,
        confirmation_failure_policy: ConfirmationFailurePolicy = "best_effort",
    ) -> None:
        if confirmation_failure_policy not in ("best_effort", "strict"):
            raise ValueError(
                f"política de falha inválida: {confirmation_failure_policy}"
            )
        self._sender = sender
        self._policy = confirmation_failure_policy

    @property
    def policy(self) -> ConfirmationFailurePolicy:
        return self._policy

    async def dispatch(self, messages: list[OutboundMessage]) -> DispatchReport:
        """Envia as mensagens e agrega o resultado.

        Returns:
            DispatchReport com um outcome por mensagem tentada
        """
        if not messages:
            return DispatchReport()

        outcomes: list[DispatchOutcome] = []
        for index, message in enumerate(messages):
            outcome = await self._send_one(message)
            outcomes.append(outcome)
            if index == 0 and not outcome.sent:
                logger.warning(
                    "mail_dispatch_aborted",
                    extra={
                        "kind": str(message.kind),
                        "skipped": len(messages) - 1,
                    },
                )
                break

        return DispatchReport(
            outcomes=tuple(outcomes),
            succeeded=self._aggregate(outcomes),
        )

    def _aggregate(self, outcomes: list[DispatchOutcome]) -> bool:
        if not outcomes[0].sent:
            return False
        if self._policy == "strict":
            return all(outcome.sent for outcome in outcomes)
        return True

    async def _send_one(self, message: OutboundMessage) -> DispatchOutcome:
        try:
            provider_id = await self._sender.send(message)
        except MailDeliveryError as exc:
            logger.warning(
                "mail_send_failed",
                extra={
                    "kind": str(message.kind),
                    "error_type": type(exc).__name__,
                },
            )
            return DispatchOutcome.failure(message.kind, str(exc) or type(exc).__name__)
        except Exception as exc:
            logger.exception(
                "mail_send_unexpected_error",
                extra={
                    "kind": str(message.kind),
                    "error_type": type(exc).__name__,
                },
            )
            return DispatchOutcome.failure(message.kind, str(exc) or type(exc).__name__)

        if not provider_id:
            logger.warning("mail_send_missing_id", extra={"kind": str(message.kind)})
            return DispatchOutcome.failure(message.kind, "provedor não retornou id")

        logger.info(
            "mail_sent",
            extra={"kind": str(message.kind), "provider_message_id": provider_id},
        )
        return DispatchOutcome.success(message.kind, provider_id)
