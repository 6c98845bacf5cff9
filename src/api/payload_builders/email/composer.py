"""Composição dos emails derivados de uma submissão de contato."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from api.payload_builders.email.confirmation import (
    DEFAULT_PREVIEW_LENGTH,
    ConfirmationBuilder,
)
from api.payload_builders.email.notification import NotificationBuilder

if TYPE_CHECKING:
    from api.payload_builders.email.identity import EmailIdentity
    from app.protocols.models import OutboundMessage, SanitizedSubmission


class EmailComposer:
    """Compõe a notificação (sempre) e a confirmação (opcional).

    Puro: sem I/O. Dado o mesmo `now`, a saída é determinística.
    A notificação é sempre o primeiro item da lista.
    """

    def __init__(
        self,
        identity: EmailIdentity,
        confirmation_enabled: bool = True,
        preview_length: int = DEFAULT_PREVIEW_LENGTH,
    ) -> None:
        self._identity = identity
        self._confirmation_enabled = confirmation_enabled
        self._notification = NotificationBuilder()
        self._confirmation = ConfirmationBuilder(preview_length)

    @property
    def confirmation_enabled(self) -> bool:
        return self._confirmation_enabled

    def compose(
        self,
        submission: SanitizedSubmission,
        now: datetime | None = None,
    ) -> list[OutboundMessage]:
        """Constrói os emails na ordem de envio.

        Args:
            submission: Submissão validada e sanitizada
            now: Momento de recebimento (padrão: agora em UTC)

        Returns:
            [notificação] ou [notificação, confirmação]
        """
        received_at = now or datetime.now(UTC)
        messages = [self._notification.build(submission, self._identity, received_at)]
        if self._confirmation_enabled:
            messages.append(self._confirmation.build(submission, self._identity))
        return messages
