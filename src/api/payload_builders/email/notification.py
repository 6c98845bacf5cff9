"""Builder do email de notificação enviado ao operador."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.email.formatting import (
    format_received_at,
    to_header_text,
    to_html_text,
)
from api.payload_builders.email.templates import NOTIFICATION_HTML, NOTIFICATION_TEXT
from app.constants.contact import NOTIFICATION_SUBJECT
from app.protocols.models import MessageKind, OutboundMessage

if TYPE_CHECKING:
    from datetime import datetime

    from api.payload_builders.email.identity import EmailIdentity
    from app.protocols.models import SanitizedSubmission


class NotificationBuilder:
    """Notificação: operador → operador, reply-to = remetente."""

    def build(
        self,
        submission: SanitizedSubmission,
        identity: EmailIdentity,
        now: datetime,
    ) -> OutboundMessage:
        """Constrói a notificação com corpo texto e HTML.

        Args:
            submission: Campos já validados e sanitizados
            identity: Identidade do operador
            now: Momento de recebimento exibido no corpo

        Returns:
            OutboundMessage do tipo NOTIFICATION
        """
        received_at = format_received_at(now)
        return OutboundMessage(
            kind=MessageKind.NOTIFICATION,
            from_address=identity.formatted_sender,
            to=identity.operator_email,
            reply_to=submission.email,
            subject=NOTIFICATION_SUBJECT.format(name=to_header_text(submission.name)),
            text_body=NOTIFICATION_TEXT.format(
                name=submission.name,
                email=submission.email,
                received_at=received_at,
                message=submission.message,
            ),
            html_body=NOTIFICATION_HTML.format(
                name=to_html_text(submission.name),
                email=to_html_text(submission.email),
                received_at=received_at,
                message=to_html_text(submission.message),
            ),
        )
