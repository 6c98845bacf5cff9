"""Builder do email de confirmação enviado ao remetente."""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from api.payload_builders.email.formatting import to_html_text, truncate_preview
from api.payload_builders.email.templates import (
    CONFIRMATION_HTML,
    CONFIRMATION_TEXT,
    LINK_HTML,
    LINK_TEXT,
    LINKS_HTML_WRAPPER,
)
from app.constants.contact import CONFIRMATION_SUBJECT
from app.protocols.models import MessageKind, OutboundMessage

if TYPE_CHECKING:
    from api.payload_builders.email.identity import EmailIdentity
    from app.protocols.models import SanitizedSubmission

DEFAULT_PREVIEW_LENGTH = 150


class ConfirmationBuilder:
    """Confirmação: operador → remetente, com prévia da mensagem."""

    def __init__(self, preview_length: int = DEFAULT_PREVIEW_LENGTH) -> None:
        if preview_length < 1:
            raise ValueError("preview_length deve ser >= 1")
        self._preview_length = preview_length

    @property
    def preview_length(self) -> int:
        return self._preview_length

    def build(
        self,
        submission: SanitizedSubmission,
        identity: EmailIdentity,
    ) -> OutboundMessage:
        preview = truncate_preview(submission.message, self._preview_length)
        return OutboundMessage(
            kind=MessageKind.CONFIRMATION,
            from_address=identity.formatted_sender,
            to=submission.email,
            subject=CONFIRMATION_SUBJECT,
            text_body=CONFIRMATION_TEXT.format(
                name=submission.name,
                preview=preview,
                signature=identity.signature,
                links=_links_text(identity.social_links),
            ),
            html_body=CONFIRMATION_HTML.format(
                name=to_html_text(submission.name),
                preview=to_html_text(preview),
                signature=to_html_text(identity.signature),
                links=_links_html(identity.social_links),
            ),
        )


def _links_text(links: tuple[tuple[str, str], ...]) -> str:
    if not links:
        return ""
    lines = [LINK_TEXT.format(label=label, url=url) for label, url in links]
    return "\n" + "\n".join(lines) + "\n"


def _links_html(links: tuple[tuple[str, str], ...]) -> str:
    if not links:
        return ""
    anchors = " ".join(
        LINK_HTML.format(url=html.escape(url, quote=True), label=html.escape(label))
        for label, url in links
    )
    return LINKS_HTML_WRAPPER.format(links=anchors)
