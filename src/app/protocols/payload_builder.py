"""Protocolos de composição de emails outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from .models import OutboundMessage, SanitizedSubmission


class MessageComposerProtocol(Protocol):
    """Contrato mínimo para compor emails a partir de uma submissão limpa."""

    def compose(
        self,
        submission: SanitizedSubmission,
        now: datetime | None = None,
    ) -> list[OutboundMessage]: ...
