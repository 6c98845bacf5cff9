"""Protocolos de validação de submissões."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import ContactSubmission, ValidationResult


class SubmissionValidatorProtocol(Protocol):
    """Contrato mínimo para validação de submissões de contato."""

    def validate(self, submission: ContactSubmission) -> ValidationResult: ...
