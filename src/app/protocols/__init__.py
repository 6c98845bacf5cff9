"""Protocolos e contratos do core da aplicação."""

from .mail_sender import MailSenderProtocol
from .models import (
    ContactSubmission,
    DispatchOutcome,
    DispatchReport,
    FieldError,
    MessageKind,
    OutboundMessage,
    SanitizedSubmission,
    ValidationResult,
)
from .payload_builder import MessageComposerProtocol
from .validator import SubmissionValidatorProtocol

__all__ = [
    "ContactSubmission",
    "DispatchOutcome",
    "DispatchReport",
    "FieldError",
    "MailSenderProtocol",
    "MessageComposerProtocol",
    "MessageKind",
    "OutboundMessage",
    "SanitizedSubmission",
    "SubmissionValidatorProtocol",
    "ValidationResult",
]
