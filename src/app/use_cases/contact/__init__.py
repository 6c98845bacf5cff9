"""Use cases do formulário de contato."""

from .dispatch_messages import ConfirmationFailurePolicy, MailDispatcher
from .process_submission import ProcessContactSubmissionUseCase, SubmissionOutcome

__all__ = [
    "ConfirmationFailurePolicy",
    "MailDispatcher",
    "ProcessContactSubmissionUseCase",
    "SubmissionOutcome",
]
