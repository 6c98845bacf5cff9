"""Use case de processamento de uma submissão do formulário de contato."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from api.normalizers.contact import sanitize_submission
from fsm import SubmissionState, create_fsm

if TYPE_CHECKING:
    from datetime import datetime

    from app.protocols.models import ContactSubmission, DispatchReport, FieldError
    from app.protocols.payload_builder import MessageComposerProtocol
    from app.protocols.validator import SubmissionValidatorProtocol
    from app.use_cases.contact.dispatch_messages import MailDispatcher
    from fsm import SubmissionStateMachine

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SubmissionOutcome:
    """Estado terminal alcançado e os dados para montar a resposta HTTP."""

    state: SubmissionState
    errors: tuple[FieldError, ...] = ()
    report: DispatchReport | None = None
    history: tuple[dict, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> bool:
        return self.state == SubmissionState.SUCCEEDED

    @property
    def rejected(self) -> bool:
        return self.state == SubmissionState.REJECTED

    @property
    def error_detail(self) -> str | None:
        if self.report is None:
            return None
        return self.report.first_error


class ProcessContactSubmissionUseCase:
    """Orquestra validação, sanitização, composição e envio.

    Cada chamada usa uma máquina de estados nova; o use case em si não
    guarda estado entre requisições.
    """

    def __init__(
        self,
        validator: SubmissionValidatorProtocol,
        composer: MessageComposerProtocol,
        dispatcher: MailDispatcher,
    ) -> None:
        self._validator = validator
        self._composer = composer
        self._dispatcher = dispatcher

    async def execute(
        self,
        submission: ContactSubmission,
        now: datetime | None = None,
        request_id: str = "",
    ) -> SubmissionOutcome:
        """Processa a submissão até um estado terminal."""
        machine = create_fsm(request_id=request_id)

        machine.advance(SubmissionState.VALIDATING, "submission_received")
        result = self._validator.validate(submission)
        if not result.is_valid:
            machine.advance(
                SubmissionState.REJECTED,
                "validation_failed",
                {"fields": sorted({error.field for error in result.errors})},
            )
            return self._finish(machine, errors=result.errors)

        machine.advance(SubmissionState.SANITIZING, "validation_passed")
        sanitized = sanitize_submission(result.submission)

        machine.advance(SubmissionState.COMPOSING, "submission_sanitized")
        messages = self._composer.compose(sanitized, now=now)

        machine.advance(
            SubmissionState.DISPATCHING,
            "messages_composed",
            {"count": len(messages)},
        )
        report = await self._dispatcher.dispatch(messages)

        sent = sum(1 for outcome in report.outcomes if outcome.sent)
        if report.succeeded:
            machine.advance(SubmissionState.SUCCEEDED, "dispatch_succeeded", {"sent": sent})
        else:
            machine.advance(SubmissionState.FAILED, "dispatch_failed", {"sent": sent})
        return self._finish(machine, report=report)

    @staticmethod
    def _finish(
        machine: SubmissionStateMachine,
        errors: tuple[FieldError, ...] = (),
        report: DispatchReport | None = None,
    ) -> SubmissionOutcome:
        history = tuple(machine.get_history_summary())
        logger.info(
            "contact_submission_processed",
            extra={
                **machine.get_state_summary(),
                "transitions": [
                    f"{item['from_state']}->{item['to_state']}" for item in history
                ],
                "error_count": len(errors),
            },
        )
        return SubmissionOutcome(
            state=machine.current_state,
            errors=errors,
            report=report,
            history=history,
        )
