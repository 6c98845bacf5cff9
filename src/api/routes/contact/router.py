"""Endpoint do formulário de contato.

Endpoints:
- POST /send-email: valida, limpa e envia notificação (+ confirmação)

Respostas:
- 400: {success: false, errors: [{field, message}]}
- 200: {success: true, message}
- 500: {success: false, message, error?} (error omitido em production)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.constants.contact import SEND_FAILURE_MESSAGE, SEND_SUCCESS_MESSAGE
from app.observability import get_correlation_id
from app.protocols.models import ContactSubmission
from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class ContactFormRequest(BaseModel):
    """Corpo JSON do formulário. Campos ausentes ou null contam como vazios."""

    name: str | None = None
    email: str | None = None
    message: str | None = None

    def to_submission(self) -> ContactSubmission:
        return ContactSubmission(
            name=self.name or "",
            email=self.email or "",
            message=self.message or "",
        )


def _is_production(request: Request) -> bool:
    settings = getattr(request.app.state, "base_settings", None) or get_base_settings()
    return settings.is_production


@router.post("/send-email", response_model=None)
async def send_email(
    request: Request,
    payload: ContactFormRequest | None = None,
) -> JSONResponse:
    """Recebe uma submissão e responde com o resultado agregado."""
    use_case = request.app.state.submission_use_case
    submission = (payload or ContactFormRequest()).to_submission()

    outcome = await use_case.execute(submission, request_id=get_correlation_id())

    if outcome.rejected:
        logger.info(
            "contact_submission_rejected",
            extra={"error_count": len(outcome.errors)},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "errors": [error.to_response_dict() for error in outcome.errors],
            },
        )

    if outcome.succeeded:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"success": True, "message": SEND_SUCCESS_MESSAGE},
        )

    logger.error(
        "contact_submission_failed",
        extra={"state": str(outcome.state)},
    )
    content: dict[str, Any] = {"success": False, "message": SEND_FAILURE_MESSAGE}
    if not _is_production(request) and outcome.error_detail:
        content["error"] = outcome.error_detail
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )
