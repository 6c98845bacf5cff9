"""Endpoints de informação e health check."""

from __future__ import annotations

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app.constants.contact import SERVICE_RUNNING_MESSAGE
from config.settings import get_base_settings

router = APIRouter()

# Fallback quando o lifespan não registrou app.state.started_at
_MODULE_STARTED_AT = time.monotonic()


class ServiceInfoResponse(BaseModel):
    """Resposta de GET /."""

    success: bool = True
    message: str
    service: str


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    uptime_seconds: float
    timestamp: str


def _service_name(request: Request) -> str:
    settings = getattr(request.app.state, "base_settings", None) or get_base_settings()
    return settings.service_name


@router.get("/", response_model=ServiceInfoResponse)
async def service_info(request: Request) -> ServiceInfoResponse:
    """Informação mínima de que a API está no ar."""
    return ServiceInfoResponse(
        message=SERVICE_RUNNING_MESSAGE,
        service=_service_name(request),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    started_at = getattr(request.app.state, "started_at", None) or _MODULE_STARTED_AT
    return HealthResponse(
        status="healthy",
        service=_service_name(request),
        uptime_seconds=round(time.monotonic() - started_at, 3),
        timestamp=datetime.now(UTC).isoformat(),
    )
