"""Testes dos endpoints de informação e health."""

from __future__ import annotations

import time
from datetime import datetime
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, service_info
from config.settings import BaseSettings


def _build_request_with_state(state: SimpleNamespace, path: str = "/health") -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_reports_uptime_and_service() -> None:
    request = _build_request_with_state(
        SimpleNamespace(
            base_settings=BaseSettings(service_name="relay-test"),
            started_at=time.monotonic() - 12.5,
        )
    )

    response = await health_check(request)

    assert response.status == "healthy"
    assert response.service == "relay-test"
    assert response.uptime_seconds >= 12.5
    assert datetime.fromisoformat(response.timestamp).tzinfo is not None


@pytest.mark.asyncio
async def test_health_without_lifespan_state() -> None:
    request = _build_request_with_state(SimpleNamespace())

    response = await health_check(request)

    assert response.status == "healthy"
    assert response.uptime_seconds >= 0


@pytest.mark.asyncio
async def test_service_info() -> None:
    request = _build_request_with_state(
        SimpleNamespace(base_settings=BaseSettings(service_name="relay-test")),
        path="/",
    )

    response = await service_info(request)

    assert response.success is True
    assert response.service == "relay-test"
    assert response.message == "API corriendo correctamente"
