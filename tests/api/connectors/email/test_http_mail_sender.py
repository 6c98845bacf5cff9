"""Testes do sender HTTP (httpx.MockTransport)."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.email import HttpMailSender, build_api_payload, create_http_mail_sender
from api.connectors.email.provider_errors import parse_provider_error
from app.protocols.models import MessageKind, OutboundMessage
from config.settings import EmailSettings
from utils.errors import MailDeliveryError, MailProviderError, MailTransportError

API_URL = "https://mail.test/emails"


def _message(reply_to: str | None = "ana@example.com") -> OutboundMessage:
    return OutboundMessage(
        kind=MessageKind.NOTIFICATION,
        from_address="Portafolio <owner@example.com>",
        to="owner@example.com",
        subject="Nuevo mensaje de Ana",
        text_body="texto",
        html_body="<p>html</p>",
        reply_to=reply_to,
    )


def _sender(handler) -> HttpMailSender:
    return HttpMailSender(
        api_url=API_URL,
        api_key="re_test_key",
        transport=httpx.MockTransport(handler),
    )


class TestBuildApiPayload:
    def test_payload_shape(self) -> None:
        assert build_api_payload(_message()) == {
            "from": "Portafolio <owner@example.com>",
            "to": ["owner@example.com"],
            "subject": "Nuevo mensaje de Ana",
            "text": "texto",
            "html": "<p>html</p>",
            "reply_to": "ana@example.com",
        }

    def test_reply_to_omitted_when_absent(self) -> None:
        assert "reply_to" not in build_api_payload(_message(reply_to=None))


class TestHttpMailSender:
    def test_requires_api_key(self) -> None:
        with pytest.raises(ValueError, match="api_key"):
            HttpMailSender(api_url=API_URL, api_key=" ")

    @pytest.mark.asyncio
    async def test_send_returns_provider_id(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"id": "msg_123"})

        sender = _sender(handler)
        try:
            assert await sender.send(_message()) == "msg_123"
        finally:
            await sender.aclose()

        request = captured[0]
        assert str(request.url) == API_URL
        assert request.headers["Authorization"] == "Bearer re_test_key"
        assert json.loads(request.content)["to"] == ["owner@example.com"]
        assert sender.is_closed

    @pytest.mark.asyncio
    async def test_provider_rejection_raises_provider_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                422,
                json={"name": "validation_error", "message": "Invalid `to` field"},
            )

        sender = _sender(handler)
        with pytest.raises(MailProviderError) as exc_info:
            await sender.send(_message())
        await sender.aclose()

        assert exc_info.value.status_code == 422
        assert exc_info.value.error_name == "validation_error"
        assert isinstance(exc_info.value, MailDeliveryError)

    @pytest.mark.asyncio
    async def test_non_json_error_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        sender = _sender(handler)
        with pytest.raises(MailProviderError) as exc_info:
            await sender.send(_message())
        await sender.aclose()

        assert exc_info.value.status_code == 502
        assert exc_info.value.error_name == "unknown"

    @pytest.mark.asyncio
    async def test_missing_id_raises_provider_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        sender = _sender(handler)
        with pytest.raises(MailProviderError, match="sem id"):
            await sender.send(_message())
        await sender.aclose()

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        sender = _sender(handler)
        with pytest.raises(MailTransportError, match="http_timeout"):
            await sender.send(_message())
        await sender.aclose()

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        sender = _sender(handler)
        with pytest.raises(MailTransportError, match="http_connection_error"):
            await sender.send(_message())
        await sender.aclose()

    @pytest.mark.asyncio
    async def test_factory_uses_settings(self) -> None:
        sender = create_http_mail_sender(
            EmailSettings(backend="http", api_key="key", timeout_seconds=3.0)
        )
        try:
            assert isinstance(sender, HttpMailSender)
        finally:
            await sender.aclose()


class TestParseProviderError:
    def test_success_status_returns_none(self) -> None:
        assert parse_provider_error(200, {"id": "x"}) is None

    def test_nested_error_format(self) -> None:
        error = parse_provider_error(
            401, {"error": {"type": "unauthorized", "message": "bad key"}}
        )
        assert error is not None
        assert error.error_name == "unauthorized"
        assert error.error_message == "bad key"
        assert error.is_auth_error
