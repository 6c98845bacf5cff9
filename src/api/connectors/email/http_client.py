"""Sender de email via API HTTP (formato Resend).

POST {api_url} com Bearer token e payload JSON:
    {"from", "to": [...], "subject", "text", "html", "reply_to"?}
Resposta de sucesso: {"id": "<provider message id>"}.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.email.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.email.provider_errors import parse_provider_error
from utils.errors import MailProviderError, MailTransportError

if TYPE_CHECKING:
    import httpx

    from app.protocols.models import OutboundMessage
    from config.settings import EmailSettings

logger: logging.Logger = logging.getLogger(__name__)


def build_api_payload(message: OutboundMessage) -> dict[str, Any]:
    """Converte OutboundMessage no payload JSON do provedor."""
    payload: dict[str, Any] = {
        "from": message.from_address,
        "to": [message.to],
        "subject": message.subject,
        "text": message.text_body,
        "html": message.html_body,
    }
    if message.reply_to:
        payload["reply_to"] = message.reply_to
    return payload


class HttpMailSender(HttpClient):
    """Implementação de MailSenderProtocol sobre API HTTP.

    - Valida api_key antes de qualquer chamada
    - Mapeia erros do provedor para MailProviderError
    - Mapeia rede/timeout para MailTransportError
    - Logs sem endereços nem conteúdo
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ValueError(
                "api_key é obrigatório para envio de emails. "
                "Verifique se MAIL_API_KEY está configurado."
            )
        super().__init__(config, transport)
        self._api_url = api_url
        self._api_key = api_key

    async def send(self, message: OutboundMessage) -> str:
        """Envia a mensagem e retorna o id do provedor.

        Raises:
            MailProviderError: Provedor recusou (4xx/5xx ou resposta inválida)
            MailTransportError: Falha de rede ou timeout
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }
        try:
            response = await self.post(self._api_url, json=build_api_payload(message), headers=headers)
        except HttpError as exc:
            raise MailTransportError(str(exc)) from exc

        return self._process_response(response, message)

    def _process_response(self, response: httpx.Response, message: OutboundMessage) -> str:
        try:
            response_data = response.json()
        except json.JSONDecodeError:
            response_data = None

        api_error = parse_provider_error(response.status_code, response_data)
        if api_error:
            logger.warning(
                "mail_provider_error",
                extra={
                    "kind": str(message.kind),
                    "status_code": api_error.status_code,
                    "error_name": api_error.error_name,
                    "is_auth_error": api_error.is_auth_error,
                },
            )
            raise MailProviderError(
                f"Mail API error: {api_error.error_name} ({api_error.status_code}): "
                f"{api_error.error_message}",
                status_code=api_error.status_code,
                error_name=api_error.error_name,
            )

        message_id = response_data.get("id") if isinstance(response_data, dict) else None
        if not message_id:
            logger.error(
                "mail_provider_invalid_response",
                extra={"kind": str(message.kind), "status_code": response.status_code},
            )
            raise MailProviderError(
                "Mail API response sem id",
                status_code=response.status_code,
            )

        logger.debug(
            "mail_provider_accepted",
            extra={"kind": str(message.kind), "status_code": response.status_code},
        )
        return str(message_id)


def create_http_mail_sender(settings: EmailSettings) -> HttpMailSender:
    """Factory para criar o sender HTTP a partir das settings."""
    config = HttpClientConfig(timeout_seconds=settings.timeout_seconds)
    return HttpMailSender(
        api_url=settings.api_url,
        api_key=settings.api_key,
        config=config,
    )
