"""Cliente HTTP base para conectores de email.

Um único httpx.AsyncClient é criado por instância e reutilizado entre
requisições (pool de conexões compartilhado, seguro para uso concorrente).
Sem retries: falhas sobem imediatamente para o chamador.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 15.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de transporte HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = httpx.AsyncClient(
            headers=self._config.default_headers,
            timeout=self._config.timeout_seconds,
            verify=self._config.verify_ssl,
            transport=transport,
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST JSON; erros de rede/timeout viram HttpError.

        Respostas 4xx/5xx são retornadas para o chamador interpretar.
        """
        try:
            return await self._client.post(url, json=json, headers=headers)
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"url": url})
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "http_connection_error",
                extra={"url": url, "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error") from exc

    async def aclose(self) -> None:
        await self._client.aclose()
