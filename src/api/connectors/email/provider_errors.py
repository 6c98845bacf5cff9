"""Erros e helpers de parsing para APIs HTTP de email."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MailApiError:
    """Erro retornado pelo provedor de email."""

    status_code: int
    error_name: str
    error_message: str

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)


def parse_provider_error(status_code: int, response_data: Any) -> MailApiError | None:
    """Extrai informações de erro do response do provedor.

    Aceita os formatos `{"name", "message"}` e `{"error": {"type", "message"}}`.

    Args:
        status_code: Status HTTP do response
        response_data: JSON do response (ou None se não for JSON)

    Returns:
        MailApiError se status >= 400, None se sucesso
    """
    if status_code < 400:
        return None

    data = response_data if isinstance(response_data, dict) else {}
    nested = data.get("error")
    if isinstance(nested, dict):
        data = nested

    error_name = data.get("name") or data.get("type") or "unknown"
    error_message = data.get("message") or "Erro desconhecido"

    return MailApiError(
        status_code=status_code,
        error_name=str(error_name),
        error_message=str(error_message),
    )
