"""Logging estruturado em JSON para o serviço.

Cada record recebe `service` e `correlation_id` (CorrelationIdFilter) e
sai como uma linha JSON com os campos de LOG_FIELDS, usando os nomes de
FIELD_RENAME_MAP. O nível vem de LOG_LEVEL (app/bootstrap/).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from pythonjsonlogger.json import JsonFormatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "contact-relay"

# Ordem em que os campos aparecem na linha JSON
LOG_FIELDS: Final = (
    "asctime",
    "levelname",
    "name",
    "correlation_id",
    "service",
    "message",
)

FIELD_RENAME_MAP: Final = {
    "levelname": "level",
    "name": "logger",
}


class CorrelationIdFilter(logging.Filter):
    """Completa cada record com `service` e `correlation_id`.

    Um correlation_id passado via `extra` tem precedência sobre o getter.
    Nunca descarta records.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self.correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", ""):
            getter = self.correlation_id_getter
            record.correlation_id = getter() if getter is not None else ""
        record.service = self.service_name
        return True


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON com LOG_FIELDS; chaves de `extra` entram na mesma linha.

    Exemplo:
        {"asctime": "...", "level": "INFO", "logger": "app.use_cases...",
         "correlation_id": "abc-123", "service": "contact-relay",
         "message": "mail_sent", "kind": "notification"}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in LOG_FIELDS),
        rename_fields=dict(FIELD_RENAME_MAP),
    )


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no root logger.

    Args:
        level: Nível de log (case insensitive).
        service_name: Valor do campo `service`.
        correlation_id_getter: Fonte do correlation_id da requisição atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    normalized = level.upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(normalized)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(normalized)
    root.handlers = [handler]

    # uvicorn.access repete método e path de cada request
    logging.getLogger("uvicorn.access").setLevel("WARNING")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
