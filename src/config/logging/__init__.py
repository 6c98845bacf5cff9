"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="contact-relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("mail_sent", extra={"kind": "notification"})

Nunca registrar nome, email ou corpo das mensagens dos usuários.
"""

from config.logging.config import (
    FIELD_RENAME_MAP,
    LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
