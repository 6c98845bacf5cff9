"""Helpers de formatação compartilhados pelos builders de email."""

from __future__ import annotations

import html
import unicodedata
from typing import TYPE_CHECKING

from app.constants.contact import PREVIEW_ELLIPSIS

if TYPE_CHECKING:
    from datetime import datetime


def to_html_text(value: str) -> str:
    """Escapa texto opaco para HTML e converte quebras de linha em <br>."""
    normalized = value.replace("\r\n", "\n").replace("\r", "\n")
    return html.escape(normalized, quote=True).replace("\n", "<br>")


def to_header_text(value: str) -> str:
    """Texto em linha única para cabeçalhos (Subject).

    Controles viram espaço e sequências de espaço colapsam em um só.
    """
    cleaned = "".join(
        " " if unicodedata.category(ch) == "Cc" else ch for ch in value
    )
    return " ".join(cleaned.split())


def truncate_preview(message: str, limit: int) -> str:
    """Primeiros `limit` caracteres + reticências se a mensagem for maior.

    Mensagens com até `limit` caracteres retornam inalteradas.
    """
    if limit < 1:
        raise ValueError("limit deve ser >= 1")
    if len(message) <= limit:
        return message
    return message[:limit] + PREVIEW_ELLIPSIS


def format_received_at(now: datetime) -> str:
    """Timestamp legível do recebimento (UTC quando timezone-aware)."""
    return now.strftime("%d/%m/%Y %H:%M:%S %Z").strip()
