"""Normalização de submissões do formulário de contato."""

from api.normalizers.contact.sanitizer import (
    sanitize_email,
    sanitize_submission,
    sanitize_text,
)

__all__ = [
    "sanitize_email",
    "sanitize_submission",
    "sanitize_text",
]
