"""Normalizers — limpeza de dados externos antes do uso interno.

Estrutura:
- contact/: sanitização de submissões do formulário de contato
"""

from .contact import sanitize_email, sanitize_submission, sanitize_text

__all__ = [
    "sanitize_email",
    "sanitize_submission",
    "sanitize_text",
]
