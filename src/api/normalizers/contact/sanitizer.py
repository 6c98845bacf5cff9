"""Sanitização de submissões antes da interpolação em emails.

Responsabilidades:
- Remover `<` e `>` de campos de texto livre (HTML ingênuo)
- Aparar espaços nas bordas
- Normalizar email (trim + minúsculas)

Total e idempotente: sanitize(sanitize(x)) == sanitize(x).
"""

from __future__ import annotations

from typing import Final

from app.protocols.models import ContactSubmission, SanitizedSubmission

_STRIP_TABLE: Final = str.maketrans("", "", "<>")


def sanitize_text(value: str) -> str:
    """Remove `<`/`>` e apara espaços.

    A remoção acontece antes do trim para que o resultado seja estável.

    Exemplos:
        >>> sanitize_text("  <b>Olá</b> ")
        'bOlá/b'
    """
    if not value:
        return ""
    return value.translate(_STRIP_TABLE).strip()


def sanitize_email(value: str) -> str:
    """Apara e converte o email para minúsculas."""
    if not value:
        return ""
    return value.strip().lower()


def sanitize_submission(
    submission: ContactSubmission | SanitizedSubmission,
) -> SanitizedSubmission:
    """Aplica a sanitização campo a campo.

    Chamado apenas com submissões que já passaram pela validação.
    """
    return SanitizedSubmission(
        name=sanitize_text(submission.name),
        email=sanitize_email(submission.email),
        message=sanitize_text(submission.message),
    )
