"""Payload builders para Email.

Constrói notificação (para o operador) e confirmação (para o remetente)
com corpo em texto puro e HTML.

Uso:
    from api.payload_builders.email import EmailComposer, EmailIdentity

    composer = EmailComposer(EmailIdentity(operator_email="eu@exemplo.com"))
    messages = composer.compose(sanitized)
"""

from api.payload_builders.email.composer import EmailComposer
from api.payload_builders.email.confirmation import (
    DEFAULT_PREVIEW_LENGTH,
    ConfirmationBuilder,
)
from api.payload_builders.email.formatting import (
    to_header_text,
    to_html_text,
    truncate_preview,
)
from api.payload_builders.email.identity import EmailIdentity
from api.payload_builders.email.notification import NotificationBuilder

__all__ = [
    "DEFAULT_PREVIEW_LENGTH",
    "ConfirmationBuilder",
    "EmailComposer",
    "EmailIdentity",
    "NotificationBuilder",
    "to_header_text",
    "to_html_text",
    "truncate_preview",
]
