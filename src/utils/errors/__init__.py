"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    MailDeliveryError,
    MailProviderError,
    MailTransportError,
)

__all__ = [
    "MailDeliveryError",
    "MailProviderError",
    "MailTransportError",
]
