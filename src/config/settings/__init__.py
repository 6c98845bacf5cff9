"""Agregador de settings do contact-relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Contact form settings
from config.settings.contact import (
    ConfirmationFailurePolicy,
    ContactSettings,
    ValidationProfile,
    get_contact_settings,
)

# Email channel settings
from config.settings.email import (
    EmailSettings,
    MailBackend,
    get_email_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    # Contact
    "ConfirmationFailurePolicy",
    "ContactSettings",
    # Email
    "EmailSettings",
    "Environment",
    "MailBackend",
    "ValidationProfile",
    "get_base_settings",
    "get_contact_settings",
    "get_email_settings",
]
