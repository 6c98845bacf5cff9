"""Factories do fluxo de contato — wiring de validator, composer e dispatcher.

Referência: app/bootstrap/__init__.py (composition root)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.payload_builders.email import EmailComposer, EmailIdentity
from api.validators.contact import ContactSubmissionValidator, get_policy
from app.use_cases.contact import MailDispatcher, ProcessContactSubmissionUseCase

if TYPE_CHECKING:
    from app.protocols.mail_sender import MailSenderProtocol
    from config.settings import BaseSettings, ContactSettings, EmailSettings

logger = logging.getLogger(__name__)


# Destino das notificações em desenvolvimento sem CONTACT_OPERATOR_EMAIL
DEV_OPERATOR_EMAIL = "contacto@localhost"


def create_email_identity(
    settings: EmailSettings,
    base_settings: BaseSettings | None = None,
) -> EmailIdentity:
    """Monta a identidade do operador a partir das settings de Email.

    Em development, sem CONTACT_OPERATOR_EMAIL, usa DEV_OPERATOR_EMAIL
    para que o servidor suba (a validação já registrou o aviso).

    Raises:
        ValueError: Se CONTACT_OPERATOR_EMAIL não estiver configurado fora
            de development
    """
    operator_email = settings.operator_email.strip()
    if not operator_email and base_settings is not None and base_settings.is_development:
        logger.warning(
            "operator_email_placeholder",
            extra={"operator_email": DEV_OPERATOR_EMAIL},
        )
        operator_email = DEV_OPERATOR_EMAIL
    return EmailIdentity(
        operator_email=operator_email,
        from_email=settings.from_email,
        display_name=settings.from_name,
        social_links=settings.social_links,
    )


def create_validator(settings: ContactSettings) -> ContactSubmissionValidator:
    return ContactSubmissionValidator(get_policy(settings.validation_profile))


def create_composer(
    email_settings: EmailSettings,
    contact_settings: ContactSettings,
    base_settings: BaseSettings | None = None,
) -> EmailComposer:
    return EmailComposer(
        create_email_identity(email_settings, base_settings),
        confirmation_enabled=contact_settings.send_confirmation,
        preview_length=contact_settings.preview_length,
    )


def create_dispatcher(
    sender: MailSenderProtocol,
    settings: ContactSettings,
) -> MailDispatcher:
    return MailDispatcher(
        sender,
        confirmation_failure_policy=settings.confirmation_failure_policy,
    )


def create_submission_use_case(
    sender: MailSenderProtocol,
    email_settings: EmailSettings,
    contact_settings: ContactSettings,
    base_settings: BaseSettings | None = None,
) -> ProcessContactSubmissionUseCase:
    """Cria o use case completo para um sender já inicializado."""
    use_case = ProcessContactSubmissionUseCase(
        validator=create_validator(contact_settings),
        composer=create_composer(email_settings, contact_settings, base_settings),
        dispatcher=create_dispatcher(sender, contact_settings),
    )
    logger.info(
        "submission_use_case_created",
        extra={
            "validation_profile": contact_settings.validation_profile,
            "send_confirmation": contact_settings.send_confirmation,
            "confirmation_failure_policy": contact_settings.confirmation_failure_policy,
        },
    )
    return use_case
