"""Textos e códigos do formulário de contato.

Textos voltados ao usuário final ficam no locale do formulário (espanhol).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class ErrorCode(StrEnum):
    """Códigos de máquina para violações de campo."""

    REQUIRED = "required"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_FORMAT = "invalid_format"
    INVALID_CHARACTERS = "invalid_characters"


FIELD_LABELS: Final[dict[str, str]] = {
    "name": "El nombre",
    "email": "El correo electrónico",
    "message": "El mensaje",
}

REQUIRED_MESSAGE: Final = "{label} es obligatorio"
TOO_SHORT_MESSAGE: Final = "{label} debe tener al menos {limit} caracteres"
TOO_LONG_MESSAGE: Final = "{label} no puede superar los {limit} caracteres"
INVALID_EMAIL_MESSAGE: Final = "El correo electrónico no es válido"
INVALID_NAME_CHARACTERS_MESSAGE: Final = "El nombre solo puede contener letras y espacios"

# Respostas HTTP
SEND_SUCCESS_MESSAGE: Final = "Correo enviado con éxito"
SEND_FAILURE_MESSAGE: Final = "Error al enviar el correo"
INVALID_REQUEST_MESSAGE: Final = "Solicitud inválida: se esperaba un JSON con name, email y message"
ROUTE_NOT_FOUND_MESSAGE: Final = "Ruta no encontrada"
INTERNAL_ERROR_MESSAGE: Final = "Error interno del servidor"
SERVICE_RUNNING_MESSAGE: Final = "API corriendo correctamente"

# Emails
NOTIFICATION_SUBJECT: Final = "Nuevo mensaje de {name}"
CONFIRMATION_SUBJECT: Final = "Hemos recibido tu mensaje"
PREVIEW_ELLIPSIS: Final = "..."
