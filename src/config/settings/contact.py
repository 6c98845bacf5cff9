"""Settings do fluxo de contato.

Política de validação e de envio do email de confirmação.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

ValidationProfile = Literal["standard", "strict"]
ConfirmationFailurePolicy = Literal["best_effort", "strict"]


@dataclass(frozen=True)
class ContactSettings:
    """Configurações do formulário de contato.

    Attributes:
        validation_profile: standard (nome 2-100, mensagem 10-2000) ou
            strict (nome 3-50 só letras, mensagem 10-500)
        send_confirmation: Envia email de confirmação ao remetente
        confirmation_failure_policy: best_effort mantém sucesso se a
            notificação saiu; strict falha a requisição
        preview_length: Máximo de caracteres da mensagem ecoados na confirmação
    """

    validation_profile: ValidationProfile = "standard"
    send_confirmation: bool = True
    confirmation_failure_policy: ConfirmationFailurePolicy = "best_effort"
    preview_length: int = 150

    def validate(self) -> list[str]:
        """Valida configurações do formulário."""
        errors: list[str] = []

        if self.validation_profile not in ("standard", "strict"):
            errors.append(f"CONTACT_VALIDATION_PROFILE inválido: {self.validation_profile}")

        if self.confirmation_failure_policy not in ("best_effort", "strict"):
            errors.append(
                "CONTACT_CONFIRMATION_FAILURE_POLICY inválido: "
                f"{self.confirmation_failure_policy}"
            )

        if self.preview_length < 1:
            errors.append("CONTACT_PREVIEW_LENGTH deve ser >= 1")

        return errors


def _load_from_env() -> ContactSettings:
    """Carrega ContactSettings de variáveis de ambiente."""
    return ContactSettings(
        validation_profile=os.getenv("CONTACT_VALIDATION_PROFILE", "standard").lower(),  # type: ignore[arg-type]
        send_confirmation=os.getenv("CONTACT_SEND_CONFIRMATION", "true").lower()
        in ("true", "1", "yes"),
        confirmation_failure_policy=os.getenv(
            "CONTACT_CONFIRMATION_FAILURE_POLICY", "best_effort"
        ).lower(),  # type: ignore[arg-type]
        preview_length=int(os.getenv("CONTACT_PREVIEW_LENGTH", "150")),
    )


@lru_cache(maxsize=1)
def get_contact_settings() -> ContactSettings:
    """Retorna instância cacheada de ContactSettings."""
    return _load_from_env()
