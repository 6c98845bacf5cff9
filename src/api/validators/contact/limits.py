"""Limites de validação do formulário de contato.

Dois perfis coexistem: `standard` e `strict` (formulários mais curtos e
nome restrito a letras).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# Limite prático de endereço (RFC 5321: path de 256 com "<>")
MAX_EMAIL_LENGTH: Final = 254


@dataclass(frozen=True, slots=True)
class ValidationPolicy:
    """Limites configuráveis por campo.

    Attributes:
        name_min_length: Mínimo de caracteres do nome (após trim)
        name_max_length: Máximo de caracteres do nome
        name_letters_only: Restringe o nome a letras e espaços
        email_max_length: Máximo do email (None = sem limite)
        message_min_length: Mínimo de caracteres da mensagem
        message_max_length: Máximo de caracteres da mensagem
    """

    name_min_length: int = 2
    name_max_length: int = 100
    name_letters_only: bool = False
    email_max_length: int | None = MAX_EMAIL_LENGTH
    message_min_length: int = 10
    message_max_length: int = 2000

    def __post_init__(self) -> None:
        if not 0 < self.name_min_length <= self.name_max_length:
            raise ValueError("Limites de nome inconsistentes")
        if not 0 < self.message_min_length <= self.message_max_length:
            raise ValueError("Limites de mensagem inconsistentes")
        if self.email_max_length is not None and self.email_max_length < 3:
            raise ValueError("email_max_length deve ser >= 3")


STANDARD_POLICY: Final = ValidationPolicy()

STRICT_POLICY: Final = ValidationPolicy(
    name_min_length=3,
    name_max_length=50,
    name_letters_only=True,
    message_min_length=10,
    message_max_length=500,
)

_PROFILES: Final[dict[str, ValidationPolicy]] = {
    "standard": STANDARD_POLICY,
    "strict": STRICT_POLICY,
}


def get_policy(profile: str) -> ValidationPolicy:
    """Retorna a política do perfil informado.

    Raises:
        ValueError: Se o perfil não existir.
    """
    try:
        return _PROFILES[profile]
    except KeyError:
        msg = f"Perfil de validação desconhecido: {profile}"
        raise ValueError(msg) from None
