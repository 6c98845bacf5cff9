"""Identidade do operador usada como origem/destino dos emails."""

from __future__ import annotations

from dataclasses import dataclass, field
from email.utils import formataddr


@dataclass(frozen=True, slots=True)
class EmailIdentity:
    """Endereços e assinatura do dono do formulário.

    Attributes:
        operator_email: Caixa que recebe as notificações
        from_email: Endereço de origem (padrão: operator_email)
        display_name: Nome exibido no remetente e na assinatura
        social_links: Pares (rótulo, url) do rodapé da confirmação
    """

    operator_email: str
    from_email: str = ""
    display_name: str = ""
    social_links: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.operator_email or not self.operator_email.strip():
            raise ValueError("operator_email é obrigatório")

    @property
    def sender_address(self) -> str:
        """Endereço de origem sem display name."""
        return self.from_email or self.operator_email

    @property
    def formatted_sender(self) -> str:
        """Remetente no formato "Nome <email>" (RFC 5322)."""
        if not self.display_name:
            return self.sender_address
        return formataddr((self.display_name, self.sender_address))

    @property
    def signature(self) -> str:
        return self.display_name or self.sender_address
