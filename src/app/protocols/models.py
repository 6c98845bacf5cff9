"""Modelos de domínio do fluxo de contato.

Todos os objetos vivem apenas durante uma requisição: nada é persistido.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal

FieldName = Literal["name", "email", "message"]


class MessageKind(StrEnum):
    """Tipo de email derivado de uma submissão."""

    NOTIFICATION = "notification"
    CONFIRMATION = "confirmation"


@dataclass(frozen=True, slots=True)
class ContactSubmission:
    """Submissão bruta, exatamente como recebida pelo transporte."""

    name: str = ""
    email: str = ""
    message: str = ""


@dataclass(frozen=True, slots=True)
class SanitizedSubmission:
    """Submissão validada e limpa, pronta para ser interpolada em emails."""

    name: str
    email: str
    message: str


@dataclass(frozen=True, slots=True)
class FieldError:
    """Violação de uma regra de campo.

    Attributes:
        field: Campo violado (name|email|message)
        code: Código de máquina (ex: "too_short")
        message: Texto legível no locale do formulário
    """

    field: FieldName
    code: str
    message: str

    def to_response_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Resultado da validação: válido (com submissão) ou lista de erros."""

    errors: tuple[FieldError, ...] = ()
    submission: ContactSubmission | None = None

    def __post_init__(self) -> None:
        if not self.errors and self.submission is None:
            raise ValueError("Resultado válido deve incluir submission")

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def valid(cls, submission: ContactSubmission) -> ValidationResult:
        return cls(submission=submission)

    @classmethod
    def invalid(cls, errors: list[FieldError]) -> ValidationResult:
        if not errors:
            raise ValueError("Resultado inválido deve incluir ao menos um erro")
        return cls(errors=tuple(errors))


@dataclass(frozen=True, slots=True)
class OutboundMessage:
    """Email composto e pronto para envio.

    Attributes:
        kind: notification (para o operador) ou confirmation (para o remetente)
        from_address: Identidade de envio (pode incluir display name)
        to: Endereço de destino
        subject: Assunto
        text_body: Corpo em texto puro
        html_body: Corpo em HTML
        reply_to: Endereço de resposta (opcional)
    """

    kind: MessageKind
    from_address: str
    to: str
    subject: str
    text_body: str
    html_body: str
    reply_to: str | None = None

    def __post_init__(self) -> None:
        if not self.to or not self.to.strip():
            raise ValueError("OutboundMessage.to não pode ser vazio")
        if not self.from_address or not self.from_address.strip():
            raise ValueError("OutboundMessage.from_address não pode ser vazio")


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """Resultado do envio de um OutboundMessage."""

    kind: MessageKind
    sent: bool
    provider_message_id: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.sent and not self.provider_message_id:
            raise ValueError("Envio bem-sucedido deve incluir provider_message_id")
        if not self.sent and self.error is None:
            raise ValueError("Envio falho deve incluir error")

    @classmethod
    def success(cls, kind: MessageKind, provider_message_id: str) -> DispatchOutcome:
        return cls(kind=kind, sent=True, provider_message_id=provider_message_id)

    @classmethod
    def failure(cls, kind: MessageKind, error: str) -> DispatchOutcome:
        return cls(kind=kind, sent=False, error=error)


@dataclass(frozen=True, slots=True)
class DispatchReport:
    """Outcomes em ordem de tentativa e o sucesso agregado da requisição."""

    outcomes: tuple[DispatchOutcome, ...] = field(default_factory=tuple)
    succeeded: bool = False

    @property
    def first_error(self) -> str | None:
        for outcome in self.outcomes:
            if not outcome.sent:
                return outcome.error
        return None

    def outcome_for(self, kind: MessageKind) -> DispatchOutcome | None:
        for outcome in self.outcomes:
            if outcome.kind == kind:
                return outcome
        return None
