"""Validador de submissões do formulário de contato."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.normalizers.contact.sanitizer import sanitize_text
from api.validators.contact.limits import STANDARD_POLICY, ValidationPolicy
from api.validators.contact.rules import RuleTable, build_rule_table
from app.constants.contact import ErrorCode
from app.protocols.models import ContactSubmission, FieldError, ValidationResult

if TYPE_CHECKING:
    from app.protocols.models import FieldName


def _field_value(submission: ContactSubmission, field: FieldName) -> str:
    # Texto livre é medido como sairá da sanitização (sem `<`/`>`)
    raw = getattr(submission, field)
    if not isinstance(raw, str):
        return ""
    if field == "email":
        return raw.strip()
    return sanitize_text(raw)


def evaluate_rules(submission: ContactSubmission, table: RuleTable) -> list[FieldError]:
    """Avalia todas as regras e coleta todas as violações, sem short-circuit
    entre campos.
    """
    errors: list[FieldError] = []
    for field, rules in table.items():
        value = _field_value(submission, field)
        for rule in rules:
            if rule.check(value):
                continue
            errors.append(FieldError(field=field, code=rule.code, message=rule.message))
            if rule.code == ErrorCode.REQUIRED:
                break
    return errors


def validate_submission(
    submission: ContactSubmission,
    policy: ValidationPolicy = STANDARD_POLICY,
) -> ValidationResult:
    """Valida a submissão bruta contra a política.

    Sem I/O e sem efeitos colaterais.

    Args:
        submission: Campos exatamente como recebidos
        policy: Limites a aplicar

    Returns:
        ValidationResult válido com a submissão, ou inválido com todos os
        FieldErrors na ordem name → email → message.
    """
    errors = evaluate_rules(submission, build_rule_table(policy))
    if errors:
        return ValidationResult.invalid(errors)
    return ValidationResult.valid(submission)


class ContactSubmissionValidator:
    """Validator com tabela de regras pré-montada para uma política."""

    def __init__(self, policy: ValidationPolicy = STANDARD_POLICY) -> None:
        self._policy = policy
        self._table = build_rule_table(policy)

    @property
    def policy(self) -> ValidationPolicy:
        return self._policy

    def validate(self, submission: ContactSubmission) -> ValidationResult:
        errors = evaluate_rules(submission, self._table)
        if errors:
            return ValidationResult.invalid(errors)
        return ValidationResult.valid(submission)
