"""Validação de submissões do formulário de contato.

Uso:
    from api.validators.contact import ContactSubmissionValidator, get_policy

    validator = ContactSubmissionValidator(get_policy("standard"))
    result = validator.validate(submission)
    if not result.is_valid:
        ...  # result.errors
"""

from api.validators.contact.limits import (
    MAX_EMAIL_LENGTH,
    STANDARD_POLICY,
    STRICT_POLICY,
    ValidationPolicy,
    get_policy,
)
from api.validators.contact.rules import (
    FieldRule,
    build_rule_table,
    has_only_name_characters,
    is_valid_email,
)
from api.validators.contact.validator import (
    ContactSubmissionValidator,
    evaluate_rules,
    validate_submission,
)

__all__ = [
    "MAX_EMAIL_LENGTH",
    "STANDARD_POLICY",
    "STRICT_POLICY",
    "ContactSubmissionValidator",
    "FieldRule",
    "ValidationPolicy",
    "build_rule_table",
    "evaluate_rules",
    "get_policy",
    "has_only_name_characters",
    "is_valid_email",
    "validate_submission",
]
