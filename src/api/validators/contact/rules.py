"""Tabela declarativa de regras por campo.

Cada regra é um predicado puro (True = satisfeita) com código e mensagem.
A regra `required` é pré-condição do campo: se falhar, as demais regras
daquele campo não são avaliadas.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from re import Pattern
from typing import Final

from api.validators.contact.limits import ValidationPolicy
from app.constants.contact import (
    FIELD_LABELS,
    INVALID_EMAIL_MESSAGE,
    INVALID_NAME_CHARACTERS_MESSAGE,
    REQUIRED_MESSAGE,
    TOO_LONG_MESSAGE,
    TOO_SHORT_MESSAGE,
    ErrorCode,
)
from app.protocols.models import FieldName

_EMAIL_PATTERN: Final[Pattern[str]] = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+"
    r"[A-Za-z]{2,63}$"
)

# Pontuação aceita em nomes além de letras e espaços (O'Neill, Jean-Luc, Jr.)
_NAME_PUNCTUATION: Final = frozenset("'’-.")


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Regra de campo: predicado + código + mensagem legível."""

    code: ErrorCode
    check: Callable[[str], bool]
    message: str


def is_valid_email(value: str) -> bool:
    """Sintaxe de email estilo RFC (local@dominio.tld)."""
    return _EMAIL_PATTERN.fullmatch(value) is not None


def has_only_name_characters(value: str) -> bool:
    """Letras (inclui acentuadas), espaços e pontuação comum de nomes."""
    return all(ch.isalpha() or ch.isspace() or ch in _NAME_PUNCTUATION for ch in value)


def _required(field: FieldName) -> FieldRule:
    return FieldRule(
        code=ErrorCode.REQUIRED,
        check=bool,
        message=REQUIRED_MESSAGE.format(label=FIELD_LABELS[field]),
    )


def _min_length(field: FieldName, limit: int) -> FieldRule:
    return FieldRule(
        code=ErrorCode.TOO_SHORT,
        check=lambda value: len(value) >= limit,
        message=TOO_SHORT_MESSAGE.format(label=FIELD_LABELS[field], limit=limit),
    )


def _max_length(field: FieldName, limit: int) -> FieldRule:
    return FieldRule(
        code=ErrorCode.TOO_LONG,
        check=lambda value: len(value) <= limit,
        message=TOO_LONG_MESSAGE.format(label=FIELD_LABELS[field], limit=limit),
    )


RuleTable = dict[FieldName, tuple[FieldRule, ...]]


def build_rule_table(policy: ValidationPolicy) -> RuleTable:
    """Monta a tabela de regras na ordem de avaliação (name, email, message)."""
    name_rules = [
        _required("name"),
        _min_length("name", policy.name_min_length),
        _max_length("name", policy.name_max_length),
    ]
    if policy.name_letters_only:
        name_rules.append(
            FieldRule(
                code=ErrorCode.INVALID_CHARACTERS,
                check=has_only_name_characters,
                message=INVALID_NAME_CHARACTERS_MESSAGE,
            )
        )

    email_rules = [
        _required("email"),
        FieldRule(
            code=ErrorCode.INVALID_FORMAT,
            check=is_valid_email,
            message=INVALID_EMAIL_MESSAGE,
        ),
    ]
    if policy.email_max_length is not None:
        email_rules.append(_max_length("email", policy.email_max_length))

    message_rules = [
        _required("message"),
        _min_length("message", policy.message_min_length),
        _max_length("message", policy.message_max_length),
    ]

    return {
        "name": tuple(name_rules),
        "email": tuple(email_rules),
        "message": tuple(message_rules),
    }
