"""Testes do validador de submissões de contato."""

from __future__ import annotations

import pytest

from api.validators.contact import (
    MAX_EMAIL_LENGTH,
    STANDARD_POLICY,
    STRICT_POLICY,
    ContactSubmissionValidator,
    ValidationPolicy,
    build_rule_table,
    get_policy,
    has_only_name_characters,
    is_valid_email,
    validate_submission,
)
from app.constants.contact import ErrorCode
from app.protocols.models import ContactSubmission


def _submission(
    name: str = "Ana Pérez",
    email: str = "ana@example.com",
    message: str = "Hola, me interesa tu trabajo.",
) -> ContactSubmission:
    return ContactSubmission(name=name, email=email, message=message)


class TestAcceptance:
    """Submissões que satisfazem todas as regras."""

    def test_valid_submission_returns_it_unchanged(self) -> None:
        submission = _submission()
        result = validate_submission(submission)

        assert result.is_valid
        assert result.errors == ()
        assert result.submission is submission

    def test_limits_are_measured_after_trim(self) -> None:
        # "  Al  " tem 2 caracteres úteis
        result = validate_submission(_submission(name="  Al  ", message="  0123456789  "))
        assert result.is_valid

    @pytest.mark.parametrize(
        ("name_len", "message_len"),
        [(2, 10), (100, 2000)],
    )
    def test_boundaries_are_inclusive(self, name_len: int, message_len: int) -> None:
        result = validate_submission(
            _submission(name="a" * name_len, message="m" * message_len)
        )
        assert result.is_valid


class TestErrorCollection:
    """Todas as violações são coletadas, uma por regra falha."""

    def test_empty_submission_reports_one_required_error_per_field(self) -> None:
        result = validate_submission(ContactSubmission())

        assert not result.is_valid
        assert [(e.field, e.code) for e in result.errors] == [
            ("name", ErrorCode.REQUIRED),
            ("email", ErrorCode.REQUIRED),
            ("message", ErrorCode.REQUIRED),
        ]
        assert result.submission is None

    def test_whitespace_only_counts_as_missing(self) -> None:
        result = validate_submission(_submission(name="   ", email="\t", message="\n "))
        assert [e.code for e in result.errors] == [ErrorCode.REQUIRED] * 3

    def test_short_name_bad_email_short_message(self) -> None:
        """name="A", email="bad", message="hi" → exatamente 3 erros."""
        result = validate_submission(_submission(name="A", email="bad", message="hi"))

        assert [(e.field, e.code) for e in result.errors] == [
            ("name", ErrorCode.TOO_SHORT),
            ("email", ErrorCode.INVALID_FORMAT),
            ("message", ErrorCode.TOO_SHORT),
        ]
        for error in result.errors:
            assert error.message

    def test_too_long_fields(self) -> None:
        result = validate_submission(_submission(name="a" * 101, message="m" * 2001))
        assert [(e.field, e.code) for e in result.errors] == [
            ("name", ErrorCode.TOO_LONG),
            ("message", ErrorCode.TOO_LONG),
        ]

    def test_single_failure_is_reported_alone(self) -> None:
        result = validate_submission(_submission(email="ana@"))
        assert len(result.errors) == 1
        assert result.errors[0].field == "email"

    def test_email_longer_than_limit(self) -> None:
        local = "a" * 64
        domain = ".".join(["b" * 60] * 4) + ".com"
        email = f"{local}@{domain}"
        assert len(email) > MAX_EMAIL_LENGTH

        result = validate_submission(_submission(email=email))
        assert [e.code for e in result.errors] == [ErrorCode.TOO_LONG]

    def test_bracket_only_fields_count_as_missing(self) -> None:
        """`<`/`>` somem na sanitização: não contam para os limites."""
        result = validate_submission(_submission(name="<<>>", message="<<<<<>>>>>"))
        assert [(e.field, e.code) for e in result.errors] == [
            ("name", ErrorCode.REQUIRED),
            ("message", ErrorCode.REQUIRED),
        ]

    def test_brackets_do_not_count_toward_min_length(self) -> None:
        result = validate_submission(_submission(name="<A>", message="<b>hola</b>"))
        assert [(e.field, e.code) for e in result.errors] == [
            ("name", ErrorCode.TOO_SHORT),
            ("message", ErrorCode.TOO_SHORT),
        ]

    def test_response_dict_has_only_field_and_message(self) -> None:
        result = validate_submission(_submission(name=""))
        assert result.errors[0].to_response_dict() == {
            "field": "name",
            "message": result.errors[0].message,
        }


class TestEmailSyntax:
    @pytest.mark.parametrize(
        "email",
        ["ana@example.com", "a.b+tag@sub.example.co", "o'neill@example.org"],
    )
    def test_valid_addresses(self, email: str) -> None:
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        ["bad", "a@b", "@example.com", "a@@example.com", "a b@example.com", "a@example.c"],
    )
    def test_invalid_addresses(self, email: str) -> None:
        assert not is_valid_email(email)


class TestStrictProfile:
    """Perfil strict: nome 3-50 só letras, mensagem 10-500."""

    def test_get_policy_profiles(self) -> None:
        assert get_policy("standard") is STANDARD_POLICY
        assert get_policy("strict") is STRICT_POLICY
        with pytest.raises(ValueError, match="desconhecido"):
            get_policy("lenient")

    def test_strict_rejects_digits_in_name(self) -> None:
        validator = ContactSubmissionValidator(STRICT_POLICY)
        result = validator.validate(_submission(name="R2D2 Robot"))

        assert [e.code for e in result.errors] == [ErrorCode.INVALID_CHARACTERS]

    def test_strict_accepts_accented_and_hyphenated_names(self) -> None:
        validator = ContactSubmissionValidator(STRICT_POLICY)
        assert validator.validate(_submission(name="José-Luis O'Neill")).is_valid

    def test_strict_length_limits(self) -> None:
        validator = ContactSubmissionValidator(STRICT_POLICY)
        result = validator.validate(_submission(name="Al", message="m" * 501))

        assert [(e.field, e.code) for e in result.errors] == [
            ("name", ErrorCode.TOO_SHORT),
            ("message", ErrorCode.TOO_LONG),
        ]

    def test_standard_allows_digits_in_name(self) -> None:
        assert ContactSubmissionValidator().validate(_submission(name="R2D2 Robot")).is_valid
        assert ContactSubmissionValidator().policy is STANDARD_POLICY

    def test_name_character_helper(self) -> None:
        assert has_only_name_characters("Ana María")
        assert not has_only_name_characters("Ana_99")


class TestPolicyAndRuleTable:
    def test_inconsistent_policy_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            ValidationPolicy(name_min_length=10, name_max_length=5)
        with pytest.raises(ValueError):
            ValidationPolicy(message_min_length=0)

    def test_rule_table_order_and_required_first(self) -> None:
        table = build_rule_table(STRICT_POLICY)

        assert list(table) == ["name", "email", "message"]
        for rules in table.values():
            assert rules[0].code == ErrorCode.REQUIRED
        assert table["name"][-1].code == ErrorCode.INVALID_CHARACTERS

    def test_rule_table_without_email_limit(self) -> None:
        table = build_rule_table(ValidationPolicy(email_max_length=None))
        assert [rule.code for rule in table["email"]] == [
            ErrorCode.REQUIRED,
            ErrorCode.INVALID_FORMAT,
        ]
