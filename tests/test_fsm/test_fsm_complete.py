"""
Testes abrangentes para o módulo FSM.

- Testamos comportamento e contrato público
- Um teste cobre múltiplos componentes relacionados
- Foco em cenários válidos + inválidos + bordas
"""

from datetime import datetime

import pytest

from fsm import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    GuardResult,
    InvalidTransitionError,
    StateTransition,
    SubmissionState,
    SubmissionStateMachine,
    TransitionResult,
    create_fsm,
    evaluate_guards,
    get_valid_targets,
    is_terminal,
    is_transition_valid,
    is_valid_state,
    validate_transition_map,
)
from fsm.rules.guards import (
    DEFAULT_GUARDS,
    guard_same_state,
    guard_terminal_state,
    guard_valid_state,
)
from fsm.states.submission import SubmissionState as DirectSubmissionState


class TestSubmissionStateAndTerminals:
    """
    Testa SubmissionState enum, TERMINAL_STATES, is_terminal e is_valid_state.
    """

    def test_enum_has_8_states_and_terminal_states_are_correct(self) -> None:
        all_states = list(SubmissionState)
        assert len(all_states) == 8

        expected_terminals = {
            SubmissionState.REJECTED,
            SubmissionState.SUCCEEDED,
            SubmissionState.FAILED,
        }
        assert expected_terminals == TERMINAL_STATES

        for state in all_states:
            assert is_terminal(state) is (state in expected_terminals)
            assert is_valid_state(state) is True

        assert DEFAULT_INITIAL_STATE == SubmissionState.RECEIVED
        assert not is_terminal(DEFAULT_INITIAL_STATE)

    def test_direct_import_matches_reexport(self) -> None:
        assert DirectSubmissionState is SubmissionState

    def test_values_are_explicit_strings(self) -> None:
        """Valores string estáveis para logs."""
        for state in SubmissionState:
            assert state.value == state.name
            assert str(state) == state.name

    def test_is_valid_state_rejects_plain_strings(self) -> None:
        assert is_valid_state("RECEIVED") is False  # type: ignore[arg-type]


class TestValidTransitionsAndRules:
    """
    Testa VALID_TRANSITIONS, get_valid_targets, is_transition_valid e validate_transition_map.
    """

    def test_structure_and_terminal_states_have_no_exits(self) -> None:
        for state in SubmissionState:
            assert state in VALID_TRANSITIONS

        for terminal in TERMINAL_STATES:
            assert VALID_TRANSITIONS[terminal] == frozenset()

        for state in set(SubmissionState) - TERMINAL_STATES:
            assert len(VALID_TRANSITIONS[state]) > 0

        assert validate_transition_map() == []

    def test_get_valid_targets_and_is_transition_valid_consistency(self) -> None:
        for from_state in SubmissionState:
            valid_targets = get_valid_targets(from_state)
            for to_state in SubmissionState:
                expected = to_state in valid_targets
                assert is_transition_valid(from_state, to_state) == expected, (
                    f"{from_state} → {to_state}"
                )

    def test_pipeline_paths(self) -> None:
        # Caminho feliz
        assert is_transition_valid(SubmissionState.RECEIVED, SubmissionState.VALIDATING)
        assert is_transition_valid(SubmissionState.VALIDATING, SubmissionState.SANITIZING)
        assert is_transition_valid(SubmissionState.SANITIZING, SubmissionState.COMPOSING)
        assert is_transition_valid(SubmissionState.COMPOSING, SubmissionState.DISPATCHING)
        assert is_transition_valid(SubmissionState.DISPATCHING, SubmissionState.SUCCEEDED)

        # Desvios
        assert is_transition_valid(SubmissionState.VALIDATING, SubmissionState.REJECTED)
        assert is_transition_valid(SubmissionState.DISPATCHING, SubmissionState.FAILED)

        # Pular etapas é inválido
        assert not is_transition_valid(SubmissionState.RECEIVED, SubmissionState.DISPATCHING)
        assert not is_transition_valid(SubmissionState.VALIDATING, SubmissionState.COMPOSING)
        assert not is_transition_valid(SubmissionState.SANITIZING, SubmissionState.FAILED)

        # Terminal não sai
        for terminal in TERMINAL_STATES:
            for state in SubmissionState:
                assert not is_transition_valid(terminal, state)


class TestGuardsAndEvaluation:
    """
    Testa guards individuais, GuardResult e evaluate_guards.
    """

    def test_guard_result_creation(self) -> None:
        result = GuardResult.allow()
        assert result.allowed is True
        assert result.reason is None

        result = GuardResult.deny("motivo do bloqueio")
        assert result.allowed is False
        assert result.reason == "motivo do bloqueio"

    def test_individual_guards(self) -> None:
        assert not guard_terminal_state(
            SubmissionState.SUCCEEDED, SubmissionState.RECEIVED
        ).allowed
        assert guard_terminal_state(
            SubmissionState.DISPATCHING, SubmissionState.SUCCEEDED
        ).allowed

        # Nenhuma transição reflexiva é permitida
        for state in SubmissionState:
            assert not guard_same_state(state, state).allowed

        assert guard_valid_state(
            SubmissionState.RECEIVED, SubmissionState.VALIDATING
        ).allowed
        assert not guard_valid_state(
            "RECEIVED", SubmissionState.VALIDATING  # type: ignore[arg-type]
        ).allowed

    def test_evaluate_guards_combines_all_guards(self) -> None:
        result = evaluate_guards(SubmissionState.RECEIVED, SubmissionState.VALIDATING)
        assert result.allowed is True

        result = evaluate_guards(SubmissionState.FAILED, SubmissionState.RECEIVED)
        assert result.allowed is False
        assert "terminal" in (result.reason or "").lower()

        assert len(DEFAULT_GUARDS) == 3

    def test_evaluate_guards_with_custom_list(self) -> None:
        def _deny(from_state: SubmissionState, to_state: SubmissionState) -> GuardResult:
            return GuardResult.deny("custom")

        result = evaluate_guards(
            SubmissionState.RECEIVED,
            SubmissionState.VALIDATING,
            guards=[_deny],
        )
        assert result.reason == "custom"

        assert evaluate_guards(
            SubmissionState.FAILED, SubmissionState.FAILED, guards=[]
        ).allowed


class TestStateTransitionAndTransitionResult:
    """
    Testa StateTransition dataclass e TransitionResult.
    """

    def test_state_transition_creation_and_log_dict(self) -> None:
        transition = StateTransition(
            from_state=SubmissionState.VALIDATING,
            to_state=SubmissionState.REJECTED,
            trigger="validation_failed",
            metadata={"fields": ["email"]},
        )

        assert isinstance(transition.timestamp, datetime)
        assert transition.timestamp.tzinfo is not None

        log = transition.to_log_dict()
        assert log["from_state"] == "VALIDATING"
        assert log["to_state"] == "REJECTED"
        assert log["trigger"] == "validation_failed"
        assert log["metadata"] == {"fields": ["email"]}
        assert "timestamp" in log

    @pytest.mark.parametrize("trigger", ["", "   "])
    def test_state_transition_rejects_blank_trigger(self, trigger: str) -> None:
        with pytest.raises(ValueError, match="trigger"):
            StateTransition(
                from_state=SubmissionState.RECEIVED,
                to_state=SubmissionState.VALIDATING,
                trigger=trigger,
            )

    def test_transition_result_validation(self) -> None:
        transition = StateTransition(
            from_state=SubmissionState.RECEIVED,
            to_state=SubmissionState.VALIDATING,
            trigger="test",
        )

        result = TransitionResult(success=True, transition=transition)
        assert result.error_reason is None

        result = TransitionResult(success=False, error_reason="Transição inválida")
        assert result.transition is None

        with pytest.raises(ValueError, match="deve incluir transition"):
            TransitionResult(success=True, transition=None)

        with pytest.raises(ValueError, match="deve incluir error_reason"):
            TransitionResult(success=False, error_reason=None)


class TestSubmissionStateMachineCompleteFlow:
    """
    Testa SubmissionStateMachine e create_fsm com fluxos completos.
    """

    def test_create_fsm_and_initial_state(self) -> None:
        machine = create_fsm("req-123")

        assert machine.current_state == SubmissionState.RECEIVED
        assert machine.request_id == "req-123"
        assert machine.is_terminal is False
        assert machine.history == []

        custom = create_fsm("req-456", initial_state=SubmissionState.DISPATCHING)
        assert custom.current_state == SubmissionState.DISPATCHING

    def test_complete_happy_path_flow(self) -> None:
        machine = create_fsm("req-happy")

        steps = [
            (SubmissionState.VALIDATING, "submission_received"),
            (SubmissionState.SANITIZING, "validation_passed"),
            (SubmissionState.COMPOSING, "submission_sanitized"),
            (SubmissionState.DISPATCHING, "messages_composed"),
            (SubmissionState.SUCCEEDED, "dispatch_succeeded"),
        ]
        for target, trigger in steps:
            assert machine.can_transition_to(target)
            result = machine.transition(target, trigger=trigger)
            assert result.success
            assert machine.current_state == target

        assert machine.is_terminal
        assert machine.get_valid_targets() == frozenset()
        assert len(machine.history) == 5

        summary = machine.get_state_summary()
        assert summary == {
            "request_id": "req-happy",
            "current_state": "SUCCEEDED",
            "is_terminal": True,
            "transition_count": 5,
        }

        history = machine.get_history_summary()
        assert [item["trigger"] for item in history] == [t for _, t in steps]

    def test_rejection_flow_and_terminal_lock(self) -> None:
        machine = create_fsm("req-rejected")
        machine.transition(SubmissionState.VALIDATING, trigger="submission_received")
        result = machine.transition(
            SubmissionState.REJECTED,
            trigger="validation_failed",
            metadata={"fields": ["name"]},
        )
        assert result.success
        assert result.transition is not None
        assert result.transition.metadata == {"fields": ["name"]}

        # Terminal: nada mais é aceito
        result = machine.transition(SubmissionState.SANITIZING, trigger="retry")
        assert result.success is False
        assert machine.current_state == SubmissionState.REJECTED
        assert len(machine.history) == 2

    def test_invalid_transition_keeps_state(self) -> None:
        machine = create_fsm("req-invalid")
        result = machine.transition(SubmissionState.SUCCEEDED, trigger="skip")

        assert result.success is False
        assert "Transição inválida" in (result.error_reason or "")
        assert machine.current_state == SubmissionState.RECEIVED
        assert machine.history == []
        assert not machine.can_transition_to(SubmissionState.SUCCEEDED)

    def test_advance_raises_on_invalid_transition(self) -> None:
        machine = SubmissionStateMachine(request_id="req-advance")

        transition = machine.advance(SubmissionState.VALIDATING, "submission_received")
        assert transition.to_state == SubmissionState.VALIDATING

        with pytest.raises(InvalidTransitionError):
            machine.advance(SubmissionState.DISPATCHING, "skip")
        assert machine.current_state == SubmissionState.VALIDATING

    def test_history_is_a_copy(self) -> None:
        machine = create_fsm()
        machine.transition(SubmissionState.VALIDATING, trigger="submission_received")

        history = machine.history
        history.clear()
        assert len(machine.history) == 1
