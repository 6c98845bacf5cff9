"""
Módulo FSM — máquina de estados do processamento de submissões.

Estrutura:
    - states/: SubmissionState e estados terminais
    - transitions/: grafo de transições (VALID_TRANSITIONS)
    - rules/: guards
    - manager/: SubmissionStateMachine
    - types/: StateTransition, TransitionResult
"""

from fsm.manager import (
    InvalidTransitionError,
    SubmissionStateMachine,
    create_fsm,
)
from fsm.rules import (
    GuardResult,
    evaluate_guards,
)
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    SubmissionState,
    is_terminal,
    is_valid_state,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import (
    StateTransition,
    TransitionResult,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "GuardResult",
    "InvalidTransitionError",
    "StateTransition",
    "SubmissionState",
    "SubmissionStateMachine",
    "TransitionResult",
    "create_fsm",
    "evaluate_guards",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "is_valid_state",
    "validate_transition_map",
]
