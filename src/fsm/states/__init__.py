"""
Exports públicos do módulo fsm/states.

Estados do ciclo de vida de uma submissão de contato.
"""

from fsm.states.submission import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    SubmissionState,
    is_terminal,
    is_valid_state,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "SubmissionState",
    "is_terminal",
    "is_valid_state",
]
