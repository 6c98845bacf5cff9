"""
Exports públicos do módulo fsm/manager.

Máquina de estados (SubmissionStateMachine) de uma requisição.
"""

from fsm.manager.machine import (
    InvalidTransitionError,
    SubmissionStateMachine,
    create_fsm,
)

__all__ = [
    "InvalidTransitionError",
    "SubmissionStateMachine",
    "create_fsm",
]
