"""
Guards para transições de estado da submissão.

Guards complementam o grafo de transições com regras que independem
do par origem/destino específico.
"""

from collections.abc import Callable

from fsm.states.submission import TERMINAL_STATES, SubmissionState, is_valid_state


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        """Cria resultado permitindo a transição."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        """Cria resultado negando a transição."""
        return cls(allowed=False, reason=reason)


Guard = Callable[[SubmissionState, SubmissionState], GuardResult]


def guard_valid_state(
    from_state: SubmissionState,
    to_state: SubmissionState,
) -> GuardResult:
    """Guard: ambos os estados devem ser membros de SubmissionState."""
    if not is_valid_state(from_state):
        return GuardResult.deny(f"Estado de origem inválido: {from_state}")

    if not is_valid_state(to_state):
        return GuardResult.deny(f"Estado de destino inválido: {to_state}")

    return GuardResult.allow()


def guard_terminal_state(
    from_state: SubmissionState,
    to_state: SubmissionState,
) -> GuardResult:
    """Guard: estados terminais não permitem saída."""
    if from_state in TERMINAL_STATES:
        return GuardResult.deny(
            f"Estado {from_state.name} é terminal, não permite transição"
        )
    return GuardResult.allow()


def guard_same_state(
    from_state: SubmissionState,
    to_state: SubmissionState,
) -> GuardResult:
    """Guard: o pipeline só avança, transições reflexivas são proibidas."""
    if from_state == to_state:
        return GuardResult.deny(
            f"Transição reflexiva não permitida: {from_state.name} → {to_state.name}"
        )
    return GuardResult.allow()


# Aplicados em ordem; todos devem retornar allow()
DEFAULT_GUARDS: list[Guard] = [
    guard_valid_state,
    guard_terminal_state,
    guard_same_state,
]


def evaluate_guards(
    from_state: SubmissionState,
    to_state: SubmissionState,
    guards: list[Guard] | None = None,
) -> GuardResult:
    """
    Avalia os guards para uma transição.

    Returns:
        GuardResult do primeiro guard que negar, ou allow() se todos passarem
    """
    guards_to_apply = guards if guards is not None else DEFAULT_GUARDS

    for guard in guards_to_apply:
        result = guard(from_state, to_state)
        if not result.allowed:
            return result

    return GuardResult.allow()
