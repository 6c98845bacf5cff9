"""
Regras de transição válidas entre estados da submissão.

Grafo: RECEIVED → VALIDATING → (REJECTED | SANITIZING → COMPOSING →
DISPATCHING → (SUCCEEDED | FAILED)).
"""

from fsm.states.submission import TERMINAL_STATES, SubmissionState

TransitionMap = dict[SubmissionState, frozenset[SubmissionState]]

# Chave: estado de origem; valor: destinos permitidos
VALID_TRANSITIONS: TransitionMap = {
    SubmissionState.RECEIVED: frozenset({SubmissionState.VALIDATING}),
    SubmissionState.VALIDATING: frozenset({
        SubmissionState.REJECTED,
        SubmissionState.SANITIZING,
    }),
    # SANITIZING e COMPOSING são transformações puras: só avançam
    SubmissionState.SANITIZING: frozenset({SubmissionState.COMPOSING}),
    SubmissionState.COMPOSING: frozenset({SubmissionState.DISPATCHING}),
    SubmissionState.DISPATCHING: frozenset({
        SubmissionState.SUCCEEDED,
        SubmissionState.FAILED,
    }),
    # Terminais
    SubmissionState.REJECTED: frozenset(),
    SubmissionState.SUCCEEDED: frozenset(),
    SubmissionState.FAILED: frozenset(),
}


def get_valid_targets(state: SubmissionState) -> frozenset[SubmissionState]:
    """Retorna os destinos válidos a partir de `state` (vazio se terminal)."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: SubmissionState, to_state: SubmissionState) -> bool:
    """
    Verifica se uma transição é válida segundo o grafo.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino

    Returns:
        True se a transição é permitida
    """
    if from_state in TERMINAL_STATES:
        return False
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Estados terminais têm conjunto vazio
    - Todo estado não-terminal alcança algum estado terminal

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in SubmissionState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        targets = VALID_TRANSITIONS.get(state, frozenset())
        if targets:
            errors.append(
                f"Estado terminal {state.name} não deveria ter transições: {targets}"
            )

    for state in SubmissionState:
        if state in TERMINAL_STATES:
            continue
        if not _reaches_terminal(state):
            errors.append(f"Estado {state.name} não alcança estado terminal")

    return errors


def _reaches_terminal(start: SubmissionState) -> bool:
    pending = [start]
    seen: set[SubmissionState] = set()
    while pending:
        state = pending.pop()
        if state in TERMINAL_STATES:
            return True
        if state in seen:
            continue
        seen.add(state)
        pending.extend(get_valid_targets(state))
    return False
