"""
Máquina de estados (SubmissionStateMachine) de uma requisição de contato.

Uma instância por requisição; nada é compartilhado entre requisições.
"""

from typing import Any

from fsm.rules.guards import GuardResult, evaluate_guards
from fsm.states.submission import (
    DEFAULT_INITIAL_STATE,
    SubmissionState,
    is_terminal,
)
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult


class InvalidTransitionError(RuntimeError):
    """Transição fora do grafo: erro de programação no orquestrador."""


class SubmissionStateMachine:
    """
    Máquina de estados do processamento de uma submissão.

    Attributes:
        current_state: Estado atual
        history: Transições realizadas (para auditoria)
    """

    __slots__ = ("_current_state", "_history", "_request_id")

    def __init__(
        self,
        initial_state: SubmissionState | None = None,
        request_id: str = "",
    ) -> None:
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._request_id = request_id

    @property
    def current_state(self) -> SubmissionState:
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def request_id(self) -> str:
        return self._request_id

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_state)

    def can_transition_to(self, target: SubmissionState) -> bool:
        """Verifica se pode transitar para o estado alvo."""
        if not is_transition_valid(self._current_state, target):
            return False
        return evaluate_guards(self._current_state, target).allowed

    def get_valid_targets(self) -> frozenset[SubmissionState]:
        return get_valid_targets(self._current_state)

    def transition(
        self,
        target: SubmissionState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Identificador do gatilho
            metadata: Dados adicionais para auditoria (nunca PII)

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        guard_result: GuardResult = evaluate_guards(self._current_state, target)
        if not guard_result.allowed:
            return TransitionResult(
                success=False,
                error_reason=guard_result.reason,
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )

        self._current_state = target
        self._history.append(transition)

        return TransitionResult(success=True, transition=transition)

    def advance(
        self,
        target: SubmissionState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> StateTransition:
        """
        Como `transition`, mas levanta InvalidTransitionError se negada.

        Usado pelo orquestrador, onde toda transição é esperada válida.
        """
        result = self.transition(target, trigger, metadata)
        if not result.success or result.transition is None:
            raise InvalidTransitionError(result.error_reason or "transição negada")
        return result.transition

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo do estado atual, seguro para logs."""
        return {
            "request_id": self._request_id,
            "current_state": self._current_state.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        return [t.to_log_dict() for t in self._history]


def create_fsm(
    request_id: str = "",
    initial_state: SubmissionState | None = None,
) -> SubmissionStateMachine:
    """Factory para criar a máquina de uma requisição."""
    return SubmissionStateMachine(
        initial_state=initial_state,
        request_id=request_id,
    )

