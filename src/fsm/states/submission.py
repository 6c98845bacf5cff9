"""
Estados do ciclo de vida de uma submissão de contato.

Uma submissão percorre os estados dentro de uma única requisição HTTP;
nenhum estado sobrevive à resposta.
"""

from enum import StrEnum


class SubmissionState(StrEnum):
    """
    Estados canônicos do processamento de uma submissão.

    Estados não-terminais:
        - RECEIVED: Corpo recebido e decodificado pelo transporte
        - VALIDATING: Regras de campo em avaliação
        - SANITIZING: Limpeza dos campos aceitos
        - COMPOSING: Montagem dos emails
        - DISPATCHING: Envio sequencial ao provedor

    Estados terminais:
        - REJECTED: Validação falhou (HTTP 400)
        - SUCCEEDED: Emails obrigatórios enviados (HTTP 200)
        - FAILED: Falha irrecuperável no envio (HTTP 500)
    """

    RECEIVED = "RECEIVED"
    VALIDATING = "VALIDATING"
    SANITIZING = "SANITIZING"
    COMPOSING = "COMPOSING"
    DISPATCHING = "DISPATCHING"

    REJECTED = "REJECTED"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


# Uma vez em estado terminal, a submissão não transita mais
TERMINAL_STATES: frozenset[SubmissionState] = frozenset({
    SubmissionState.REJECTED,
    SubmissionState.SUCCEEDED,
    SubmissionState.FAILED,
})

DEFAULT_INITIAL_STATE: SubmissionState = SubmissionState.RECEIVED


def is_terminal(state: SubmissionState) -> bool:
    """Verifica se o estado é terminal."""
    return state in TERMINAL_STATES


def is_valid_state(state: SubmissionState) -> bool:
    """Verifica se o valor é um membro do enum."""
    return isinstance(state, SubmissionState)
