"""Validators — regras sintáticas de entrada.

Estrutura:
- contact/: regras de name/email/message do formulário de contato
"""

__all__: list[str] = []
