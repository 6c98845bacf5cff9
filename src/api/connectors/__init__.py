"""Connectors — adapters de borda para APIs externas.

Estrutura:
- email/: provedores de envio de email (API HTTP e SMTP)
"""

__all__: list[str] = []
