"""Payload builders — construção de payloads para provedores externos.

Estrutura:
- email/: notificação ao operador e confirmação ao remetente
"""

__all__: list[str] = []
