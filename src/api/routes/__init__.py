"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (formulário, health)
- Conversão do corpo JSON para o modelo de domínio
- Delegação para use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/contact/: POST /send-email
- routes/health/: GET / e GET /health

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
