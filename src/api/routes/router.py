"""Agregador de rotas — registra todos os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.contact.router import router as contact_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Info e health checks na raiz (GET / e GET /health)
    api_router.include_router(health_router, tags=["health"])

    # Formulário de contato (POST /send-email)
    api_router.include_router(contact_router, tags=["contact"])

    return api_router
