"""Entrypoint da aplicação contact-relay.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 5000

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 5000
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from app.bootstrap import (
    create_mail_sender,
    create_submission_use_case,
    initialize_app,
    validate_runtime_settings,
)
from app.constants.contact import (
    INTERNAL_ERROR_MESSAGE,
    INVALID_REQUEST_MESSAGE,
    ROUTE_NOT_FOUND_MESSAGE,
)
from app.observability import CORRELATION_HEADER, correlation_scope
from config.logging import get_logger
from config.settings import get_base_settings, get_contact_settings, get_email_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

    from app.protocols.mail_sender import MailSenderProtocol
    from config.settings import BaseSettings, ContactSettings, EmailSettings

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria o mail sender compartilhado e o use case

    Shutdown:
    - Fecha o mail sender
    """
    base_settings: BaseSettings = app.state.base_settings
    logger.info("app_starting", extra={"environment": base_settings.environment})

    email_settings: EmailSettings = getattr(app.state, "email_settings", None) or get_email_settings()
    contact_settings: ContactSettings = (
        getattr(app.state, "contact_settings", None) or get_contact_settings()
    )
    if not getattr(app.state, "skip_settings_validation", False):
        validate_runtime_settings()

    sender: MailSenderProtocol | None = getattr(app.state, "mail_sender", None)
    if sender is None:
        sender = create_mail_sender(email_settings, base_settings)
    app.state.mail_sender = sender
    app.state.submission_use_case = create_submission_use_case(
        sender, email_settings, contact_settings, base_settings
    )
    app.state.started_at = time.monotonic()

    yield

    logger.info("app_shutting_down", extra={"environment": base_settings.environment})
    await sender.aclose()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


async def _handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(status.HTTP_404_NOT_FOUND, ROUTE_NOT_FOUND_MESSAGE)
    message = exc.detail if isinstance(exc.detail, str) else INTERNAL_ERROR_MESSAGE
    response = _error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Só tipos de erro; o corpo pode conter dados pessoais
    logger.info(
        "request_body_invalid",
        extra={"error_types": sorted({str(error.get("type")) for error in exc.errors()})},
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_exception",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


async def _correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def create_app(
    *,
    base_settings: BaseSettings | None = None,
    email_settings: EmailSettings | None = None,
    contact_settings: ContactSettings | None = None,
    mail_sender: MailSenderProtocol | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Os parâmetros substituem as settings lidas do ambiente e o sender
    criado no lifespan (usado em testes).

    Returns:
        Aplicação FastAPI configurada.
    """
    settings = base_settings or get_base_settings()

    fastapi_app = FastAPI(
        title="contact-relay",
        description="Relay de formulário de contato para email",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if settings.is_production else "/openapi.json",
    )
    fastapi_app.state.base_settings = settings
    fastapi_app.state.email_settings = email_settings
    fastapi_app.state.contact_settings = contact_settings
    fastapi_app.state.mail_sender = mail_sender
    # Settings injetadas dispensam a validação das variáveis de ambiente
    fastapi_app.state.skip_settings_validation = (
        email_settings is not None and contact_settings is not None
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allowed_origins),
        # Credenciais não combinam com origem "*"
        allow_credentials=not settings.allows_any_origin,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_HEADER],
    )
    fastapi_app.middleware("http")(_correlation_middleware)

    fastapi_app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    fastapi_app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    fastapi_app.add_exception_handler(Exception, _handle_unexpected_error)

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"environment": settings.environment})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info("app_run", extra={"port": settings.port, "environment": settings.environment})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development and settings.debug,
    )


if __name__ == "__main__":
    main()
