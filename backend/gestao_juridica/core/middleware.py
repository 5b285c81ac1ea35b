"""
Middleware de tratamento de exceções.

Converte exceções em respostas HTTP padronizadas.
"""

import traceback
import uuid

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gestao_juridica.core.config import settings
from gestao_juridica.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    CRMException,
    DocumentStoreError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
    UpstreamError,
    ValidationError,
)

logger = structlog.get_logger()

# Ordem importa: subclasses antes das bases
STATUS_MAP: list[tuple[type[CRMException], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
    (ResourceAlreadyExistsError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (BusinessRuleError, status.HTTP_400_BAD_REQUEST),
    (DocumentStoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (UpstreamError, status.HTTP_502_BAD_GATEWAY),
]


def status_for(exc: CRMException) -> int:
    for exc_type, http_status in STATUS_MAP:
        if isinstance(exc, exc_type):
            return http_status
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    details: dict | None = None,
) -> JSONResponse:
    """Cria resposta de erro padronizada."""
    content = {
        "success": False,
        "error": {
            "code": code,
            "message": message,
        },
    }
    if details and settings.DEBUG:
        content["error"]["details"] = details

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def crm_exception_handler(request: Request, exc: CRMException) -> JSONResponse:
    """Handler para exceções da aplicação."""
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Application exception",
        code=exc.code,
        message=exc.message,
        path=request.url.path,
        status_code=status_code,
    )

    details = dict(exc.details)
    errors = getattr(exc, "errors", None)
    if errors:
        details["errors"] = errors

    return create_error_response(
        status_code=status_code,
        code=exc.code,
        message=exc.message,
        details=details,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Erros de validação do corpo/parâmetros da requisição."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.warning("Dados inválidos na requisição", path=request.url.path, errors=len(errors))
    return create_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        code="VALIDATION_ERROR",
        message="Dados inválidos.",
        details={"errors": errors},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler para exceções não tratadas."""
    logger.error(
        "Unhandled exception",
        exc_type=type(exc).__name__,
        message=str(exc),
        path=request.url.path,
        traceback=traceback.format_exc() if settings.DEBUG else None,
    )

    message = "Erro interno do servidor"
    details = None

    if settings.DEBUG:
        message = str(exc)
        details = {"traceback": traceback.format_exc()}

    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code="INTERNAL_ERROR",
        message=message,
        details=details,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Registra handlers de exceção na aplicação."""
    app.add_exception_handler(CRMException, crm_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)


class RequestContextMiddleware:
    """
    Middleware para adicionar contexto às requisições.

    Adiciona request_id, path e método ao contexto de log.
    """

    def __init__(self, app: FastAPI):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())[:8]

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=scope.get("path", ""),
            method=scope.get("method", "WS"),
        )

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode()))
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_wrapper)
