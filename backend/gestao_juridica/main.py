"""
Ponto de entrada principal da API da Gestão Jurídica.

Este módulo configura a aplicação FastAPI com todas as rotas,
middlewares e handlers de eventos.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gestao_juridica.api.v1.router import api_router
from gestao_juridica.core.config import settings
from gestao_juridica.core.container import Container, build_container
from gestao_juridica.core.logging import setup_logging
from gestao_juridica.core.middleware import RequestContextMiddleware, setup_exception_handlers

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia o ciclo de vida da aplicação."""
    # Startup
    setup_logging(settings)
    if getattr(app.state, "container", None) is None:
        app.state.container = build_container(settings)
    logger.info("Iniciando Gestão Jurídica API", version=settings.VERSION)

    yield

    # Shutdown
    logger.info("Encerrando Gestão Jurídica API")


def create_application(container: Container | None = None) -> FastAPI:
    """
    Factory para criar a aplicação FastAPI.

    Com `container` informado (testes), os adaptadores já ficam disponíveis
    sem depender do lifespan.
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Gestão de escritórios de advocacia com IA integrada",
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        redoc_url=f"{settings.API_V1_PREFIX}/redoc",
        lifespan=lifespan,
    )
    app.state.container = container

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    setup_exception_handlers(app)

    # Rotas
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Endpoint de health check para Cloud Run."""
        return {"status": "healthy", "version": settings.VERSION}

    return app


app = create_application()
