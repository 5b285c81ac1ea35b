"""
Dependências injetáveis do FastAPI.

Define dependências reutilizáveis para autenticação e acesso aos serviços
compartilhados da raiz de composição.
"""

from typing import Annotated

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from gestao_juridica.ai.gemini_service import GeminiClientRegistry
from gestao_juridica.core.config import Settings
from gestao_juridica.core.container import Container, FileStorage, IdentityProvider
from gestao_juridica.core.exceptions import AuthenticationError, InvalidTokenError
from gestao_juridica.core.security import verify_token
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.repositories.usuario_repository import UsuarioRepository

logger = structlog.get_logger()

security = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    """Container criado na inicialização da aplicação."""
    return request.app.state.container


AppContainer = Annotated[Container, Depends(get_container)]


def get_settings_dep(container: AppContainer) -> Settings:
    return container.settings


def get_store(container: AppContainer) -> DocumentStore:
    return container.store


def get_identity(container: AppContainer) -> IdentityProvider:
    return container.identity


def get_storage(container: AppContainer) -> FileStorage:
    return container.storage


def get_ai_registry(container: AppContainer) -> GeminiClientRegistry:
    return container.ai


async def resolve_user(token: str, container: Container) -> Usuario:
    """
    Resolve o usuário de um token.

    Em desenvolvimento aceita primeiro tokens JWT locais; nos demais ambientes
    apenas ID tokens do Firebase. O UID leva ao documento em `users`.

    Raises:
        AuthenticationError: token inválido ou usuário sem cadastro
    """
    uid: str | None = None

    if container.settings.ENVIRONMENT == "development":
        payload = verify_token(token, container.settings)
        if payload is not None:
            uid = payload.get("sub")

    if uid is None:
        decoded = await container.identity.verify_token(token)
        uid = decoded.get("uid")

    if not uid:
        raise InvalidTokenError()

    user = await UsuarioRepository(container.store).get_by_id(uid)
    if user is None:
        logger.warning("Token válido sem cadastro de usuário", uid=uid)
        raise AuthenticationError("Usuário não encontrado no sistema")

    structlog.contextvars.bind_contextvars(user_id=user.id, office_id=user.office_id)
    return user


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    container: AppContainer,
) -> Usuario:
    """
    Dependency que retorna o usuário autenticado.

    Raises:
        AuthenticationError: token ausente, inválido ou usuário não encontrado
    """
    if credentials is None:
        raise AuthenticationError("Token de autenticação não fornecido")
    return await resolve_user(credentials.credentials, container)


# Type aliases para facilitar uso nas rotas
AppSettings = Annotated[Settings, Depends(get_settings_dep)]
Store = Annotated[DocumentStore, Depends(get_store)]
Identity = Annotated[IdentityProvider, Depends(get_identity)]
Storage = Annotated[FileStorage, Depends(get_storage)]
AIRegistry = Annotated[GeminiClientRegistry, Depends(get_ai_registry)]
CurrentUser = Annotated[Usuario, Depends(get_current_user)]
