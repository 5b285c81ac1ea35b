"""
Raiz de composição da aplicação.

Constrói uma única vez, na inicialização, os adaptadores dos serviços
gerenciados (banco de documentos, autenticação, storage e IA). As rotas os
recebem por injeção de dependência a partir de `app.state.container`.
"""

from dataclasses import dataclass
from typing import Any, Protocol

import structlog

from gestao_juridica.ai.gemini_service import GeminiClientRegistry
from gestao_juridica.core.config import Settings
from gestao_juridica.core.firebase_auth import FirebaseAuthService
from gestao_juridica.core.storage import StorageService
from gestao_juridica.db.store import DocumentStore, create_document_store

logger = structlog.get_logger()


class IdentityProvider(Protocol):
    """Operações usadas do provedor de identidade."""

    async def verify_token(self, id_token: str) -> dict[str, Any]: ...
    async def email_exists(self, email: str) -> bool: ...
    async def create_user(
        self,
        email: str,
        password: str,
        display_name: str | None = None,
        email_verified: bool = False,
    ) -> str: ...
    async def update_user(self, uid: str, **kwargs: Any) -> None: ...
    async def delete_user(self, uid: str) -> None: ...
    async def sign_in(self, email: str, password: str) -> dict[str, Any]: ...
    async def reauthenticate(self, uid: str, email: str, password: str) -> None: ...
    async def send_password_reset_email(self, email: str) -> None: ...


class FileStorage(Protocol):
    """Operações usadas do armazenamento de arquivos."""

    async def upload_file(
        self,
        file_content: Any,
        original_filename: str,
        mime_type: str,
        office_id: str,
        prefix: str = "documentos",
        images_only: bool = False,
    ) -> dict: ...
    async def delete_file(self, path: str) -> bool: ...
    def generate_signed_url(self, path: str, expiration_minutes: int = 60, method: str = "GET") -> str: ...


@dataclass
class Container:
    """Dependências compartilhadas pela aplicação inteira."""

    settings: Settings
    store: DocumentStore
    identity: IdentityProvider
    storage: FileStorage
    ai: GeminiClientRegistry


def build_container(settings: Settings) -> Container:
    """Constrói os adaptadores reais a partir das configurações."""
    identity = FirebaseAuthService(settings)
    firebase_app = None
    if settings.DOCUMENT_STORE_BACKEND == "firestore":
        firebase_app = identity.app

    container = Container(
        settings=settings,
        store=create_document_store(settings.DOCUMENT_STORE_BACKEND, firebase_app),
        identity=identity,
        storage=StorageService(settings),
        ai=GeminiClientRegistry(settings),
    )
    logger.info(
        "Dependências inicializadas",
        store=settings.DOCUMENT_STORE_BACKEND,
        environment=settings.ENVIRONMENT,
    )
    return container
