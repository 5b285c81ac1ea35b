"""
Pytest fixtures para testes da Gestão Jurídica.

Os testes usam o banco de documentos em memória e adaptadores falsos para
o provedor de identidade, o storage e o Gemini. A autenticação usa tokens
JWT locais (aceitos apenas em desenvolvimento).
"""
import hashlib
import json
from types import SimpleNamespace
from typing import Any, AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from gestao_juridica.ai.gemini_service import GeminiClientRegistry
from gestao_juridica.core.config import Settings
from gestao_juridica.core.container import Container
from gestao_juridica.core.exceptions import AuthenticationError, EmailAlreadyInUseError
from gestao_juridica.core.security import create_access_token
from gestao_juridica.db.collections import COLLECTION_OFFICES, COLLECTION_USERS
from gestao_juridica.db.store import MemoryDocumentStore
from gestao_juridica.main import create_application
from gestao_juridica.models.usuario import UserRole, Usuario

OFFICE_A = "office_a"
OFFICE_B = "office_b"


class FakeIdentity:
    """Provedor de identidade em memória."""

    def __init__(self):
        self.accounts: dict[str, dict[str, Any]] = {}
        self.deleted: list[str] = []
        self.reset_emails: list[str] = []
        self._next = 0

    def register(self, uid: str, email: str, password: str = "senha123") -> None:
        self.accounts[uid] = {"email": email, "password": password}

    async def verify_token(self, id_token: str) -> dict[str, Any]:
        raise AuthenticationError("Token inválido")

    async def email_exists(self, email: str) -> bool:
        return any(a["email"] == email for a in self.accounts.values())

    async def create_user(
        self,
        email: str,
        password: str,
        display_name: str | None = None,
        email_verified: bool = False,
    ) -> str:
        if await self.email_exists(email):
            raise EmailAlreadyInUseError(email)
        self._next += 1
        uid = f"uid-{self._next}"
        self.accounts[uid] = {"email": email, "password": password, "display_name": display_name}
        return uid

    async def update_user(self, uid: str, **kwargs: Any) -> None:
        self.accounts[uid].update(kwargs)

    async def delete_user(self, uid: str) -> None:
        self.accounts.pop(uid, None)
        self.deleted.append(uid)

    async def sign_in(self, email: str, password: str) -> dict[str, Any]:
        for uid, account in self.accounts.items():
            if account["email"] == email and account["password"] == password:
                return {
                    "localId": uid,
                    "idToken": f"id-token-{uid}",
                    "refreshToken": f"refresh-{uid}",
                    "expiresIn": "3600",
                }
        raise AuthenticationError("E-mail ou senha inválidos.")

    async def reauthenticate(self, uid: str, email: str, password: str) -> None:
        account = self.accounts.get(uid)
        if account is None or account["password"] != password:
            raise AuthenticationError("Senha atual incorreta.")

    async def send_password_reset_email(self, email: str) -> None:
        self.reset_emails.append(email)


class FakeStorage:
    """Storage de arquivos em memória."""

    def __init__(self):
        self.files: dict[str, bytes] = {}

    async def upload_file(
        self,
        file_content: Any,
        original_filename: str,
        mime_type: str,
        office_id: str,
        prefix: str = "documentos",
        images_only: bool = False,
    ) -> dict:
        content = file_content if isinstance(file_content, bytes) else file_content.read()
        path = f"{office_id}/{prefix}/{original_filename}"
        self.files[path] = content
        return {
            "path": path,
            "url": f"https://storage.test/{path}",
            "hash_sha256": hashlib.sha256(content).hexdigest(),
            "size": len(content),
        }

    async def delete_file(self, path: str) -> bool:
        return self.files.pop(path, None) is not None

    def generate_signed_url(self, path: str, expiration_minutes: int = 60, method: str = "GET") -> str:
        return f"https://storage.test/{path}?expires={expiration_minutes}"


def gemini_response(payload: dict[str, Any] | str) -> SimpleNamespace:
    """Resposta no formato do SDK (apenas o atributo `text`)."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return SimpleNamespace(text=text)


USERS: dict[str, Usuario] = {
    "master": Usuario(
        id="master-a",
        office_id=OFFICE_A,
        full_name="Ana Souza",
        email="ana@escritorio-a.com",
        role=UserRole.MASTER,
        office="Ana's Office",
        oab="SP 100.000",
    ),
    "lawyer": Usuario(
        id="lawyer-a",
        office_id=OFFICE_A,
        full_name="Bruno Lima",
        email="bruno@escritorio-a.com",
        role=UserRole.LAWYER,
        office="Ana's Office",
        oab="SP 200.000",
    ),
    "lawyer2": Usuario(
        id="lawyer2-a",
        office_id=OFFICE_A,
        full_name="Carla Dias",
        email="carla@escritorio-a.com",
        role=UserRole.LAWYER,
        office="Ana's Office",
    ),
    "secretary": Usuario(
        id="secretary-a",
        office_id=OFFICE_A,
        full_name="Diana Alves",
        email="diana@escritorio-a.com",
        role=UserRole.SECRETARY,
        office="Ana's Office",
    ),
    "master_b": Usuario(
        id="master-b",
        office_id=OFFICE_B,
        full_name="Eduardo Rocha",
        email="eduardo@escritorio-b.com",
        role=UserRole.MASTER,
        office="Eduardo's Office",
    ),
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ENVIRONMENT="development",
        DOCUMENT_STORE_BACKEND="memory",
        SECRET_KEY="test-secret-key",
        TEMP_PASSWORD_LENGTH=12,
    )


@pytest.fixture
def users() -> dict[str, Usuario]:
    return USERS


@pytest.fixture
def empty_store() -> MemoryDocumentStore:
    return MemoryDocumentStore()


@pytest_asyncio.fixture
async def store() -> MemoryDocumentStore:
    """Banco em memória com dois escritórios e um usuário por papel."""
    store = MemoryDocumentStore()
    await store.set(
        COLLECTION_OFFICES,
        OFFICE_A,
        {"name": "Escritório A", "ownerId": "master-a", "googleApiKey": "chave-a"},
    )
    await store.set(
        COLLECTION_OFFICES,
        OFFICE_B,
        {"name": "Escritório B", "ownerId": "master-b", "googleApiKey": ""},
    )
    for user in USERS.values():
        data = user.model_dump(by_alias=True, exclude={"id"}, exclude_none=True, mode="json")
        await store.set(COLLECTION_USERS, user.id, {**data, "uid": user.id})
    return store


@pytest.fixture
def identity() -> FakeIdentity:
    identity = FakeIdentity()
    for user in USERS.values():
        identity.register(user.id, user.email)
    return identity


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def ai_client() -> MagicMock:
    """Cliente Gemini falso; configure `aio.models.generate_content` no teste."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    return client


@pytest.fixture
def ai_registry(settings: Settings, ai_client: MagicMock) -> GeminiClientRegistry:
    return GeminiClientRegistry(settings, client_factory=lambda api_key: ai_client)


@pytest.fixture
def container(
    settings: Settings,
    store: MemoryDocumentStore,
    identity: FakeIdentity,
    storage: FakeStorage,
    ai_registry: GeminiClientRegistry,
) -> Container:
    return Container(
        settings=settings,
        store=store,
        identity=identity,
        storage=storage,
        ai=ai_registry,
    )


@pytest.fixture
def app(container: Container):
    return create_application(container)


@pytest.fixture
def auth_headers(settings: Settings):
    """Cabeçalhos de autenticação para um usuário semeado (por papel)."""

    def build(role: str = "master") -> dict[str, str]:
        token = create_access_token(USERS[role].id, settings=settings)
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP sem autenticação (passe `headers=auth_headers(...)`)."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
