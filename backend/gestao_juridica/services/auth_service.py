"""
Service de Autenticação.

Cadastro do primeiro escritório, login e alterações de credenciais, sempre
pelo provedor de identidade (Firebase Authentication).
"""

import time

import structlog

from gestao_juridica.core.container import IdentityProvider
from gestao_juridica.core.exceptions import (
    AuthenticationError,
    DocumentStoreError,
    IdentityProviderError,
    OfficeAlreadyExistsError,
)
from gestao_juridica.db.collections import COLLECTION_OFFICES, COLLECTION_USERS
from gestao_juridica.db.store import SERVER_TIMESTAMP, BatchWrite, DocumentStore
from gestao_juridica.models.usuario import UserRole, Usuario
from gestao_juridica.repositories.usuario_repository import UsuarioRepository
from gestao_juridica.schemas.usuario import (
    ChangeEmailRequest,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    SignupRequest,
)

logger = structlog.get_logger()


def office_name_for(full_name: str) -> str:
    """Nome inicial do escritório a partir do nome do administrador."""
    first_name = full_name.split()[0] if full_name.split() else full_name
    return f"{first_name}'s Office"


class AuthService:
    """
    Service de autenticação.

    Senhas nunca passam pelo banco de documentos: ficam apenas no provedor
    de identidade.
    """

    def __init__(self, store: DocumentStore, identity: IdentityProvider):
        self._store = store
        self._identity = identity
        self._usuario_repo = UsuarioRepository(store)

    async def signup(self, dados: SignupRequest) -> Usuario:
        """
        Cria o escritório e seu administrador.

        Permitido apenas enquanto não existir nenhum administrador; depois
        disso novos usuários entram por convite.
        """
        if await self._usuario_repo.master_exists():
            logger.warning("Cadastro público bloqueado: escritório já existe")
            raise OfficeAlreadyExistsError()

        uid = await self._identity.create_user(
            email=dados.email,
            password=dados.password,
            display_name=dados.full_name,
        )

        office_id = f"office_{int(time.time() * 1000)}"
        office_name = office_name_for(dados.full_name)

        try:
            await self._store.commit_batch([
                BatchWrite(
                    COLLECTION_USERS,
                    uid,
                    {
                        "uid": uid,
                        "fullName": dados.full_name,
                        "email": dados.email,
                        "role": UserRole.MASTER.value,
                        "officeId": office_id,
                        "office": office_name,
                        "createdAt": SERVER_TIMESTAMP,
                    },
                ),
                BatchWrite(
                    COLLECTION_OFFICES,
                    office_id,
                    {
                        "name": office_name,
                        "ownerId": uid,
                        "googleApiKey": "",
                        "createdAt": SERVER_TIMESTAMP,
                    },
                ),
            ])
        except DocumentStoreError:
            logger.error("Falha ao gravar escritório; removendo usuário criado", uid=uid)
            try:
                await self._identity.delete_user(uid)
            except IdentityProviderError:
                logger.error("Compensação falhou: usuário órfão no provedor", uid=uid)
            raise

        logger.info("Escritório criado", office_id=office_id, uid=uid)
        return await self._usuario_repo.get_by_id(uid)

    async def login(self, dados: LoginRequest) -> LoginResponse:
        """Autentica com e-mail e senha e devolve os tokens do provedor."""
        result = await self._identity.sign_in(dados.email, dados.password)
        uid = result.get("localId")

        user = await self._usuario_repo.get_by_id(uid)
        if user is None:
            logger.warning("Login sem cadastro de usuário", uid=uid)
            raise AuthenticationError("Usuário não encontrado no sistema")

        logger.info("Login realizado", uid=uid)
        return LoginResponse(
            id_token=result["idToken"],
            refresh_token=result.get("refreshToken"),
            expires_in=int(result.get("expiresIn", 3600)),
            user=user,
        )

    async def request_password_reset(self, email: str) -> None:
        await self._identity.send_password_reset_email(email)

    async def change_password(self, user: Usuario, dados: ChangePasswordRequest) -> None:
        """Troca a senha após reautenticar com a senha atual."""
        await self._identity.reauthenticate(user.id, user.email, dados.current_password)
        await self._identity.update_user(user.id, password=dados.new_password)
        logger.info("Senha alterada", uid=user.id)

    async def change_email(self, user: Usuario, dados: ChangeEmailRequest) -> Usuario:
        """Troca o e-mail no provedor e no cadastro do usuário."""
        await self._identity.reauthenticate(user.id, user.email, dados.current_password)
        await self._identity.update_user(user.id, email=dados.new_email)
        updated = await self._usuario_repo.update(user.id, {"email": dados.new_email})
        logger.info("E-mail alterado", uid=user.id)
        return updated
