"""
Service da Equipe do escritório (listagem e convites).
"""

import structlog

from gestao_juridica.core.config import Settings
from gestao_juridica.core.container import IdentityProvider
from gestao_juridica.core.exceptions import (
    DocumentStoreError,
    EmailAlreadyInUseError,
    IdentityProviderError,
)
from gestao_juridica.core.permissions import Action, authorize
from gestao_juridica.core.security import generate_temporary_password
from gestao_juridica.db.store import DocumentStore, Filter
from gestao_juridica.models.usuario import UserRole, Usuario
from gestao_juridica.repositories.escritorio_repository import EscritorioRepository
from gestao_juridica.repositories.usuario_repository import EquipeRepository
from gestao_juridica.schemas.usuario import ConviteRequest, ConviteResponse, MembroPublico

logger = structlog.get_logger()

OAB_PENDENTE = "Pendente"
ESPECIALIDADE_A_DEFINIR = "A definir"


class EquipeService:
    """Membros do escritório do usuário logado."""

    def __init__(
        self,
        store: DocumentStore,
        user: Usuario,
        identity: IdentityProvider | None = None,
        settings: Settings | None = None,
    ):
        self._repo = EquipeRepository(store, user.office_id)
        self._identity = identity
        self._settings = settings
        self._user = user

    async def listar(self) -> list[Usuario]:
        authorize(self._user, Action.TEAM_READ)
        membros = await self._repo.get_all()
        return sorted(membros, key=lambda u: u.full_name.lower())

    async def convidar(self, dados: ConviteRequest) -> ConviteResponse:
        """
        Convida advogado ou secretária para o escritório.

        A senha temporária é devolvida só na resposta; não vai para o banco
        nem para os logs. Se o cadastro no banco falhar, o usuário criado no
        provedor de identidade é removido.
        """
        authorize(self._user, Action.TEAM_INVITE)

        if await self._identity.email_exists(dados.email):
            raise EmailAlreadyInUseError(dados.email)

        length = self._settings.TEMP_PASSWORD_LENGTH if self._settings else 12
        temporary_password = generate_temporary_password(length)

        uid = await self._identity.create_user(
            email=dados.email,
            password=temporary_password,
            display_name=dados.full_name,
            email_verified=False,
        )

        data = {
            "uid": uid,
            "fullName": dados.full_name,
            "email": dados.email,
            "role": dados.role,
            "office": self._user.office,
        }
        if dados.role == UserRole.LAWYER:
            data["oab"] = OAB_PENDENTE
            data["legalSpecialty"] = ESPECIALIDADE_A_DEFINIR

        try:
            membro = await self._repo.create(data, id=uid)
        except DocumentStoreError:
            logger.error("Falha ao gravar membro convidado; removendo usuário", uid=uid)
            try:
                await self._identity.delete_user(uid)
            except IdentityProviderError:
                logger.error("Compensação falhou: usuário órfão no provedor", uid=uid)
            raise

        logger.info(
            "Membro convidado",
            uid=uid,
            role=dados.role,
            office_id=self._user.office_id,
            invited_by=self._user.id,
        )
        return ConviteResponse(user=membro, temporary_password=temporary_password)


async def listar_equipe_publica(store: DocumentStore) -> list[MembroPublico]:
    """
    Advogados exibidos na página pública (primeiro escritório cadastrado).

    O administrador vem primeiro; secretárias não aparecem. Só campos de
    apresentação saem daqui, nunca e-mail ou escritório.
    """
    escritorio = await EscritorioRepository(store).get_first()
    if escritorio is None:
        return []

    membros = await EquipeRepository(store, escritorio.id).find(
        [Filter("role", "in", [UserRole.MASTER.value, UserRole.LAWYER.value])]
    )
    membros.sort(key=lambda u: (u.role != UserRole.MASTER, u.full_name.lower()))
    return [MembroPublico.model_validate(m, from_attributes=True) for m in membros]
