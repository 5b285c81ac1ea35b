"""
Endpoints da Equipe.
"""

from fastapi import APIRouter, status

from gestao_juridica.core.dependencies import AppSettings, CurrentUser, Identity, Store
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.schemas.usuario import ConviteRequest, ConviteResponse, MembroPublico
from gestao_juridica.services.equipe_service import EquipeService, listar_equipe_publica

router = APIRouter(prefix="/equipe", tags=["Equipe"])


@router.get("", response_model=APIResponse[list[Usuario]])
async def listar_equipe(current_user: CurrentUser, store: Store) -> APIResponse[list[Usuario]]:
    return APIResponse(success=True, data=await EquipeService(store, current_user).listar())


@router.get("/publico", response_model=APIResponse[list[MembroPublico]])
async def equipe_publica(store: Store) -> APIResponse[list[MembroPublico]]:
    """Advogados do escritório para a página pública."""
    return APIResponse(success=True, data=await listar_equipe_publica(store))


@router.post(
    "/convites",
    response_model=APIResponse[ConviteResponse],
    status_code=status.HTTP_201_CREATED,
)
async def convidar_membro(
    dados: ConviteRequest,
    current_user: CurrentUser,
    store: Store,
    identity: Identity,
    settings: AppSettings,
) -> APIResponse[ConviteResponse]:
    """
    Convida advogado ou secretária.

    A senha temporária aparece somente nesta resposta.
    """
    convite = await EquipeService(store, current_user, identity, settings).convidar(dados)
    return APIResponse(success=True, data=convite, message="Membro convidado com sucesso")
