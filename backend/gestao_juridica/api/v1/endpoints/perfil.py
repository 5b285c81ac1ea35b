"""
Endpoints do Perfil do usuário logado.
"""

from fastapi import APIRouter, File, UploadFile

from gestao_juridica.core.dependencies import CurrentUser, Storage, Store
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.schemas.usuario import PerfilUpdate
from gestao_juridica.services.perfil_service import PerfilService

router = APIRouter(prefix="/perfil", tags=["Perfil"])


@router.patch("", response_model=APIResponse[Usuario])
async def atualizar_perfil(
    dados: PerfilUpdate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Usuario]:
    usuario = await PerfilService(store, current_user).atualizar(dados)
    return APIResponse(success=True, data=usuario, message="Perfil atualizado")


@router.post("/foto", response_model=APIResponse[Usuario])
async def enviar_foto(
    current_user: CurrentUser,
    store: Store,
    storage: Storage,
    file: UploadFile = File(..., description="Imagem (JPEG, PNG ou WebP)"),
) -> APIResponse[Usuario]:
    """Envia nova foto de perfil."""
    content = await file.read()
    usuario = await PerfilService(store, current_user, storage).enviar_foto(
        content,
        file.filename or "foto",
        file.content_type or "application/octet-stream",
    )
    return APIResponse(success=True, data=usuario, message="Foto atualizada")
