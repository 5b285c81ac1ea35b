"""
Endpoints de Modelos de documento.
"""

from fastapi import APIRouter, status

from gestao_juridica.core.dependencies import CurrentUser, Store
from gestao_juridica.models.modelo_documento import ModeloDocumento
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.schemas.modelo_documento import ModeloDocumentoCreate, ModeloDocumentoUpdate
from gestao_juridica.services.modelo_documento_service import ModeloDocumentoService

router = APIRouter(prefix="/modelos", tags=["Modelos de documento"])


@router.post(
    "",
    response_model=APIResponse[ModeloDocumento],
    status_code=status.HTTP_201_CREATED,
)
async def criar_modelo(
    dados: ModeloDocumentoCreate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[ModeloDocumento]:
    modelo = await ModeloDocumentoService(store, current_user).criar(dados)
    return APIResponse(success=True, data=modelo, message="Modelo criado")


@router.get("", response_model=APIResponse[list[ModeloDocumento]])
async def listar_modelos(current_user: CurrentUser, store: Store) -> APIResponse[list[ModeloDocumento]]:
    return APIResponse(success=True, data=await ModeloDocumentoService(store, current_user).listar())


@router.get("/{modelo_id}", response_model=APIResponse[ModeloDocumento])
async def obter_modelo(
    modelo_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[ModeloDocumento]:
    return APIResponse(success=True, data=await ModeloDocumentoService(store, current_user).obter(modelo_id))


@router.put("/{modelo_id}", response_model=APIResponse[ModeloDocumento])
async def atualizar_modelo(
    modelo_id: str,
    dados: ModeloDocumentoUpdate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[ModeloDocumento]:
    modelo = await ModeloDocumentoService(store, current_user).atualizar(modelo_id, dados)
    return APIResponse(success=True, data=modelo, message="Modelo atualizado")


@router.delete("/{modelo_id}", response_model=APIResponse)
async def remover_modelo(
    modelo_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse:
    await ModeloDocumentoService(store, current_user).remover(modelo_id)
    return APIResponse(success=True, message="Modelo removido")
