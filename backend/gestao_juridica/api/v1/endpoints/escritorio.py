"""
Endpoints do Escritório e configurações.
"""

from fastapi import APIRouter

from gestao_juridica.core.dependencies import AIRegistry, CurrentUser, Store
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.schemas.escritorio import (
    ApiKeyUpdate,
    EscritorioResponse,
    SeoPublicoResponse,
    SeoUpdate,
    TagManagerUpdate,
)
from gestao_juridica.services.escritorio_service import EscritorioService, obter_seo_publico

router = APIRouter(prefix="/escritorio", tags=["Escritório"])


@router.get("", response_model=APIResponse[EscritorioResponse])
async def obter_escritorio(current_user: CurrentUser, store: Store) -> APIResponse[EscritorioResponse]:
    """Dados do escritório (a chave de API vem mascarada)."""
    return APIResponse(success=True, data=await EscritorioService(store, current_user).obter())


@router.get("/publico", response_model=APIResponse[SeoPublicoResponse])
async def seo_publico(store: Store) -> APIResponse[SeoPublicoResponse]:
    """Metadados de SEO para a página pública."""
    return APIResponse(success=True, data=await obter_seo_publico(store))


@router.put("/api-key", response_model=APIResponse[EscritorioResponse])
async def atualizar_api_key(
    dados: ApiKeyUpdate,
    current_user: CurrentUser,
    store: Store,
    registry: AIRegistry,
) -> APIResponse[EscritorioResponse]:
    escritorio = await EscritorioService(store, current_user, registry).atualizar_api_key(dados)
    return APIResponse(success=True, data=escritorio, message="Chave de API salva")


@router.put("/seo", response_model=APIResponse[EscritorioResponse])
async def atualizar_seo(
    dados: SeoUpdate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[EscritorioResponse]:
    escritorio = await EscritorioService(store, current_user).atualizar_seo(dados)
    return APIResponse(success=True, data=escritorio, message="SEO atualizado")


@router.put("/tag-manager", response_model=APIResponse[EscritorioResponse])
async def atualizar_tag_manager(
    dados: TagManagerUpdate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[EscritorioResponse]:
    escritorio = await EscritorioService(store, current_user).atualizar_tag_manager(dados)
    return APIResponse(success=True, data=escritorio, message="Tag Manager atualizado")
