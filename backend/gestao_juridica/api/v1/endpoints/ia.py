"""
Endpoints de IA generativa.

Usam a chave de API do Gemini configurada no escritório.
"""

from fastapi import APIRouter

from gestao_juridica.core.dependencies import AIRegistry, CurrentUser, Store
from gestao_juridica.models.processo import Movimento
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.schemas.ia import PeticaoInput, PeticaoOutput, ResumoInput, ResumoOutput
from gestao_juridica.services.ia_service import IAService

router = APIRouter(prefix="/ia", tags=["IA"])


@router.post("/peticao", response_model=APIResponse[PeticaoOutput])
async def gerar_peticao(
    dados: PeticaoInput,
    current_user: CurrentUser,
    store: Store,
    registry: AIRegistry,
) -> APIResponse[PeticaoOutput]:
    """Gera rascunho de petição a partir da tese jurídica."""
    rascunho = await IAService(store, current_user, registry).gerar_peticao(dados)
    return APIResponse(success=True, data=rascunho)


@router.post("/resumo", response_model=APIResponse[ResumoOutput])
async def resumir_peca(
    dados: ResumoInput,
    current_user: CurrentUser,
    store: Store,
    registry: AIRegistry,
) -> APIResponse[ResumoOutput]:
    """Resume uma peça jurídica."""
    resumo = await IAService(store, current_user, registry).resumir(dados)
    return APIResponse(success=True, data=resumo)


@router.post("/processos/{processo_id}/andamento", response_model=APIResponse[Movimento])
async def atualizar_andamento(
    processo_id: str,
    current_user: CurrentUser,
    store: Store,
    registry: AIRegistry,
) -> APIResponse[Movimento]:
    """Busca (simulada) do próximo andamento, gravado no histórico do processo."""
    movimento = await IAService(store, current_user, registry).atualizar_andamento(processo_id)
    return APIResponse(success=True, data=movimento, message="Andamento atualizado")
