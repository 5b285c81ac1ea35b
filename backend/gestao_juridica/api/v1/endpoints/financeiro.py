"""
Endpoints do Financeiro.

Rotas para lançamentos do controle interno e recibos.
"""

from fastapi import APIRouter, Query, status

from gestao_juridica.core.dependencies import CurrentUser, Store
from gestao_juridica.models.financeiro import LancamentoFinanceiro, StatusLancamento
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.schemas.financeiro import (
    LancamentoCreate,
    LancamentoStatusUpdate,
    ReciboResponse,
)
from gestao_juridica.services.financeiro_service import FinanceiroService

router = APIRouter(prefix="/financeiro", tags=["Financeiro"])


@router.post(
    "",
    response_model=APIResponse[LancamentoFinanceiro],
    status_code=status.HTTP_201_CREATED,
)
async def criar_lancamento(
    dados: LancamentoCreate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[LancamentoFinanceiro]:
    lancamento = await FinanceiroService(store, current_user).criar(dados)
    return APIResponse(success=True, data=lancamento, message="Lançamento criado")


@router.get("", response_model=APIResponse[list[LancamentoFinanceiro]])
async def listar_lancamentos(
    current_user: CurrentUser,
    store: Store,
    status_lancamento: StatusLancamento | None = Query(None, alias="status"),
) -> APIResponse[list[LancamentoFinanceiro]]:
    lancamentos = await FinanceiroService(store, current_user).listar(status_lancamento)
    return APIResponse(success=True, data=lancamentos)


@router.patch("/{lancamento_id}/status", response_model=APIResponse[LancamentoFinanceiro])
async def atualizar_status_lancamento(
    lancamento_id: str,
    dados: LancamentoStatusUpdate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[LancamentoFinanceiro]:
    """Marca como pago ou volta para pendente."""
    lancamento = await FinanceiroService(store, current_user).atualizar_status(lancamento_id, dados)
    return APIResponse(success=True, data=lancamento, message="Status atualizado")


@router.delete("/{lancamento_id}", response_model=APIResponse)
async def remover_lancamento(
    lancamento_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse:
    await FinanceiroService(store, current_user).remover(lancamento_id)
    return APIResponse(success=True, message="Lançamento removido")


@router.get("/{lancamento_id}/recibo", response_model=APIResponse[ReciboResponse])
async def recibo(
    lancamento_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[ReciboResponse]:
    """Dados para emissão do recibo."""
    dados = await FinanceiroService(store, current_user).recibo(lancamento_id)
    return APIResponse(success=True, data=dados)
