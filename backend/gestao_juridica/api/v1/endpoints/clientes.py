"""
Endpoints de Clientes.

Rotas para gerenciamento de clientes do escritório.
"""

from fastapi import APIRouter, Query, status

from gestao_juridica.core.dependencies import CurrentUser, Store
from gestao_juridica.models.cliente import Cliente
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.schemas.cliente import ClienteCreate, ClienteDetalhes, ClienteUpdate
from gestao_juridica.services.cliente_service import ClienteService

router = APIRouter(prefix="/clientes", tags=["Clientes"])


@router.post(
    "",
    response_model=APIResponse[Cliente],
    status_code=status.HTTP_201_CREATED,
)
async def criar_cliente(
    dados: ClienteCreate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Cliente]:
    """Cria novo cliente."""
    service = ClienteService(store, current_user)
    cliente = await service.criar(dados)
    return APIResponse(success=True, data=cliente, message="Cliente criado com sucesso")


@router.get("", response_model=APIResponse[list[Cliente]])
async def listar_clientes(
    current_user: CurrentUser,
    store: Store,
    q: str | None = Query(None, min_length=2, description="Termo de busca"),
) -> APIResponse[list[Cliente]]:
    """Lista clientes do escritório (ou pesquisa por nome, documento ou e-mail)."""
    service = ClienteService(store, current_user)
    return APIResponse(success=True, data=await service.listar(q))


@router.get("/{cliente_id}", response_model=APIResponse[Cliente])
async def obter_cliente(
    cliente_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Cliente]:
    service = ClienteService(store, current_user)
    return APIResponse(success=True, data=await service.buscar_por_id(cliente_id))


@router.get("/{cliente_id}/detalhes", response_model=APIResponse[ClienteDetalhes])
async def detalhes_cliente(
    cliente_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[ClienteDetalhes]:
    """Cliente com processos, lançamentos e compromissos vinculados."""
    service = ClienteService(store, current_user)
    return APIResponse(success=True, data=await service.detalhes(cliente_id))


@router.put("/{cliente_id}", response_model=APIResponse[Cliente])
async def atualizar_cliente(
    cliente_id: str,
    dados: ClienteUpdate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Cliente]:
    """Atualiza dados de um cliente."""
    service = ClienteService(store, current_user)
    cliente = await service.atualizar(cliente_id, dados)
    return APIResponse(success=True, data=cliente, message="Cliente atualizado")


@router.delete("/{cliente_id}", response_model=APIResponse)
async def remover_cliente(
    cliente_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse:
    await ClienteService(store, current_user).remover(cliente_id)
    return APIResponse(success=True, message="Cliente removido")
