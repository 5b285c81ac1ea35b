"""
Endpoints de Pedidos de contato.

O envio é público (formulário da página do escritório); leitura e
atualização exigem login.
"""

from fastapi import APIRouter, Query, status

from gestao_juridica.core.dependencies import CurrentUser, Store
from gestao_juridica.models.contato import PedidoContato, StatusContato
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.schemas.contato import PedidoContatoCreate, PedidoContatoStatusUpdate
from gestao_juridica.services.contato_service import ContatoService, registrar_pedido_contato

router = APIRouter(prefix="/contatos", tags=["Contatos"])


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
async def enviar_contato(dados: PedidoContatoCreate, store: Store) -> APIResponse:
    """Recebe mensagem do formulário público."""
    await registrar_pedido_contato(store, dados)
    return APIResponse(success=True, message="Mensagem enviada. Entraremos em contato em breve.")


@router.get("", response_model=APIResponse[list[PedidoContato]])
async def listar_contatos(
    current_user: CurrentUser,
    store: Store,
    status_contato: StatusContato | None = Query(None, alias="status"),
) -> APIResponse[list[PedidoContato]]:
    pedidos = await ContatoService(store, current_user).listar(status_contato)
    return APIResponse(success=True, data=pedidos)


@router.patch("/{pedido_id}/status", response_model=APIResponse[PedidoContato])
async def atualizar_status_contato(
    pedido_id: str,
    dados: PedidoContatoStatusUpdate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[PedidoContato]:
    pedido = await ContatoService(store, current_user).atualizar_status(pedido_id, dados)
    return APIResponse(success=True, data=pedido)
