"""
Service de Pedidos de contato (formulário público da página do escritório).
"""

import structlog

from gestao_juridica.core.exceptions import BusinessRuleError, ResourceNotFoundError
from gestao_juridica.core.permissions import Action, authorize
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.contato import PedidoContato, StatusContato
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.repositories.contato_repository import ContatoRepository
from gestao_juridica.repositories.escritorio_repository import EscritorioRepository
from gestao_juridica.schemas.contato import PedidoContatoCreate, PedidoContatoStatusUpdate

logger = structlog.get_logger()


async def registrar_pedido_contato(store: DocumentStore, dados: PedidoContatoCreate) -> PedidoContato:
    """
    Registra mensagem enviada pela página pública.

    A página pública pertence ao primeiro escritório cadastrado.
    """
    escritorio = await EscritorioRepository(store).get_first()
    if escritorio is None:
        raise BusinessRuleError(
            "Nenhum escritório configurado para receber contatos.",
            rule="OFFICE_REQUIRED",
        )

    data = dados.model_dump(by_alias=True)
    data["status"] = StatusContato.NEW.value
    pedido = await ContatoRepository(store, escritorio.id).create(data)
    logger.info("Pedido de contato recebido", pedido_id=pedido.id, office_id=escritorio.id)
    return pedido


class ContatoService:
    """Caixa de entrada de contatos do escritório."""

    def __init__(self, store: DocumentStore, user: Usuario):
        self._repo = ContatoRepository(store, user.office_id)
        self._user = user

    async def listar(self, status: StatusContato | None = None) -> list[PedidoContato]:
        authorize(self._user, Action.CONTACT_READ)
        return await self._repo.get_recentes(status)

    async def atualizar_status(self, pedido_id: str, dados: PedidoContatoStatusUpdate) -> PedidoContato:
        pedido = await self._repo.get_by_id(pedido_id)
        if pedido is None:
            raise ResourceNotFoundError("Pedido de contato", pedido_id)
        authorize(self._user, Action.CONTACT_UPDATE_STATUS, pedido, "Pedido de contato")
        return await self._repo.update(pedido_id, {"status": dados.status})
