"""
Repository de Pedidos de contato.
"""

from gestao_juridica.db.collections import COLLECTION_CONTACT_REQUESTS
from gestao_juridica.db.store import DocumentStore, Filter
from gestao_juridica.models.contato import PedidoContato, StatusContato
from gestao_juridica.repositories.base import MultiTenantRepository


class ContatoRepository(MultiTenantRepository[PedidoContato]):
    """Repository para operações com PedidoContato."""

    def __init__(self, store: DocumentStore, office_id: str):
        super().__init__(PedidoContato, COLLECTION_CONTACT_REQUESTS, store, office_id)

    async def get_recentes(self, status: StatusContato | None = None) -> list[PedidoContato]:
        filters = [Filter("status", "==", status.value)] if status else []
        return await self.find(filters, order_by="createdAt", descending=True)
