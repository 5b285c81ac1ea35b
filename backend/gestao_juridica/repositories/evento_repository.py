"""
Repository de Eventos da agenda.
"""

from datetime import datetime

from gestao_juridica.db.collections import COLLECTION_EVENTS
from gestao_juridica.db.store import DocumentStore, Filter
from gestao_juridica.models.evento import Evento
from gestao_juridica.repositories.base import MultiTenantRepository


class EventoRepository(MultiTenantRepository[Evento]):
    """Repository para operações com Evento."""

    def __init__(self, store: DocumentStore, office_id: str):
        super().__init__(Evento, COLLECTION_EVENTS, store, office_id)

    async def get_periodo(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Evento]:
        """Eventos do escritório no período, em ordem cronológica."""
        filters = []
        if start:
            filters.append(Filter("date", ">=", start))
        if end:
            filters.append(Filter("date", "<=", end))
        return await self.find(filters, order_by="date")

    async def get_by_cliente(self, client_id: str) -> list[Evento]:
        return await self.find([Filter("clientId", "==", client_id)])
