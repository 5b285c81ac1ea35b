"""
Repository do Cliente.
"""

from gestao_juridica.db.collections import COLLECTION_CLIENTS
from gestao_juridica.db.store import DocumentStore, Filter
from gestao_juridica.models.cliente import Cliente
from gestao_juridica.repositories.base import MultiTenantRepository


class ClienteRepository(MultiTenantRepository[Cliente]):
    """Repository para operações com Cliente."""

    def __init__(self, store: DocumentStore, office_id: str):
        super().__init__(Cliente, COLLECTION_CLIENTS, store, office_id)

    async def get_by_document(self, document: str) -> Cliente | None:
        """Busca cliente por CPF/CNPJ no tenant."""
        result = await self.find([Filter("document", "==", document)], limit=1)
        return result[0] if result else None

    async def search(self, query: str, limit: int = 20) -> list[Cliente]:
        """Busca clientes por nome, documento ou email (filtragem local)."""
        term = query.lower()
        clientes = await self.get_all()
        found = [
            c for c in clientes
            if term in c.full_name.lower()
            or term in (c.document or "").lower()
            or term in (c.email or "").lower()
        ]
        return sorted(found, key=lambda c: c.full_name)[:limit]
