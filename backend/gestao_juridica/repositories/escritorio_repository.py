"""
Repository do Escritório.
"""

from gestao_juridica.db.collections import COLLECTION_OFFICES
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.escritorio import Escritorio
from gestao_juridica.repositories.base import BaseRepository


class EscritorioRepository(BaseRepository[Escritorio]):
    """Repository para operações com Escritório."""

    def __init__(self, store: DocumentStore):
        super().__init__(Escritorio, COLLECTION_OFFICES, store)

    async def get_first(self) -> Escritorio | None:
        """Primeiro escritório cadastrado (instalação de escritório único)."""
        result = await self.find(limit=1)
        return result[0] if result else None

    async def merge(self, id: str, data: dict) -> Escritorio:
        """Grava campos com merge, criando o documento se necessário."""
        await self.store.set(self.collection, id, data, merge=True)
        return await self._reload(id)
