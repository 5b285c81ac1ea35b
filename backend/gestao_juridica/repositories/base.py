"""
Repository base com operações CRUD genéricas sobre o banco de documentos.
"""

from typing import Any, Generic, Sequence, TypeVar

from gestao_juridica.db.store import SERVER_TIMESTAMP, DocumentStore, Filter
from gestao_juridica.models.base import DocumentModel, TenantDocument

ModelType = TypeVar("ModelType", bound=DocumentModel)
TenantModelType = TypeVar("TenantModelType", bound=TenantDocument)


class BaseRepository(Generic[ModelType]):
    """
    Repository base com operações CRUD.

    Uso:
        class EscritorioRepository(BaseRepository[Escritorio]):
            def __init__(self, store: DocumentStore):
                super().__init__(Escritorio, COLLECTION_OFFICES, store)
    """

    def __init__(self, model: type[ModelType], collection: str, store: DocumentStore):
        self.model = model
        self.collection = collection
        self.store = store

    async def get_by_id(self, id: str) -> ModelType | None:
        """Busca documento por ID."""
        if not id:
            return None
        snapshot = await self.store.get(self.collection, id)
        if snapshot is None:
            return None
        return self.model.from_snapshot(snapshot)

    async def find(
        self,
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[ModelType]:
        """Lista documentos que atendem aos filtros."""
        snapshots = await self.store.query(
            self.collection,
            filters,
            order_by=order_by,
            descending=descending,
            limit=limit,
        )
        return [self.model.from_snapshot(s) for s in snapshots]

    async def create(self, data: dict[str, Any], id: str | None = None) -> ModelType:
        """Cria documento (ID gerado, se não informado)."""
        data = {**data, "createdAt": SERVER_TIMESTAMP}
        if id is None:
            id = await self.store.add(self.collection, data)
        else:
            await self.store.set(self.collection, id, data)
        return await self._reload(id)

    async def update(self, id: str, data: dict[str, Any]) -> ModelType:
        """Atualiza campos do documento e devolve a versão gravada."""
        await self.store.update(self.collection, id, {**data, "updatedAt": SERVER_TIMESTAMP})
        return await self._reload(id)

    async def delete(self, id: str) -> None:
        """Remove documento."""
        await self.store.delete(self.collection, id)

    async def _reload(self, id: str) -> ModelType:
        snapshot = await self.store.get(self.collection, id)
        return self.model.from_snapshot(snapshot)


class MultiTenantRepository(BaseRepository[TenantModelType]):
    """
    Repository com suporte a multi-tenancy.

    Todas as consultas são filtradas por officeId, e um documento de outro
    escritório é devolvido como inexistente.
    """

    def __init__(
        self,
        model: type[TenantModelType],
        collection: str,
        store: DocumentStore,
        office_id: str,
    ):
        super().__init__(model, collection, store)
        self.office_id = office_id

    async def get_by_id(self, id: str) -> TenantModelType | None:
        """Busca documento por ID com filtro de tenant."""
        document = await super().get_by_id(id)
        if document is None or document.office_id != self.office_id:
            return None
        return document

    async def find(
        self,
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[TenantModelType]:
        """Lista documentos do tenant."""
        scoped = [Filter("officeId", "==", self.office_id), *filters]
        documents = await super().find(scoped, order_by, descending, limit)
        return [d for d in documents if d.office_id == self.office_id]

    async def get_all(self, limit: int | None = None) -> list[TenantModelType]:
        """Lista todos os documentos do tenant."""
        return await self.find(limit=limit)

    async def create(self, data: dict[str, Any], id: str | None = None) -> TenantModelType:
        """Cria documento vinculado ao tenant."""
        return await super().create({**data, "officeId": self.office_id}, id)

    async def update(self, id: str, data: dict[str, Any]) -> TenantModelType:
        """Atualiza documento; officeId nunca muda."""
        data = {k: v for k, v in data.items() if k != "officeId"}
        return await super().update(id, data)
