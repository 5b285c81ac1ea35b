"""
Repositories de Processo e de suas subcoleções.
"""

from typing import Any, Sequence

from gestao_juridica.db.collections import (
    COLLECTION_PROCESSES,
    SUBCOLLECTION_CHAT_MESSAGES,
    SUBCOLLECTION_DOCUMENTS,
    process_subcollection,
)
from gestao_juridica.db.store import (
    SERVER_TIMESTAMP,
    ArrayRemove,
    ArrayUnion,
    DocumentStore,
    Filter,
)
from gestao_juridica.models.processo import (
    LEGACY_STATUS_MAP,
    DocumentoProcesso,
    MensagemChat,
    Movimento,
    Processo,
)
from gestao_juridica.repositories.base import BaseRepository, MultiTenantRepository


class ProcessoRepository(MultiTenantRepository[Processo]):
    """Repository para operações com Processo."""

    def __init__(self, store: DocumentStore, office_id: str):
        super().__init__(Processo, COLLECTION_PROCESSES, store, office_id)

    async def get_by_numero(self, process_number: str) -> Processo | None:
        """Busca processo pelo número no tenant."""
        result = await self.find([Filter("processNumber", "==", process_number)], limit=1)
        return result[0] if result else None

    async def get_by_cliente(self, client_id: str, filters: Sequence[Filter] = ()) -> list[Processo]:
        """Processos de um cliente."""
        return await self.find([*filters, Filter("clientId", "==", client_id)])

    async def append_movement(self, process_id: str, movement: Movimento) -> None:
        """
        Acrescenta andamento com array-union atômico.

        Um andamento idêntico (data, descrição e detalhes) já presente não é
        duplicado.
        """
        await self.store.update(
            self.collection,
            process_id,
            {
                "movements": ArrayUnion([movement.model_dump(by_alias=True)]),
                "updatedAt": SERVER_TIMESTAMP,
            },
        )

    async def add_collaborator(self, process_id: str, user_id: str) -> Processo:
        await self.store.update(
            self.collection,
            process_id,
            {"collaboratorIds": ArrayUnion([user_id]), "updatedAt": SERVER_TIMESTAMP},
        )
        return await self._reload(process_id)

    async def remove_collaborator(self, process_id: str, user_id: str) -> Processo:
        await self.store.update(
            self.collection,
            process_id,
            {"collaboratorIds": ArrayRemove([user_id]), "updatedAt": SERVER_TIMESTAMP},
        )
        return await self._reload(process_id)

    async def get_legacy_status_ids(self) -> list[tuple[str, str]]:
        """IDs e status brutos dos processos ainda com status legado."""
        snapshots = await self.store.query(
            self.collection,
            [
                Filter("officeId", "==", self.office_id),
                Filter("status", "in", list(LEGACY_STATUS_MAP)),
            ],
        )
        return [(s.id, s.data["status"]) for s in snapshots]

    async def set_raw_status(self, process_id: str, status: str) -> None:
        await self.store.update(
            self.collection,
            process_id,
            {"status": status, "updatedAt": SERVER_TIMESTAMP},
        )


class DocumentoProcessoRepository(BaseRepository[DocumentoProcesso]):
    """Arquivos de um processo (subcoleção `documents`)."""

    def __init__(self, store: DocumentStore, process_id: str):
        super().__init__(
            DocumentoProcesso,
            process_subcollection(process_id, SUBCOLLECTION_DOCUMENTS),
            store,
        )

    async def list_recent(self) -> list[DocumentoProcesso]:
        return await self.find(order_by="createdAt", descending=True)


class MensagemChatRepository(BaseRepository[MensagemChat]):
    """Chat interno de um processo (subcoleção `chatMessages`)."""

    def __init__(self, store: DocumentStore, process_id: str):
        super().__init__(
            MensagemChat,
            process_subcollection(process_id, SUBCOLLECTION_CHAT_MESSAGES),
            store,
        )

    async def list_messages(self, limit: int | None = None) -> list[MensagemChat]:
        return await self.find(order_by="createdAt", limit=limit)

    async def post(self, data: dict[str, Any]) -> MensagemChat:
        return await self.create(data)
