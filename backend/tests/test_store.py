"""
Testes do banco de documentos: backend em memória e tradução das escritas
para o cliente do Firestore.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.api_core.exceptions import NotFound, ServiceUnavailable
from google.cloud import firestore

from gestao_juridica.db.store import (
    DELETE_FIELD,
    SERVER_TIMESTAMP,
    ArrayRemove,
    ArrayUnion,
    BatchWrite,
    Filter,
    FirestoreDocumentStore,
    MemoryDocumentStore,
    Snapshot,
)
from gestao_juridica.core.exceptions import DocumentStoreError, ResourceNotFoundError


@pytest.mark.asyncio
async def test_array_union_ignores_existing_values():
    store = MemoryDocumentStore()
    movimento = {"date": "2025-01-10", "description": "Juntada de petição", "details": ""}
    await store.set("processes", "p1", {"movements": [], "collaboratorIds": ["a"]})

    await store.update("processes", "p1", {"movements": ArrayUnion([movimento])})
    await store.update("processes", "p1", {"movements": ArrayUnion([dict(movimento)])})
    await store.array_union("processes", "p1", "collaboratorIds", ["a", "b"])

    snapshot = await store.get("processes", "p1")
    assert snapshot.data["movements"] == [movimento]
    assert snapshot.data["collaboratorIds"] == ["a", "b"]


@pytest.mark.asyncio
async def test_array_remove_removes_all_occurrences():
    store = MemoryDocumentStore()
    await store.set("processes", "p1", {"collaboratorIds": ["a", "b", "a"]})

    await store.update("processes", "p1", {"collaboratorIds": ArrayRemove(["a"])})

    snapshot = await store.get("processes", "p1")
    assert snapshot.data["collaboratorIds"] == ["b"]


@pytest.mark.asyncio
async def test_server_timestamp_and_delete_field():
    store = MemoryDocumentStore()
    await store.set("clients", "c1", {"fullName": "João", "phone": "119999", "createdAt": SERVER_TIMESTAMP})

    await store.update("clients", "c1", {"phone": DELETE_FIELD})

    data = (await store.get("clients", "c1")).data
    assert "phone" not in data
    assert data["createdAt"].tzinfo is not None


@pytest.mark.asyncio
async def test_update_missing_document_raises():
    store = MemoryDocumentStore()
    with pytest.raises(ResourceNotFoundError):
        await store.update("clients", "nope", {"fullName": "X"})


@pytest.mark.asyncio
async def test_merge_keeps_nested_fields():
    store = MemoryDocumentStore()
    await store.set("offices", "o1", {"name": "A", "seo": {"title": "T", "keywords": ["x"]}})

    await store.set("offices", "o1", {"seo": {"title": "Novo"}}, merge=True)

    data = (await store.get("offices", "o1")).data
    assert data == {"name": "A", "seo": {"title": "Novo", "keywords": ["x"]}}


@pytest.mark.asyncio
async def test_query_filters_order_and_limit():
    store = MemoryDocumentStore()
    await store.set("events", "e1", {"officeId": "a", "date": 3, "tags": ["x"]})
    await store.set("events", "e2", {"officeId": "a", "date": 1, "tags": ["y"]})
    await store.set("events", "e3", {"officeId": "b", "date": 2, "tags": ["x"]})

    result = await store.query("events", [Filter("officeId", "==", "a")], order_by="date")
    assert [s.id for s in result] == ["e2", "e1"]

    result = await store.query("events", [Filter("tags", "array-contains", "x")], order_by="date", descending=True, limit=1)
    assert [s.id for s in result] == ["e1"]

    result = await store.query("events", [Filter("officeId", "in", ["b"])])
    assert [s.id for s in result] == ["e3"]


@pytest.mark.asyncio
async def test_reads_are_isolated_copies():
    store = MemoryDocumentStore()
    await store.set("clients", "c1", {"tags": ["a"]})

    snapshot = await store.get("clients", "c1")
    snapshot.data["tags"].append("b")

    assert (await store.get("clients", "c1")).data["tags"] == ["a"]


@pytest.mark.asyncio
async def test_commit_batch_writes_all_documents():
    store = MemoryDocumentStore()
    await store.commit_batch([
        BatchWrite("users", "u1", {"role": "master"}),
        BatchWrite("offices", "o1", {"ownerId": "u1"}),
    ])

    assert (await store.get("users", "u1")).data == {"role": "master"}
    assert (await store.get("offices", "o1")).data == {"ownerId": "u1"}


@pytest.mark.asyncio
async def test_subscription_receives_current_state_and_changes():
    store = MemoryDocumentStore()
    await store.set("clients", "c1", {"officeId": "a"})
    received: list[list[str]] = []

    subscription = store.subscribe(
        "clients",
        [Filter("officeId", "==", "a")],
        lambda snapshots: received.append(sorted(s.id for s in snapshots)),
    )
    await store.set("clients", "c2", {"officeId": "a"})
    await store.set("clients", "c3", {"officeId": "b"})

    assert received[0] == ["c1"]
    assert received[1] == ["c1", "c2"]
    assert store.subscription_count == 1

    subscription.unsubscribe()
    subscription.unsubscribe()
    await store.set("clients", "c4", {"officeId": "a"})

    assert store.subscription_count == 0
    assert not subscription.active
    assert len(received) == 3


# === Backend Firestore ===


@pytest.fixture
def firestore_clients() -> tuple[MagicMock, MagicMock]:
    async_client = MagicMock()
    document = async_client.collection.return_value.document.return_value
    document.update = AsyncMock()
    document.set = AsyncMock()
    return async_client, MagicMock()


def test_translate_converts_write_sentinels():
    data = FirestoreDocumentStore._translate(
        {
            "updatedAt": SERVER_TIMESTAMP,
            "oab": DELETE_FIELD,
            "collaboratorIds": ArrayUnion(["a", "b"]),
            "tags": ArrayRemove(["antigo"]),
            "seo": {"title": "Escritório", "updatedAt": SERVER_TIMESTAMP},
            "fullName": "Ana Souza",
        }
    )

    assert data["updatedAt"] is firestore.SERVER_TIMESTAMP
    assert data["oab"] is firestore.DELETE_FIELD
    assert isinstance(data["collaboratorIds"], firestore.ArrayUnion)
    assert list(data["collaboratorIds"].values) == ["a", "b"]
    assert isinstance(data["tags"], firestore.ArrayRemove)
    assert list(data["tags"].values) == ["antigo"]
    assert data["seo"] == {"title": "Escritório", "updatedAt": firestore.SERVER_TIMESTAMP}
    assert data["fullName"] == "Ana Souza"


@pytest.mark.asyncio
async def test_firestore_update_sends_translated_data(firestore_clients):
    async_client, sync_client = firestore_clients
    store = FirestoreDocumentStore(async_client, sync_client)

    await store.update("processes", "p1", {"collaboratorIds": ArrayUnion(["a"]), "updatedAt": SERVER_TIMESTAMP})

    async_client.collection.assert_called_with("processes")
    async_client.collection.return_value.document.assert_called_with("p1")
    sent = async_client.collection.return_value.document.return_value.update.await_args.args[0]
    assert isinstance(sent["collaboratorIds"], firestore.ArrayUnion)
    assert sent["updatedAt"] is firestore.SERVER_TIMESTAMP


@pytest.mark.asyncio
async def test_firestore_update_of_missing_document(firestore_clients):
    async_client, sync_client = firestore_clients
    async_client.collection.return_value.document.return_value.update.side_effect = NotFound("sem documento")
    store = FirestoreDocumentStore(async_client, sync_client)

    with pytest.raises(ResourceNotFoundError):
        await store.update("processes", "p1", {"status": "closed"})


@pytest.mark.asyncio
async def test_firestore_unavailable(firestore_clients):
    async_client, sync_client = firestore_clients
    async_client.collection.return_value.document.return_value.set.side_effect = ServiceUnavailable("fora do ar")
    store = FirestoreDocumentStore(async_client, sync_client)

    with pytest.raises(DocumentStoreError):
        await store.set("offices", "office_a", {"name": "Escritório A"})


def test_firestore_subscription(firestore_clients):
    async_client, sync_client = firestore_clients
    query = sync_client.collection.return_value.where.return_value
    watch = query.on_snapshot.return_value
    store = FirestoreDocumentStore(async_client, sync_client)
    recebidos: list[list[Snapshot]] = []

    subscription = store.subscribe("clients", [Filter("officeId", "==", "office_a")], recebidos.append)

    sync_client.collection.assert_called_once_with("clients")
    async_client.collection.assert_not_called()
    on_snapshot = query.on_snapshot.call_args.args[0]

    doc = MagicMock(id="c1")
    doc.to_dict.return_value = {"fullName": "Maria", "officeId": "office_a"}
    vazio = MagicMock(id="c2")
    vazio.to_dict.return_value = None
    on_snapshot([doc, vazio], [], None)

    assert recebidos == [[Snapshot("c1", {"fullName": "Maria", "officeId": "office_a"}), Snapshot("c2", {})]]

    subscription.unsubscribe()
    subscription.unsubscribe()
    watch.unsubscribe.assert_called_once_with()
    assert not subscription.active
