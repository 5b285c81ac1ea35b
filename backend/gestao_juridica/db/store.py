"""
Acesso ao banco de documentos.

Expõe uma API assíncrona pequena sobre coleções e documentos, com dois
backends:

- FirestoreDocumentStore: Cloud Firestore via Firebase Admin SDK.
- MemoryDocumentStore: desenvolvimento local e testes.

Escritas aceitam os sentinelas SERVER_TIMESTAMP, DELETE_FIELD,
ArrayUnion e ArrayRemove, com a mesma semântica do Firestore:
ArrayUnion só acrescenta elementos que ainda não estão no array
(comparação por igualdade do valor inteiro), então acrescentar duas vezes
o mesmo objeto não gera duplicata.
"""

import abc
import copy
import itertools
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Sequence

import structlog
from firebase_admin import firestore as firebase_firestore, firestore_async
from google.api_core.exceptions import GoogleAPICallError, NotFound
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from gestao_juridica.core.exceptions import DocumentStoreError, ResourceNotFoundError

logger = structlog.get_logger()


class _Sentinel:
    """Marcador de valor especial em escritas."""

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name


SERVER_TIMESTAMP = _Sentinel("SERVER_TIMESTAMP")
DELETE_FIELD = _Sentinel("DELETE_FIELD")


@dataclass(frozen=True)
class ArrayUnion:
    """Acrescenta valores a um array, ignorando os já presentes."""

    values: tuple[Any, ...]

    def __init__(self, values: Iterable[Any]):
        object.__setattr__(self, "values", tuple(values))


@dataclass(frozen=True)
class ArrayRemove:
    """Remove todas as ocorrências dos valores de um array."""

    values: tuple[Any, ...]

    def __init__(self, values: Iterable[Any]):
        object.__setattr__(self, "values", tuple(values))


@dataclass(frozen=True)
class Filter:
    """Condição de consulta: campo, operador Firestore e valor."""

    field: str
    op: str
    value: Any


@dataclass
class Snapshot:
    """Documento lido do banco."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)


@dataclass(frozen=True)
class BatchWrite:
    """Escrita (set) executada dentro de um batch atômico."""

    path: str
    doc_id: str
    data: dict[str, Any]
    merge: bool = False


SnapshotCallback = Callable[[list[Snapshot]], None]


class Subscription:
    """
    Handle de uma assinatura em tempo real.

    `unsubscribe()` é idempotente; também pode ser usado como context manager.
    """

    def __init__(self, teardown: Callable[[], None]):
        self._teardown = teardown
        self._active = True
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        with self._lock:
            if not self._active:
                return
            self._active = False
        self._teardown()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unsubscribe()


class DocumentStore(abc.ABC):
    """Interface comum aos backends de banco de documentos."""

    @abc.abstractmethod
    async def get(self, path: str, doc_id: str) -> Snapshot | None:
        """Lê um documento; None se não existir."""

    @abc.abstractmethod
    async def add(self, path: str, data: dict[str, Any]) -> str:
        """Cria documento com ID gerado e retorna o ID."""

    @abc.abstractmethod
    async def set(
        self,
        path: str,
        doc_id: str,
        data: dict[str, Any],
        merge: bool = False,
    ) -> None:
        """Cria ou substitui documento (ou mescla, com merge=True)."""

    @abc.abstractmethod
    async def update(self, path: str, doc_id: str, data: dict[str, Any]) -> None:
        """Atualiza campos de documento existente (ResourceNotFoundError se não existir)."""

    @abc.abstractmethod
    async def delete(self, path: str, doc_id: str) -> None:
        """Remove documento (sem erro se não existir)."""

    @abc.abstractmethod
    async def query(
        self,
        path: str,
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[Snapshot]:
        """Consulta documentos de uma coleção."""

    @abc.abstractmethod
    async def commit_batch(self, writes: Sequence[BatchWrite]) -> None:
        """Aplica várias escritas de forma atômica."""

    @abc.abstractmethod
    def subscribe(
        self,
        path: str,
        filters: Sequence[Filter],
        callback: SnapshotCallback,
    ) -> Subscription:
        """
        Assina uma consulta: callback recebe o resultado completo a cada mudança.

        O primeiro snapshot é entregue logo após a assinatura.
        """

    async def array_union(self, path: str, doc_id: str, field_name: str, values: Iterable[Any]) -> None:
        await self.update(path, doc_id, {field_name: ArrayUnion(values)})

    async def array_remove(self, path: str, doc_id: str, field_name: str, values: Iterable[Any]) -> None:
        await self.update(path, doc_id, {field_name: ArrayRemove(values)})


# === Backend em memória ===


def _matches(data: dict[str, Any], flt: Filter) -> bool:
    """Avalia um filtro com a semântica do Firestore."""
    if flt.field not in data:
        return False
    current = data[flt.field]
    try:
        if flt.op == "==":
            return current == flt.value
        if flt.op == "!=":
            return current != flt.value
        if flt.op == "<":
            return current < flt.value
        if flt.op == "<=":
            return current <= flt.value
        if flt.op == ">":
            return current > flt.value
        if flt.op == ">=":
            return current >= flt.value
        if flt.op == "in":
            return current in flt.value
        if flt.op == "not-in":
            return current not in flt.value
        if flt.op == "array-contains":
            return isinstance(current, list) and flt.value in current
        if flt.op == "array-contains-any":
            return isinstance(current, list) and any(v in current for v in flt.value)
    except TypeError:
        # Firestore não compara tipos diferentes
        return False
    raise ValueError(f"Operador de consulta não suportado: {flt.op}")


def _resolve_value(value: Any, current: Any, now: datetime) -> Any:
    if value is SERVER_TIMESTAMP:
        return now
    if isinstance(value, ArrayUnion):
        result = list(current) if isinstance(current, list) else []
        for item in value.values:
            if item not in result:
                result.append(copy.deepcopy(item))
        return result
    if isinstance(value, ArrayRemove):
        if not isinstance(current, list):
            return []
        return [item for item in current if item not in value.values]
    if isinstance(value, dict):
        return {k: _resolve_value(v, None, now) for k, v in value.items() if v is not DELETE_FIELD}
    return copy.deepcopy(value)


def _apply_fields(target: dict[str, Any], data: dict[str, Any], now: datetime, merge_maps: bool) -> None:
    """Aplica campos (com suporte a caminhos pontuados) sobre o documento."""
    for key, value in data.items():
        parts = key.split(".")
        node = target
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        leaf = parts[-1]
        if value is DELETE_FIELD:
            node.pop(leaf, None)
        elif merge_maps and isinstance(value, dict) and isinstance(node.get(leaf), dict):
            _apply_fields(node[leaf], value, now, merge_maps)
        else:
            node[leaf] = _resolve_value(value, node.get(leaf), now)


class MemoryDocumentStore(DocumentStore):
    """
    Banco de documentos em memória.

    Usado em desenvolvimento (DOCUMENT_STORE_BACKEND=memory) e nos testes.
    Cópias profundas isolam os dados armazenados de quem lê e escreve.
    """

    def __init__(self):
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._subscriptions: dict[int, tuple[str, tuple[Filter, ...], SnapshotCallback]] = {}
        self._ids = itertools.count()
        self._lock = threading.RLock()

    def _collection(self, path: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(path, {})

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def _run_query(
        self,
        path: str,
        filters: Sequence[Filter],
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[Snapshot]:
        with self._lock:
            docs = [
                Snapshot(doc_id, copy.deepcopy(data))
                for doc_id, data in self._collection(path).items()
                if all(_matches(data, f) for f in filters)
            ]
        if order_by:
            docs = [d for d in docs if order_by in d.data]
            docs.sort(key=lambda d: d.data[order_by], reverse=descending)
        if limit is not None:
            docs = docs[:limit]
        return docs

    def _notify(self, path: str) -> None:
        with self._lock:
            targets = [
                (filters, callback)
                for sub_path, filters, callback in self._subscriptions.values()
                if sub_path == path
            ]
        for filters, callback in targets:
            callback(self._run_query(path, filters))

    async def get(self, path: str, doc_id: str) -> Snapshot | None:
        with self._lock:
            data = self._collection(path).get(doc_id)
            if data is None:
                return None
            return Snapshot(doc_id, copy.deepcopy(data))

    async def add(self, path: str, data: dict[str, Any]) -> str:
        doc_id = uuid.uuid4().hex[:20]
        await self.set(path, doc_id, data)
        return doc_id

    async def set(
        self,
        path: str,
        doc_id: str,
        data: dict[str, Any],
        merge: bool = False,
    ) -> None:
        with self._lock:
            collection = self._collection(path)
            document = collection.get(doc_id, {}) if merge else {}
            _apply_fields(document, data, self._now(), merge_maps=merge)
            collection[doc_id] = document
        self._notify(path)

    async def update(self, path: str, doc_id: str, data: dict[str, Any]) -> None:
        with self._lock:
            document = self._collection(path).get(doc_id)
            if document is None:
                raise ResourceNotFoundError("Documento", doc_id)
            _apply_fields(document, data, self._now(), merge_maps=False)
        self._notify(path)

    async def delete(self, path: str, doc_id: str) -> None:
        with self._lock:
            removed = self._collection(path).pop(doc_id, None)
            # Firestore não apaga subcoleções junto com o documento pai
        if removed is not None:
            self._notify(path)

    async def query(
        self,
        path: str,
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[Snapshot]:
        return self._run_query(path, filters, order_by, descending, limit)

    async def commit_batch(self, writes: Sequence[BatchWrite]) -> None:
        now = self._now()
        with self._lock:
            staged = copy.deepcopy(self._collections)
            for write in writes:
                collection = staged.setdefault(write.path, {})
                document = collection.get(write.doc_id, {}) if write.merge else {}
                _apply_fields(document, write.data, now, merge_maps=write.merge)
                collection[write.doc_id] = document
            self._collections = staged
        for path in {w.path for w in writes}:
            self._notify(path)

    def subscribe(
        self,
        path: str,
        filters: Sequence[Filter],
        callback: SnapshotCallback,
    ) -> Subscription:
        key = next(self._ids)
        frozen = tuple(filters)
        with self._lock:
            self._subscriptions[key] = (path, frozen, callback)

        def teardown() -> None:
            with self._lock:
                self._subscriptions.pop(key, None)

        subscription = Subscription(teardown)
        callback(self._run_query(path, frozen))
        return subscription

    @property
    def subscription_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)


# === Backend Firestore ===


class FirestoreDocumentStore(DocumentStore):
    """
    Banco de documentos sobre Cloud Firestore.

    Operações usam o cliente assíncrono; assinaturas usam o cliente síncrono,
    único que suporta listeners (on_snapshot), com callbacks em thread própria.
    """

    def __init__(self, async_client: Any, sync_client: Any):
        self._db = async_client
        self._sync_db = sync_client

    @staticmethod
    def _translate(data: dict[str, Any]) -> dict[str, Any]:
        def convert(value: Any) -> Any:
            if value is SERVER_TIMESTAMP:
                return firestore.SERVER_TIMESTAMP
            if value is DELETE_FIELD:
                return firestore.DELETE_FIELD
            if isinstance(value, ArrayUnion):
                return firestore.ArrayUnion(list(value.values))
            if isinstance(value, ArrayRemove):
                return firestore.ArrayRemove(list(value.values))
            if isinstance(value, dict):
                return {k: convert(v) for k, v in value.items()}
            return value

        return {key: convert(value) for key, value in data.items()}

    @staticmethod
    def _apply_filters(query: Any, filters: Sequence[Filter]) -> Any:
        for flt in filters:
            query = query.where(filter=FieldFilter(flt.field, flt.op, flt.value))
        return query

    async def get(self, path: str, doc_id: str) -> Snapshot | None:
        try:
            snap = await self._db.collection(path).document(doc_id).get()
        except GoogleAPICallError as e:
            logger.error("Erro ao ler documento", path=path, doc_id=doc_id, error=str(e))
            raise DocumentStoreError()
        if not snap.exists:
            return None
        return Snapshot(snap.id, snap.to_dict() or {})

    async def add(self, path: str, data: dict[str, Any]) -> str:
        try:
            _, ref = await self._db.collection(path).add(self._translate(data))
        except GoogleAPICallError as e:
            logger.error("Erro ao criar documento", path=path, error=str(e))
            raise DocumentStoreError()
        return ref.id

    async def set(
        self,
        path: str,
        doc_id: str,
        data: dict[str, Any],
        merge: bool = False,
    ) -> None:
        try:
            await self._db.collection(path).document(doc_id).set(
                self._translate(data), merge=merge
            )
        except GoogleAPICallError as e:
            logger.error("Erro ao gravar documento", path=path, doc_id=doc_id, error=str(e))
            raise DocumentStoreError()

    async def update(self, path: str, doc_id: str, data: dict[str, Any]) -> None:
        try:
            await self._db.collection(path).document(doc_id).update(self._translate(data))
        except NotFound:
            raise ResourceNotFoundError("Documento", doc_id)
        except GoogleAPICallError as e:
            logger.error("Erro ao atualizar documento", path=path, doc_id=doc_id, error=str(e))
            raise DocumentStoreError()

    async def delete(self, path: str, doc_id: str) -> None:
        try:
            await self._db.collection(path).document(doc_id).delete()
        except GoogleAPICallError as e:
            logger.error("Erro ao remover documento", path=path, doc_id=doc_id, error=str(e))
            raise DocumentStoreError()

    async def query(
        self,
        path: str,
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[Snapshot]:
        query = self._apply_filters(self._db.collection(path), filters)
        if order_by:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        if limit is not None:
            query = query.limit(limit)
        try:
            return [Snapshot(snap.id, snap.to_dict() or {}) async for snap in query.stream()]
        except GoogleAPICallError as e:
            logger.error("Erro na consulta", path=path, error=str(e))
            raise DocumentStoreError()

    async def commit_batch(self, writes: Sequence[BatchWrite]) -> None:
        batch = self._db.batch()
        for write in writes:
            ref = self._db.collection(write.path).document(write.doc_id)
            batch.set(ref, self._translate(write.data), merge=write.merge)
        try:
            await batch.commit()
        except GoogleAPICallError as e:
            logger.error("Erro ao gravar batch", writes=len(writes), error=str(e))
            raise DocumentStoreError()

    def subscribe(
        self,
        path: str,
        filters: Sequence[Filter],
        callback: SnapshotCallback,
    ) -> Subscription:
        query = self._apply_filters(self._sync_db.collection(path), filters)

        def on_snapshot(docs: list[Any], changes: list[Any], read_time: Any) -> None:
            callback([Snapshot(d.id, d.to_dict() or {}) for d in docs])

        watch = query.on_snapshot(on_snapshot)
        return Subscription(watch.unsubscribe)


def create_document_store(backend: str, firebase_app: Any | None = None) -> DocumentStore:
    """Constrói o backend configurado."""
    if backend == "memory":
        logger.warning("Usando banco de documentos em memória")
        return MemoryDocumentStore()

    return FirestoreDocumentStore(
        async_client=firestore_async.client(firebase_app),
        sync_client=firebase_firestore.client(firebase_app),
    )

