"""
Service de assinaturas em tempo real.

Cada assinatura é uma consulta ao banco de documentos restrita ao escritório
do usuário (e, para processos, à lista de colaboradores). O chamador recebe
um handle `Subscription` e é responsável por encerrá-lo.
"""

from typing import Any

import structlog
from fastapi.encoders import jsonable_encoder

from gestao_juridica.core.exceptions import ResourceNotFoundError
from gestao_juridica.core.permissions import Action, authorize, process_read_filters
from gestao_juridica.db.collections import (
    COLLECTION_CLIENTS,
    COLLECTION_CONTACT_REQUESTS,
    COLLECTION_DOCUMENT_TEMPLATES,
    COLLECTION_EVENTS,
    COLLECTION_FINANCIAL_TASKS,
    COLLECTION_PROCESSES,
    COLLECTION_USERS,
)
from gestao_juridica.db.store import DocumentStore, Filter, Snapshot, SnapshotCallback, Subscription
from gestao_juridica.models.usuario import Usuario

logger = structlog.get_logger()

# Coleções assináveis e a permissão de leitura de cada uma
COLLECTION_ACTIONS: dict[str, Action] = {
    COLLECTION_CLIENTS: Action.CLIENT_READ,
    COLLECTION_PROCESSES: Action.PROCESS_READ,
    COLLECTION_EVENTS: Action.EVENT_READ,
    COLLECTION_FINANCIAL_TASKS: Action.FINANCIAL_READ,
    COLLECTION_DOCUMENT_TEMPLATES: Action.TEMPLATE_READ,
    COLLECTION_CONTACT_REQUESTS: Action.CONTACT_READ,
    COLLECTION_USERS: Action.TEAM_READ,
}


def serialize_snapshots(snapshots: list[Snapshot]) -> list[dict[str, Any]]:
    """Documentos em formato JSON, com o ID incluído."""
    return jsonable_encoder([{**s.data, "id": s.id} for s in snapshots])


class RealtimeService:
    """Assinaturas do usuário logado."""

    def __init__(self, store: DocumentStore, user: Usuario):
        self._store = store
        self._user = user

    def filtros(self, collection: str) -> list[Filter]:
        """Filtros de escopo da coleção para o usuário."""
        action = COLLECTION_ACTIONS.get(collection)
        if action is None:
            raise ResourceNotFoundError("Coleção", collection)

        if collection == COLLECTION_PROCESSES:
            return process_read_filters(self._user)

        authorize(self._user, action)
        return [Filter("officeId", "==", self._user.office_id)]

    def assinar(self, collection: str, callback: SnapshotCallback) -> Subscription:
        """
        Assina a coleção com o escopo do usuário.

        O callback recebe o resultado completo da consulta a cada mudança,
        começando pelo estado atual.
        """
        filters = self.filtros(collection)
        subscription = self._store.subscribe(collection, filters, callback)
        logger.info("Assinatura iniciada", collection=collection, uid=self._user.id)
        return subscription
