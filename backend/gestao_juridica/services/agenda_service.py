"""
Service da Agenda (audiências, prazos e reuniões).
"""

from datetime import datetime

import structlog

from gestao_juridica.core.exceptions import BusinessRuleError, ResourceNotFoundError
from gestao_juridica.core.permissions import Action, authorize
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.evento import Evento, StatusEvento
from gestao_juridica.models.usuario import UserRole, Usuario
from gestao_juridica.repositories.cliente_repository import ClienteRepository
from gestao_juridica.repositories.evento_repository import EventoRepository
from gestao_juridica.repositories.processo_repository import ProcessoRepository
from gestao_juridica.repositories.usuario_repository import EquipeRepository
from gestao_juridica.schemas.agenda import EventoCreate, EventoStatusUpdate
from gestao_juridica.schemas.base import as_utc

logger = structlog.get_logger()


class AgendaService:
    """Compromissos do escritório."""

    def __init__(self, store: DocumentStore, user: Usuario):
        self._store = store
        self._user = user
        self._repo = EventoRepository(store, user.office_id)

    async def _carregar(self, evento_id: str, action: Action) -> Evento:
        evento = await self._repo.get_by_id(evento_id)
        if evento is None:
            raise ResourceNotFoundError("Evento", evento_id)
        authorize(self._user, action, evento, "Evento")
        return evento

    async def criar(self, dados: EventoCreate) -> Evento:
        """
        Cria compromisso.

        O responsável (`lawyerId`) é o usuário logado ou outro advogado ou
        administrador do mesmo escritório.
        """
        authorize(self._user, Action.EVENT_CREATE)
        office_id = self._user.office_id

        if dados.process_id:
            processo = await ProcessoRepository(self._store, office_id).get_by_id(dados.process_id)
            if processo is None:
                raise ResourceNotFoundError("Processo", dados.process_id)
        if dados.client_id:
            cliente = await ClienteRepository(self._store, office_id).get_by_id(dados.client_id)
            if cliente is None:
                raise ResourceNotFoundError("Cliente", dados.client_id)

        responsavel_id = dados.lawyer_id or self._user.id
        if responsavel_id != self._user.id:
            responsavel = await EquipeRepository(self._store, office_id).get_by_id(responsavel_id)
            if responsavel is None:
                raise ResourceNotFoundError("Usuário", responsavel_id)
            if responsavel.role == UserRole.SECRETARY:
                raise BusinessRuleError("O responsável pelo evento deve ser advogado ou administrador.")

        data = dados.model_dump(by_alias=True)
        data["lawyerId"] = responsavel_id
        data["status"] = StatusEvento.AGENDADO.value
        evento = await self._repo.create(data)
        logger.info("Evento criado", evento_id=evento.id, tipo=evento.type.value)
        return evento

    async def listar(
        self,
        inicio: datetime | None = None,
        fim: datetime | None = None,
    ) -> list[Evento]:
        authorize(self._user, Action.EVENT_READ)
        return await self._repo.get_periodo(as_utc(inicio), as_utc(fim))

    async def atualizar_status(self, evento_id: str, dados: EventoStatusUpdate) -> Evento:
        """Confirma, conclui ou cancela o compromisso."""
        await self._carregar(evento_id, Action.EVENT_UPDATE_STATUS)
        evento = await self._repo.update(evento_id, {"status": dados.status})
        logger.info("Status do evento alterado", evento_id=evento_id, status=dados.status)
        return evento

    async def remover(self, evento_id: str) -> None:
        await self._carregar(evento_id, Action.EVENT_DELETE)
        await self._repo.delete(evento_id)
        logger.info("Evento removido", evento_id=evento_id)
