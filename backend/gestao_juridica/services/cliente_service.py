"""
Service do Cliente.
"""

import structlog

from gestao_juridica.core.exceptions import ResourceAlreadyExistsError, ResourceNotFoundError
from gestao_juridica.core.permissions import Action, authorize, can, process_read_filters
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.cliente import Cliente
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.repositories.cliente_repository import ClienteRepository
from gestao_juridica.repositories.evento_repository import EventoRepository
from gestao_juridica.repositories.financeiro_repository import FinanceiroRepository
from gestao_juridica.repositories.processo_repository import ProcessoRepository
from gestao_juridica.schemas.cliente import ClienteCreate, ClienteDetalhes, ClienteUpdate

logger = structlog.get_logger()


class ClienteService:
    """
    Service para operações com Cliente.

    Encapsula lógica de negócio e coordena repositories.
    """

    def __init__(self, store: DocumentStore, user: Usuario):
        self._repo = ClienteRepository(store, user.office_id)
        self._store = store
        self._user = user

    async def _get(self, cliente_id: str) -> Cliente:
        cliente = await self._repo.get_by_id(cliente_id)
        if cliente is None:
            raise ResourceNotFoundError("Cliente", cliente_id)
        return cliente

    async def criar(self, dados: ClienteCreate) -> Cliente:
        """
        Cria novo cliente.

        Valida CPF/CNPJ único no escritório.
        """
        authorize(self._user, Action.CLIENT_CREATE)

        existente = await self._repo.get_by_document(dados.document)
        if existente:
            raise ResourceAlreadyExistsError("Cliente", "document", dados.document)

        data = dados.model_dump(by_alias=True)
        data["createdBy"] = self._user.id
        cliente = await self._repo.create(data)
        logger.info("Cliente criado", cliente_id=cliente.id, office_id=self._user.office_id)
        return cliente

    async def buscar_por_id(self, cliente_id: str) -> Cliente:
        authorize(self._user, Action.CLIENT_READ)
        return await self._get(cliente_id)

    async def listar(self, q: str | None = None) -> list[Cliente]:
        """Lista clientes do escritório (ou pesquisa por nome, documento ou e-mail)."""
        authorize(self._user, Action.CLIENT_READ)
        if q:
            return await self._repo.search(q)
        clientes = await self._repo.get_all()
        return sorted(clientes, key=lambda c: c.full_name.lower())

    async def atualizar(self, cliente_id: str, dados: ClienteUpdate) -> Cliente:
        authorize(self._user, Action.CLIENT_UPDATE)
        cliente = await self._get(cliente_id)

        changes = dados.changes()
        novo_documento = changes.get("document")
        if novo_documento and novo_documento != cliente.document:
            existente = await self._repo.get_by_document(novo_documento)
            if existente and existente.id != cliente_id:
                raise ResourceAlreadyExistsError("Cliente", "document", novo_documento)

        if not changes:
            return cliente
        return await self._repo.update(cliente_id, changes)

    async def remover(self, cliente_id: str) -> None:
        authorize(self._user, Action.CLIENT_DELETE)
        await self._get(cliente_id)
        await self._repo.delete(cliente_id)
        logger.info("Cliente removido", cliente_id=cliente_id, office_id=self._user.office_id)

    async def detalhes(self, cliente_id: str) -> ClienteDetalhes:
        """
        Cliente com processos, lançamentos e eventos vinculados.

        Processos seguem a mesma visibilidade da listagem; lançamentos só
        aparecem para quem pode ler o financeiro.
        """
        authorize(self._user, Action.CLIENT_READ)
        cliente = await self._get(cliente_id)
        office_id = self._user.office_id

        processos = await ProcessoRepository(self._store, office_id).get_by_cliente(
            cliente_id,
            process_read_filters(self._user, include_office=False),
        )

        lancamentos = []
        if can(self._user, Action.FINANCIAL_READ):
            lancamentos = await FinanceiroRepository(self._store, office_id).get_by_cliente(cliente_id)

        eventos = await EventoRepository(self._store, office_id).get_by_cliente(cliente_id)

        return ClienteDetalhes(
            client=cliente,
            processes=sorted(processos, key=lambda p: p.process_number),
            financial_tasks=sorted(lancamentos, key=lambda t: t.due_date),
            events=sorted(eventos, key=lambda e: e.date),
        )
