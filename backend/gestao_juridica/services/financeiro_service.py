"""
Service do Financeiro (controle interno de lançamentos) e recibos.
"""

import structlog

from gestao_juridica.core.exceptions import BusinessRuleError, ResourceNotFoundError
from gestao_juridica.core.permissions import Action, authorize
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.financeiro import LancamentoFinanceiro, StatusLancamento
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.repositories.cliente_repository import ClienteRepository
from gestao_juridica.repositories.escritorio_repository import EscritorioRepository
from gestao_juridica.repositories.financeiro_repository import FinanceiroRepository
from gestao_juridica.repositories.processo_repository import ProcessoRepository
from gestao_juridica.repositories.usuario_repository import UsuarioRepository
from gestao_juridica.schemas.financeiro import (
    ContatoResponsavel,
    LancamentoCreate,
    LancamentoStatusUpdate,
    ReciboResponse,
)

logger = structlog.get_logger()


class FinanceiroService:
    """
    Service para lançamentos financeiros.

    Pagamento registra a data; voltar para pendente remove a data.
    """

    def __init__(self, store: DocumentStore, user: Usuario):
        self._store = store
        self._user = user
        self._repo = FinanceiroRepository(store, user.office_id)

    async def _carregar(self, lancamento_id: str, action: Action) -> LancamentoFinanceiro:
        lancamento = await self._repo.get_by_id(lancamento_id)
        if lancamento is None:
            raise ResourceNotFoundError("Lançamento financeiro", lancamento_id)
        authorize(self._user, action, lancamento, "Lançamento financeiro")
        return lancamento

    async def criar(self, dados: LancamentoCreate) -> LancamentoFinanceiro:
        """
        Cria lançamento.

        Vinculado a processo, herda o número e (se não informado) o cliente.
        """
        authorize(self._user, Action.FINANCIAL_CREATE)
        office_id = self._user.office_id

        data = dados.model_dump(by_alias=True)
        if dados.process_id:
            processo = await ProcessoRepository(self._store, office_id).get_by_id(dados.process_id)
            if processo is None:
                raise ResourceNotFoundError("Processo", dados.process_id)
            data["processNumber"] = processo.process_number
            if not dados.client_id:
                data["clientId"] = processo.client_id

        if data.get("clientId"):
            cliente = await ClienteRepository(self._store, office_id).get_by_id(data["clientId"])
            if cliente is None:
                raise ResourceNotFoundError("Cliente", data["clientId"])

        data["status"] = StatusLancamento.PENDENTE.value
        data["createdBy"] = self._user.id
        lancamento = await self._repo.create(data)
        logger.info("Lançamento criado", lancamento_id=lancamento.id, valor=lancamento.value)
        return lancamento

    async def listar(self, status: StatusLancamento | None = None) -> list[LancamentoFinanceiro]:
        authorize(self._user, Action.FINANCIAL_READ)
        if status:
            return await self._repo.get_by_status(status)
        lancamentos = await self._repo.get_all()
        return sorted(lancamentos, key=lambda t: t.due_date)

    async def atualizar_status(
        self,
        lancamento_id: str,
        dados: LancamentoStatusUpdate,
    ) -> LancamentoFinanceiro:
        await self._carregar(lancamento_id, Action.FINANCIAL_UPDATE_STATUS)
        lancamento = await self._repo.set_status(lancamento_id, StatusLancamento(dados.status))
        logger.info("Status do lançamento alterado", lancamento_id=lancamento_id, status=dados.status)
        return lancamento

    async def remover(self, lancamento_id: str) -> None:
        await self._carregar(lancamento_id, Action.FINANCIAL_DELETE)
        await self._repo.delete(lancamento_id)
        logger.info("Lançamento removido", lancamento_id=lancamento_id)

    async def recibo(self, lancamento_id: str) -> ReciboResponse:
        """
        Dados para o recibo: lançamento, cliente, escritório, contato do
        responsável pelo escritório e, se houver, o processo.
        """
        lancamento = await self._carregar(lancamento_id, Action.FINANCIAL_RECEIPT)
        office_id = self._user.office_id

        if not lancamento.client_id:
            raise BusinessRuleError(
                "Este lançamento não está vinculado a um cliente.",
                rule="RECEIPT_REQUIRES_CLIENT",
            )

        cliente = await ClienteRepository(self._store, office_id).get_by_id(lancamento.client_id)
        if cliente is None:
            raise ResourceNotFoundError("Cliente", lancamento.client_id)

        escritorio = await EscritorioRepository(self._store).get_by_id(office_id)
        if escritorio is None:
            raise ResourceNotFoundError("Escritório", office_id)

        office_name = escritorio.name
        issuer = None
        if escritorio.owner_id:
            dono = await UsuarioRepository(self._store).get_by_id(escritorio.owner_id)
            if dono is not None:
                issuer = ContatoResponsavel(full_name=dono.full_name, email=dono.email, oab=dono.oab)
                office_name = dono.office or escritorio.name

        processo = None
        if lancamento.process_id:
            processo = await ProcessoRepository(self._store, office_id).get_by_id(lancamento.process_id)

        return ReciboResponse(
            task=lancamento,
            client=cliente,
            office_name=office_name,
            issuer=issuer,
            process=processo,
        )
