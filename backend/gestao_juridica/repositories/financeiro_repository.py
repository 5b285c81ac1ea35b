"""
Repository de Lançamentos financeiros.
"""

from gestao_juridica.db.collections import COLLECTION_FINANCIAL_TASKS
from gestao_juridica.db.store import SERVER_TIMESTAMP, DELETE_FIELD, DocumentStore, Filter
from gestao_juridica.models.financeiro import LancamentoFinanceiro, StatusLancamento
from gestao_juridica.repositories.base import MultiTenantRepository


class FinanceiroRepository(MultiTenantRepository[LancamentoFinanceiro]):
    """Repository para operações com LancamentoFinanceiro."""

    def __init__(self, store: DocumentStore, office_id: str):
        super().__init__(LancamentoFinanceiro, COLLECTION_FINANCIAL_TASKS, store, office_id)

    async def get_by_cliente(self, client_id: str) -> list[LancamentoFinanceiro]:
        return await self.find([Filter("clientId", "==", client_id)])

    async def get_by_status(self, status: StatusLancamento) -> list[LancamentoFinanceiro]:
        return await self.find([Filter("status", "==", status.value)], order_by="dueDate")

    async def set_status(self, task_id: str, status: StatusLancamento) -> LancamentoFinanceiro:
        """Altera o status; pagamento registra a data, estorno a remove."""
        return await self.update(
            task_id,
            {
                "status": status.value,
                "paymentDate": SERVER_TIMESTAMP if status == StatusLancamento.PAGO else DELETE_FIELD,
            },
        )
