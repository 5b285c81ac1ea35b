"""
Modelo de Lançamento financeiro (controle interno).
"""

import enum
from datetime import datetime

from pydantic import Field

from gestao_juridica.models.base import TenantDocument


class TipoLancamento(str, enum.Enum):
    """Natureza do lançamento."""

    HONORARIOS = "honorarios"
    CUSTAS = "custas"
    REEMBOLSO = "reembolso"
    GUIA = "guia"
    OUTRO = "outro"


class StatusLancamento(str, enum.Enum):
    """Situação de pagamento."""

    PENDENTE = "pendente"
    PAGO = "pago"


class LancamentoFinanceiro(TenantDocument):
    """Lançamento a pagar/receber vinculado opcionalmente a processo e cliente."""

    title: str
    type: TipoLancamento
    due_date: datetime
    value: float = Field(..., ge=0)
    status: StatusLancamento = StatusLancamento.PENDENTE
    payment_date: datetime | None = None
    created_by: str | None = None
    process_id: str | None = None
    process_number: str | None = None
    client_id: str | None = None

    @property
    def responsavel_id(self) -> str | None:
        return self.created_by
