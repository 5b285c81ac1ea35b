"""
Schemas do Financeiro (controle interno) e recibos.
"""

from datetime import datetime

from pydantic import Field, field_validator

from gestao_juridica.models.cliente import Cliente
from gestao_juridica.models.financeiro import (
    LancamentoFinanceiro,
    StatusLancamento,
    TipoLancamento,
)
from gestao_juridica.models.processo import Processo
from gestao_juridica.schemas.base import BaseSchema, as_utc


class LancamentoCreate(BaseSchema):
    """Schema para criação de lançamento."""

    title: str = Field(..., min_length=2, max_length=255)
    type: TipoLancamento
    due_date: datetime
    value: float = Field(..., ge=0)
    process_id: str | None = None
    client_id: str | None = None

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: datetime) -> datetime:
        return as_utc(v)


class LancamentoStatusUpdate(BaseSchema):
    status: StatusLancamento


class ContatoResponsavel(BaseSchema):
    """Dados de contato de quem emitiu o recibo."""

    full_name: str
    email: str
    oab: str | None = None


class ReciboResponse(BaseSchema):
    """Dados para impressão do recibo de um lançamento."""

    task: LancamentoFinanceiro
    client: Cliente
    office_name: str
    issuer: ContatoResponsavel | None = None
    process: Processo | None = None
