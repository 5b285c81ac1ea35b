"""
Schemas de Processo, Andamento, Documentos e Chat.
"""

from datetime import datetime

from pydantic import Field, field_validator

from gestao_juridica.models.processo import Representacao, StatusProcesso
from gestao_juridica.schemas.base import BaseSchema, as_utc


class ProcessoCreate(BaseSchema):
    """Schema para criação de processo."""

    process_number: str = Field(..., min_length=5, max_length=50)
    client_id: str
    court: str = Field(..., min_length=2, max_length=255)
    action_type: str = Field(..., min_length=2, max_length=255)
    plaintiff: str | None = None
    defendant: str | None = None
    representation: Representacao = Representacao.PLAINTIFF
    status: StatusProcesso = StatusProcesso.A_DISTRIBUIR


class ProcessoUpdate(BaseSchema):
    """
    Schema para atualização parcial de processo.

    Dono, colaboradores e andamentos têm operações próprias.
    """

    non_nullable = frozenset({"process_number", "status"})

    process_number: str | None = Field(None, min_length=5, max_length=50)
    court: str | None = None
    action_type: str | None = None
    plaintiff: str | None = None
    defendant: str | None = None
    representation: Representacao | None = None
    status: StatusProcesso | None = None


class ColaboradorRequest(BaseSchema):
    user_id: str = Field(..., min_length=1)


class MovimentoCreate(BaseSchema):
    """Andamento lançado manualmente."""

    date: datetime | None = None
    description: str = Field(..., min_length=2, max_length=500)
    details: str = ""

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class MensagemChatCreate(BaseSchema):
    text: str = Field(..., min_length=1, max_length=4000)


class MigracaoStatusResponse(BaseSchema):
    """Resultado da migração de status legados."""

    migrated: int
    by_status: dict[str, int] = Field(default_factory=dict)
