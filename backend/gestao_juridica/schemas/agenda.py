"""
Schemas da Agenda.
"""

from datetime import datetime

from pydantic import Field, field_validator

from gestao_juridica.models.evento import StatusEvento, TipoEvento
from gestao_juridica.schemas.base import BaseSchema, as_utc


class EventoCreate(BaseSchema):
    """Schema para criação de evento."""

    title: str = Field(..., min_length=2, max_length=255)
    date: datetime
    type: TipoEvento
    description: str | None = None
    process_id: str | None = None
    client_id: str | None = None
    lawyer_id: str | None = Field(None, description="Responsável; padrão é o próprio usuário")

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: datetime) -> datetime:
        return as_utc(v)


class EventoStatusUpdate(BaseSchema):
    status: StatusEvento
