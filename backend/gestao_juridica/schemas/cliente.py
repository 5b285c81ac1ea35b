"""
Schemas do Cliente.
"""

from pydantic import EmailStr, Field, field_validator

from gestao_juridica.models.cliente import Cliente
from gestao_juridica.models.evento import Evento
from gestao_juridica.models.financeiro import LancamentoFinanceiro
from gestao_juridica.models.processo import Processo
from gestao_juridica.schemas.base import BaseSchema


def _validate_document(v: str | None) -> str | None:
    """Valida CPF/CNPJ (validação básica de formato)."""
    if v is None:
        return v
    numbers = "".join(filter(str.isdigit, v))
    if len(numbers) not in (11, 14):
        raise ValueError("Documento deve ser um CPF (11 dígitos) ou CNPJ (14 dígitos)")
    return v


class ClienteCreate(BaseSchema):
    """Schema para criação de cliente."""

    full_name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr | None = None
    phone: str | None = None
    document: str = Field(..., description="CPF ou CNPJ")
    address: str | None = None

    @field_validator("document")
    @classmethod
    def validate_document(cls, v: str | None) -> str | None:
        return _validate_document(v)


class ClienteUpdate(BaseSchema):
    """Schema para atualização parcial de cliente."""

    non_nullable = frozenset({"full_name"})

    full_name: str | None = Field(None, min_length=2, max_length=255)
    email: EmailStr | None = None
    phone: str | None = None
    document: str | None = None
    address: str | None = None

    @field_validator("document")
    @classmethod
    def validate_document(cls, v: str | None) -> str | None:
        return _validate_document(v)


class ClienteDetalhes(BaseSchema):
    """Cliente com processos, lançamentos e eventos vinculados."""

    client: Cliente
    processes: list[Processo] = Field(default_factory=list)
    financial_tasks: list[LancamentoFinanceiro] = Field(default_factory=list)
    events: list[Evento] = Field(default_factory=list)
