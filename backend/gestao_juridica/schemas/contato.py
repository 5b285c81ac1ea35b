"""
Schemas de Pedidos de contato.
"""

from pydantic import EmailStr, Field

from gestao_juridica.models.contato import StatusContato
from gestao_juridica.schemas.base import BaseSchema


class PedidoContatoCreate(BaseSchema):
    """Formulário de contato da página pública."""

    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    phone: str = Field(..., min_length=8, max_length=30)
    message: str = Field(..., min_length=10, max_length=5000)


class PedidoContatoStatusUpdate(BaseSchema):
    status: StatusContato
