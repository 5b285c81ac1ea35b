"""
Modelo de pedido de contato recebido pelo formulário público.
"""

import enum

from gestao_juridica.models.base import TenantDocument


class StatusContato(str, enum.Enum):
    """Situação do pedido de contato."""

    NEW = "new"
    READ = "read"
    ANSWERED = "answered"


class PedidoContato(TenantDocument):
    """Mensagem enviada por visitante da página pública."""

    name: str
    email: str
    phone: str
    message: str
    status: StatusContato = StatusContato.NEW
