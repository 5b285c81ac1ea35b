"""
Modelos de documento da Gestão Jurídica.
"""

from gestao_juridica.models.base import DocumentModel, TenantDocument
from gestao_juridica.models.cliente import Cliente
from gestao_juridica.models.contato import PedidoContato, StatusContato
from gestao_juridica.models.escritorio import Escritorio, SeoMetadata
from gestao_juridica.models.evento import Evento, StatusEvento, TipoEvento
from gestao_juridica.models.financeiro import (
    LancamentoFinanceiro,
    StatusLancamento,
    TipoLancamento,
)
from gestao_juridica.models.modelo_documento import ModeloDocumento
from gestao_juridica.models.processo import (
    DocumentoProcesso,
    MensagemChat,
    Movimento,
    Processo,
    Representacao,
    StatusProcesso,
)
from gestao_juridica.models.usuario import UserRole, Usuario

__all__ = [
    "Cliente",
    "DocumentModel",
    "DocumentoProcesso",
    "Escritorio",
    "Evento",
    "LancamentoFinanceiro",
    "MensagemChat",
    "ModeloDocumento",
    "Movimento",
    "PedidoContato",
    "Processo",
    "Representacao",
    "SeoMetadata",
    "StatusContato",
    "StatusEvento",
    "StatusLancamento",
    "StatusProcesso",
    "TenantDocument",
    "TipoEvento",
    "TipoLancamento",
    "UserRole",
    "Usuario",
]
