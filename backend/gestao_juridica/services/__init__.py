"""
Services Layer.

Camada de lógica de negócio da Gestão Jurídica.
"""

from gestao_juridica.services.agenda_service import AgendaService
from gestao_juridica.services.auth_service import AuthService
from gestao_juridica.services.cliente_service import ClienteService
from gestao_juridica.services.contato_service import ContatoService, registrar_pedido_contato
from gestao_juridica.services.equipe_service import EquipeService, listar_equipe_publica
from gestao_juridica.services.escritorio_service import EscritorioService, obter_seo_publico
from gestao_juridica.services.financeiro_service import FinanceiroService
from gestao_juridica.services.ia_service import IAService
from gestao_juridica.services.modelo_documento_service import ModeloDocumentoService
from gestao_juridica.services.perfil_service import PerfilService
from gestao_juridica.services.processo_service import ProcessoService
from gestao_juridica.services.realtime_service import RealtimeService

__all__ = [
    "AgendaService",
    "AuthService",
    "ClienteService",
    "ContatoService",
    "EquipeService",
    "EscritorioService",
    "FinanceiroService",
    "IAService",
    "ModeloDocumentoService",
    "PerfilService",
    "ProcessoService",
    "RealtimeService",
    "listar_equipe_publica",
    "obter_seo_publico",
    "registrar_pedido_contato",
]
