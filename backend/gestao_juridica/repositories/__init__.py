"""Repositories de acesso ao banco de documentos."""

from gestao_juridica.repositories.base import BaseRepository, MultiTenantRepository
from gestao_juridica.repositories.cliente_repository import ClienteRepository
from gestao_juridica.repositories.contato_repository import ContatoRepository
from gestao_juridica.repositories.escritorio_repository import EscritorioRepository
from gestao_juridica.repositories.evento_repository import EventoRepository
from gestao_juridica.repositories.financeiro_repository import FinanceiroRepository
from gestao_juridica.repositories.modelo_documento_repository import ModeloDocumentoRepository
from gestao_juridica.repositories.processo_repository import (
    DocumentoProcessoRepository,
    MensagemChatRepository,
    ProcessoRepository,
)
from gestao_juridica.repositories.usuario_repository import EquipeRepository, UsuarioRepository

__all__ = [
    "BaseRepository",
    "ClienteRepository",
    "ContatoRepository",
    "DocumentoProcessoRepository",
    "EquipeRepository",
    "EscritorioRepository",
    "EventoRepository",
    "FinanceiroRepository",
    "MensagemChatRepository",
    "ModeloDocumentoRepository",
    "MultiTenantRepository",
    "ProcessoRepository",
    "UsuarioRepository",
]
