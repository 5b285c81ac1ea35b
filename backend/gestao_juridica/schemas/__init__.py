"""Schemas Pydantic para validação de request/response."""

from gestao_juridica.schemas.agenda import EventoCreate, EventoStatusUpdate
from gestao_juridica.schemas.base import APIResponse, BaseSchema, ErrorDetail, ErrorResponse
from gestao_juridica.schemas.cliente import ClienteCreate, ClienteDetalhes, ClienteUpdate
from gestao_juridica.schemas.contato import PedidoContatoCreate, PedidoContatoStatusUpdate
from gestao_juridica.schemas.escritorio import (
    ApiKeyUpdate,
    EscritorioResponse,
    SeoPublicoResponse,
    SeoUpdate,
    TagManagerUpdate,
)
from gestao_juridica.schemas.financeiro import (
    ContatoResponsavel,
    LancamentoCreate,
    LancamentoStatusUpdate,
    ReciboResponse,
)
from gestao_juridica.schemas.ia import (
    AndamentoInput,
    AndamentoOutput,
    PeticaoInput,
    PeticaoOutput,
    ResumoInput,
    ResumoOutput,
    TomResumo,
)
from gestao_juridica.schemas.modelo_documento import ModeloDocumentoCreate, ModeloDocumentoUpdate
from gestao_juridica.schemas.processo import (
    ColaboradorRequest,
    MensagemChatCreate,
    MigracaoStatusResponse,
    MovimentoCreate,
    ProcessoCreate,
    ProcessoUpdate,
)
from gestao_juridica.schemas.usuario import (
    ChangeEmailRequest,
    ChangePasswordRequest,
    ConviteRequest,
    ConviteResponse,
    LoginRequest,
    LoginResponse,
    MembroPublico,
    PasswordResetRequest,
    PerfilUpdate,
    SignupRequest,
)

__all__ = [
    # Base
    "BaseSchema",
    "APIResponse",
    "ErrorDetail",
    "ErrorResponse",
    # Usuário e equipe
    "SignupRequest",
    "LoginRequest",
    "LoginResponse",
    "PasswordResetRequest",
    "ChangePasswordRequest",
    "ChangeEmailRequest",
    "PerfilUpdate",
    "ConviteRequest",
    "ConviteResponse",
    "MembroPublico",
    # Escritório
    "EscritorioResponse",
    "ApiKeyUpdate",
    "SeoUpdate",
    "TagManagerUpdate",
    "SeoPublicoResponse",
    # Cliente
    "ClienteCreate",
    "ClienteUpdate",
    "ClienteDetalhes",
    # Processo
    "ProcessoCreate",
    "ProcessoUpdate",
    "ColaboradorRequest",
    "MovimentoCreate",
    "MensagemChatCreate",
    "MigracaoStatusResponse",
    # Agenda
    "EventoCreate",
    "EventoStatusUpdate",
    # Financeiro
    "LancamentoCreate",
    "LancamentoStatusUpdate",
    "ContatoResponsavel",
    "ReciboResponse",
    # Modelos e contatos
    "ModeloDocumentoCreate",
    "ModeloDocumentoUpdate",
    "PedidoContatoCreate",
    "PedidoContatoStatusUpdate",
    # IA
    "PeticaoInput",
    "PeticaoOutput",
    "AndamentoInput",
    "AndamentoOutput",
    "ResumoInput",
    "ResumoOutput",
    "TomResumo",
]
