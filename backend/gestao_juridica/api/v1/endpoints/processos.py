"""
Endpoints de Processos.

Rotas para processos, colaboradores, andamentos, documentos e chat interno.
"""

from fastapi import APIRouter, File, Query, UploadFile, status

from gestao_juridica.core.dependencies import CurrentUser, Storage, Store
from gestao_juridica.models.processo import (
    DocumentoProcesso,
    MensagemChat,
    Movimento,
    Processo,
    StatusProcesso,
)
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.schemas.processo import (
    ColaboradorRequest,
    MensagemChatCreate,
    MigracaoStatusResponse,
    MovimentoCreate,
    ProcessoCreate,
    ProcessoUpdate,
)
from gestao_juridica.services.processo_service import ProcessoService

router = APIRouter(prefix="/processos", tags=["Processos"])


@router.post(
    "",
    response_model=APIResponse[Processo],
    status_code=status.HTTP_201_CREATED,
)
async def criar_processo(
    dados: ProcessoCreate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Processo]:
    """Cria processo; o usuário logado é o responsável."""
    processo = await ProcessoService(store, current_user).criar(dados)
    return APIResponse(success=True, data=processo, message="Processo criado com sucesso")


@router.get("", response_model=APIResponse[list[Processo]])
async def listar_processos(
    current_user: CurrentUser,
    store: Store,
    status_processo: StatusProcesso | None = Query(None, alias="status"),
) -> APIResponse[list[Processo]]:
    """Lista processos visíveis ao usuário."""
    filtro = status_processo.value if status_processo else None
    processos = await ProcessoService(store, current_user).listar(filtro)
    return APIResponse(success=True, data=processos)


@router.post("/migrar-status", response_model=APIResponse[MigracaoStatusResponse])
async def migrar_status(
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[MigracaoStatusResponse]:
    """Converte status legados (active, pending, archived) para o enum atual."""
    resultado = await ProcessoService(store, current_user).migrar_status_legados()
    return APIResponse(success=True, data=resultado)


@router.get("/{processo_id}", response_model=APIResponse[Processo])
async def obter_processo(
    processo_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Processo]:
    return APIResponse(success=True, data=await ProcessoService(store, current_user).obter(processo_id))


@router.put("/{processo_id}", response_model=APIResponse[Processo])
async def atualizar_processo(
    processo_id: str,
    dados: ProcessoUpdate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Processo]:
    processo = await ProcessoService(store, current_user).atualizar(processo_id, dados)
    return APIResponse(success=True, data=processo, message="Processo atualizado")


@router.delete("/{processo_id}", response_model=APIResponse)
async def remover_processo(
    processo_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse:
    await ProcessoService(store, current_user).remover(processo_id)
    return APIResponse(success=True, message="Processo removido")


# === Colaboradores ===

@router.post("/{processo_id}/colaboradores", response_model=APIResponse[Processo])
async def adicionar_colaborador(
    processo_id: str,
    dados: ColaboradorRequest,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Processo]:
    processo = await ProcessoService(store, current_user).adicionar_colaborador(processo_id, dados.user_id)
    return APIResponse(success=True, data=processo, message="Colaborador adicionado")


@router.delete("/{processo_id}/colaboradores/{user_id}", response_model=APIResponse[Processo])
async def remover_colaborador(
    processo_id: str,
    user_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Processo]:
    processo = await ProcessoService(store, current_user).remover_colaborador(processo_id, user_id)
    return APIResponse(success=True, data=processo, message="Colaborador removido")


# === Andamentos ===

@router.post(
    "/{processo_id}/andamentos",
    response_model=APIResponse[Movimento],
    status_code=status.HTTP_201_CREATED,
)
async def registrar_andamento(
    processo_id: str,
    dados: MovimentoCreate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Movimento]:
    """Registra andamento manual."""
    movimento = await ProcessoService(store, current_user).registrar_andamento(processo_id, dados)
    return APIResponse(success=True, data=movimento, message="Andamento registrado")


# === Documentos ===

@router.post(
    "/{processo_id}/documentos",
    response_model=APIResponse[DocumentoProcesso],
    status_code=status.HTTP_201_CREATED,
)
async def enviar_documento(
    processo_id: str,
    current_user: CurrentUser,
    store: Store,
    storage: Storage,
    file: UploadFile = File(..., description="Arquivo do documento"),
) -> APIResponse[DocumentoProcesso]:
    """Anexa documento ao processo."""
    content = await file.read()
    documento = await ProcessoService(store, current_user, storage).enviar_documento(
        processo_id,
        content,
        file.filename or "documento",
        file.content_type or "application/octet-stream",
    )
    return APIResponse(success=True, data=documento, message="Documento enviado")


@router.get("/{processo_id}/documentos", response_model=APIResponse[list[DocumentoProcesso]])
async def listar_documentos(
    processo_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[list[DocumentoProcesso]]:
    documentos = await ProcessoService(store, current_user).listar_documentos(processo_id)
    return APIResponse(success=True, data=documentos)


@router.get("/{processo_id}/documentos/{documento_id}/url", response_model=APIResponse[str])
async def url_documento(
    processo_id: str,
    documento_id: str,
    current_user: CurrentUser,
    store: Store,
    storage: Storage,
) -> APIResponse[str]:
    """URL temporária para download."""
    url = await ProcessoService(store, current_user, storage).url_documento(processo_id, documento_id)
    return APIResponse(success=True, data=url)


@router.delete("/{processo_id}/documentos/{documento_id}", response_model=APIResponse)
async def remover_documento(
    processo_id: str,
    documento_id: str,
    current_user: CurrentUser,
    store: Store,
    storage: Storage,
) -> APIResponse:
    await ProcessoService(store, current_user, storage).remover_documento(processo_id, documento_id)
    return APIResponse(success=True, message="Documento removido")


# === Chat ===

@router.get("/{processo_id}/mensagens", response_model=APIResponse[list[MensagemChat]])
async def listar_mensagens(
    processo_id: str,
    current_user: CurrentUser,
    store: Store,
    limit: int | None = Query(None, ge=1, le=500),
) -> APIResponse[list[MensagemChat]]:
    mensagens = await ProcessoService(store, current_user).listar_mensagens(processo_id, limit)
    return APIResponse(success=True, data=mensagens)


@router.post(
    "/{processo_id}/mensagens",
    response_model=APIResponse[MensagemChat],
    status_code=status.HTTP_201_CREATED,
)
async def enviar_mensagem(
    processo_id: str,
    dados: MensagemChatCreate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[MensagemChat]:
    mensagem = await ProcessoService(store, current_user).enviar_mensagem(processo_id, dados)
    return APIResponse(success=True, data=mensagem)
