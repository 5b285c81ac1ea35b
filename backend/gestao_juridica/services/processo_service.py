"""
Service de Processos.

Gerencia processos, colaboradores, andamentos, documentos anexados e o
chat interno, sempre sob a lista de colaboradores do processo.
"""

from collections import Counter
from datetime import datetime, timezone
from typing import BinaryIO

import structlog

from gestao_juridica.core.container import FileStorage
from gestao_juridica.core.exceptions import (
    BusinessRuleError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from gestao_juridica.core.permissions import Action, authorize, process_read_filters
from gestao_juridica.db.store import DocumentStore, Filter
from gestao_juridica.models.processo import (
    LEGACY_STATUS_MAP,
    DocumentoProcesso,
    MensagemChat,
    Movimento,
    Processo,
)
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.repositories.cliente_repository import ClienteRepository
from gestao_juridica.repositories.processo_repository import (
    DocumentoProcessoRepository,
    MensagemChatRepository,
    ProcessoRepository,
)
from gestao_juridica.repositories.usuario_repository import EquipeRepository
from gestao_juridica.schemas.processo import (
    MensagemChatCreate,
    MigracaoStatusResponse,
    MovimentoCreate,
    ProcessoCreate,
    ProcessoUpdate,
)

logger = structlog.get_logger()


class ProcessoService:
    """
    Service para operações com Processo.

    Toda operação sobre um processo carrega o documento pelo repositório do
    escritório e passa por `authorize` antes de ler ou escrever.
    """

    def __init__(self, store: DocumentStore, user: Usuario, storage: FileStorage | None = None):
        self._store = store
        self._user = user
        self._storage = storage
        self._repo = ProcessoRepository(store, user.office_id)

    async def carregar(self, processo_id: str, action: Action) -> Processo:
        """Carrega o processo e verifica a permissão para a ação."""
        processo = await self._repo.get_by_id(processo_id)
        if processo is None:
            raise ResourceNotFoundError("Processo", processo_id)
        authorize(self._user, action, processo, "Processo")
        return processo

    # === PROCESSOS ===

    async def criar(self, dados: ProcessoCreate) -> Processo:
        """
        Cria novo processo.

        O criador é o responsável e o primeiro colaborador.
        """
        authorize(self._user, Action.PROCESS_CREATE)

        cliente = await ClienteRepository(self._store, self._user.office_id).get_by_id(dados.client_id)
        if cliente is None:
            raise ResourceNotFoundError("Cliente", dados.client_id)

        if await self._repo.get_by_numero(dados.process_number):
            raise ResourceAlreadyExistsError("Processo", "processNumber", dados.process_number)

        data = dados.model_dump(by_alias=True)
        data.update(
            {
                "clientName": cliente.full_name,
                "clientDocument": cliente.document,
                "ownerId": self._user.id,
                "collaboratorIds": [self._user.id],
                "movements": [],
            }
        )
        processo = await self._repo.create(data)
        logger.info(
            "Processo criado",
            processo_id=processo.id,
            numero=processo.process_number,
            office_id=self._user.office_id,
        )
        return processo

    async def listar(self, status: str | None = None) -> list[Processo]:
        """Processos visíveis ao usuário (advogados veem apenas os seus)."""
        filters = process_read_filters(self._user, include_office=False)
        if status:
            filters.append(Filter("status", "==", status))
        processos = await self._repo.find(filters)
        epoch = datetime.min.replace(tzinfo=timezone.utc)
        return sorted(processos, key=lambda p: p.created_at or epoch, reverse=True)

    async def obter(self, processo_id: str) -> Processo:
        return await self.carregar(processo_id, Action.PROCESS_READ)

    async def atualizar(self, processo_id: str, dados: ProcessoUpdate) -> Processo:
        processo = await self.carregar(processo_id, Action.PROCESS_UPDATE)

        changes = dados.changes()
        numero = changes.get("processNumber")
        if numero and numero != processo.process_number:
            if await self._repo.get_by_numero(numero):
                raise ResourceAlreadyExistsError("Processo", "processNumber", numero)

        if not changes:
            return processo
        atualizado = await self._repo.update(processo_id, changes)
        logger.info("Processo atualizado", processo_id=processo_id, campos=sorted(changes))
        return atualizado

    async def remover(self, processo_id: str) -> None:
        await self.carregar(processo_id, Action.PROCESS_DELETE)
        await self._repo.delete(processo_id)
        logger.info("Processo removido", processo_id=processo_id, office_id=self._user.office_id)

    # === COLABORADORES ===

    async def adicionar_colaborador(self, processo_id: str, user_id: str) -> Processo:
        """Concede acesso ao processo a um membro do mesmo escritório."""
        await self.carregar(processo_id, Action.PROCESS_COLLABORATOR_MANAGE)

        membro = await EquipeRepository(self._store, self._user.office_id).get_by_id(user_id)
        if membro is None:
            raise ResourceNotFoundError("Usuário", user_id)

        processo = await self._repo.add_collaborator(processo_id, user_id)
        logger.info("Colaborador adicionado", processo_id=processo_id, colaborador=user_id)
        return processo

    async def remover_colaborador(self, processo_id: str, user_id: str) -> Processo:
        processo = await self.carregar(processo_id, Action.PROCESS_COLLABORATOR_MANAGE)
        if user_id == processo.owner_id:
            raise BusinessRuleError(
                "O responsável pelo processo não pode ser removido dos colaboradores.",
                rule="OWNER_IS_COLLABORATOR",
            )

        processo = await self._repo.remove_collaborator(processo_id, user_id)
        logger.info("Colaborador removido", processo_id=processo_id, colaborador=user_id)
        return processo

    # === ANDAMENTOS ===

    async def registrar_andamento(self, processo_id: str, dados: MovimentoCreate) -> Movimento:
        """Acrescenta andamento manual ao histórico do processo."""
        await self.carregar(processo_id, Action.PROCESS_UPDATE)
        movimento = Movimento(
            date=dados.date or datetime.now(timezone.utc),
            description=dados.description,
            details=dados.details,
        )
        await self._repo.append_movement(processo_id, movimento)
        logger.info("Andamento registrado", processo_id=processo_id)
        return movimento

    # === DOCUMENTOS ===

    async def enviar_documento(
        self,
        processo_id: str,
        content: bytes | BinaryIO,
        filename: str,
        content_type: str,
    ) -> DocumentoProcesso:
        await self.carregar(processo_id, Action.PROCESS_DOCUMENT_UPLOAD)

        result = await self._storage.upload_file(
            content,
            filename,
            content_type,
            office_id=self._user.office_id,
            prefix=f"processos/{processo_id}",
        )
        documento = await DocumentoProcessoRepository(self._store, processo_id).create(
            {
                "name": filename,
                "path": result["path"],
                "contentType": content_type,
                "size": result["size"],
                "uploadedBy": self._user.id,
            }
        )
        logger.info("Documento anexado", processo_id=processo_id, documento_id=documento.id)
        return documento

    async def listar_documentos(self, processo_id: str) -> list[DocumentoProcesso]:
        await self.carregar(processo_id, Action.PROCESS_READ)
        return await DocumentoProcessoRepository(self._store, processo_id).list_recent()

    async def url_documento(self, processo_id: str, documento_id: str) -> str:
        """URL assinada para download do documento."""
        await self.carregar(processo_id, Action.PROCESS_READ)
        documento = await DocumentoProcessoRepository(self._store, processo_id).get_by_id(documento_id)
        if documento is None:
            raise ResourceNotFoundError("Documento", documento_id)
        return self._storage.generate_signed_url(documento.path)

    async def remover_documento(self, processo_id: str, documento_id: str) -> None:
        await self.carregar(processo_id, Action.PROCESS_DOCUMENT_UPLOAD)
        repo = DocumentoProcessoRepository(self._store, processo_id)
        documento = await repo.get_by_id(documento_id)
        if documento is None:
            raise ResourceNotFoundError("Documento", documento_id)

        await self._storage.delete_file(documento.path)
        await repo.delete(documento_id)
        logger.info("Documento removido", processo_id=processo_id, documento_id=documento_id)

    # === CHAT ===

    async def listar_mensagens(self, processo_id: str, limit: int | None = None) -> list[MensagemChat]:
        await self.carregar(processo_id, Action.PROCESS_CHAT_READ)
        return await MensagemChatRepository(self._store, processo_id).list_messages(limit)

    async def enviar_mensagem(self, processo_id: str, dados: MensagemChatCreate) -> MensagemChat:
        await self.carregar(processo_id, Action.PROCESS_CHAT_POST)
        return await MensagemChatRepository(self._store, processo_id).post(
            {
                "text": dados.text,
                "authorId": self._user.id,
                "authorName": self._user.full_name,
            }
        )

    # === MIGRAÇÃO ===

    async def migrar_status_legados(self) -> MigracaoStatusResponse:
        """Regrava com o enum atual os processos que ainda têm status legado."""
        authorize(self._user, Action.PROCESS_STATUS_MIGRATE)

        por_status: Counter[str] = Counter()
        for processo_id, legado in await self._repo.get_legacy_status_ids():
            novo = LEGACY_STATUS_MAP[legado]
            await self._repo.set_raw_status(processo_id, novo.value)
            por_status[legado] += 1

        total = sum(por_status.values())
        logger.info("Status legados migrados", office_id=self._user.office_id, total=total)
        return MigracaoStatusResponse(migrated=total, by_status=dict(por_status))
