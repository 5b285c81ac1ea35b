"""
Service das funcionalidades de IA.

Resolve a chave de API do escritório, verifica permissões e, no caso da
atualização de andamento, grava o resultado no processo.
"""

import structlog

from gestao_juridica.ai.gemini_service import GeminiClientRegistry, GeminiService
from gestao_juridica.core.exceptions import ApiKeyNotConfiguredError
from gestao_juridica.core.permissions import Action, authorize
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.processo import Movimento
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.repositories.escritorio_repository import EscritorioRepository
from gestao_juridica.repositories.processo_repository import ProcessoRepository
from gestao_juridica.schemas.ia import (
    AndamentoInput,
    PeticaoInput,
    PeticaoOutput,
    ResumoInput,
    ResumoOutput,
)
from gestao_juridica.services.processo_service import ProcessoService

logger = structlog.get_logger()

SEM_ANDAMENTO = "Nenhum andamento registrado"


class IAService:
    """Funcionalidades de IA no contexto do escritório do usuário."""

    def __init__(self, store: DocumentStore, user: Usuario, registry: GeminiClientRegistry):
        self._store = store
        self._user = user
        self._registry = registry

    async def _gemini(self) -> GeminiService:
        escritorio = await EscritorioRepository(self._store).get_by_id(self._user.office_id)
        if escritorio is None or not escritorio.has_api_key:
            raise ApiKeyNotConfiguredError()
        return self._registry.service_for(escritorio.google_api_key)

    async def gerar_peticao(self, dados: PeticaoInput) -> PeticaoOutput:
        authorize(self._user, Action.AI_PETITION)
        gemini = await self._gemini()
        return await gemini.draft_petition(dados)

    async def resumir(self, dados: ResumoInput) -> ResumoOutput:
        authorize(self._user, Action.AI_SUMMARIZE)
        gemini = await self._gemini()
        return await gemini.summarize_brief(dados)

    async def atualizar_andamento(self, processo_id: str) -> Movimento:
        """
        Gera o próximo andamento do processo e o acrescenta ao histórico.

        O acréscimo usa array-union atômico.
        """
        processo = await ProcessoService(self._store, self._user).carregar(
            processo_id, Action.PROCESS_STATUS_UPDATE
        )
        gemini = await self._gemini()

        ultimo = processo.last_movement
        resultado = await gemini.simulate_status_update(
            AndamentoInput(
                process_number=processo.process_number,
                court=processo.court or "",
                current_status=processo.status.value,
                last_update=ultimo.description if ultimo else SEM_ANDAMENTO,
            )
        )

        movimento = Movimento(
            date=resultado.date,
            description=resultado.description,
            details=resultado.details,
        )
        await ProcessoRepository(self._store, self._user.office_id).append_movement(processo_id, movimento)
        logger.info("Andamento gerado por IA registrado", processo_id=processo_id)
        return movimento
