"""
Service do Escritório e suas configurações.
"""

import structlog

from gestao_juridica.ai.gemini_service import GeminiClientRegistry
from gestao_juridica.core.exceptions import ResourceNotFoundError
from gestao_juridica.core.permissions import Action, authorize
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.escritorio import Escritorio
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.repositories.escritorio_repository import EscritorioRepository
from gestao_juridica.schemas.escritorio import (
    ApiKeyUpdate,
    EscritorioResponse,
    SeoPublicoResponse,
    SeoUpdate,
    TagManagerUpdate,
)

logger = structlog.get_logger()


class EscritorioService:
    """Leitura e configuração do escritório do usuário logado."""

    def __init__(
        self,
        store: DocumentStore,
        user: Usuario,
        ai_registry: GeminiClientRegistry | None = None,
    ):
        self._repo = EscritorioRepository(store)
        self._ai_registry = ai_registry
        self._user = user

    async def _get(self) -> Escritorio:
        escritorio = await self._repo.get_by_id(self._user.office_id)
        if escritorio is None:
            raise ResourceNotFoundError("Escritório", self._user.office_id)
        return escritorio

    async def obter(self) -> EscritorioResponse:
        authorize(self._user, Action.OFFICE_READ)
        return EscritorioResponse.from_model(await self._get())

    async def atualizar_api_key(self, dados: ApiKeyUpdate) -> EscritorioResponse:
        """Substitui a chave de API do Gemini usada pelo escritório."""
        authorize(self._user, Action.OFFICE_SETTINGS)
        anterior = await self._get()

        escritorio = await self._repo.merge(
            self._user.office_id,
            {"googleApiKey": dados.google_api_key.strip()},
        )
        if self._ai_registry is not None and anterior.google_api_key:
            self._ai_registry.forget(anterior.google_api_key)

        logger.info("Chave de API atualizada", office_id=self._user.office_id)
        return EscritorioResponse.from_model(escritorio)

    async def atualizar_seo(self, dados: SeoUpdate) -> EscritorioResponse:
        authorize(self._user, Action.OFFICE_SETTINGS)
        await self._get()
        escritorio = await self._repo.merge(
            self._user.office_id,
            {"seo": dados.model_dump(by_alias=True)},
        )
        logger.info("SEO atualizado", office_id=self._user.office_id)
        return EscritorioResponse.from_model(escritorio)

    async def atualizar_tag_manager(self, dados: TagManagerUpdate) -> EscritorioResponse:
        authorize(self._user, Action.OFFICE_SETTINGS)
        await self._get()
        escritorio = await self._repo.merge(
            self._user.office_id,
            {"tagManagerId": dados.tag_manager_id},
        )
        logger.info("Tag Manager atualizado", office_id=self._user.office_id)
        return EscritorioResponse.from_model(escritorio)


async def obter_seo_publico(store: DocumentStore) -> SeoPublicoResponse:
    """Metadados da página pública (primeiro escritório cadastrado)."""
    escritorio = await EscritorioRepository(store).get_first()
    if escritorio is None:
        return SeoPublicoResponse()
    return SeoPublicoResponse(
        name=escritorio.name,
        seo=escritorio.seo,
        tag_manager_id=escritorio.tag_manager_id,
    )
