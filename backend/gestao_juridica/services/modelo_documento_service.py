"""
Service de Modelos de documento.
"""

import structlog

from gestao_juridica.core.exceptions import ResourceNotFoundError
from gestao_juridica.core.permissions import Action, authorize
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.modelo_documento import ModeloDocumento
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.repositories.modelo_documento_repository import ModeloDocumentoRepository
from gestao_juridica.schemas.modelo_documento import ModeloDocumentoCreate, ModeloDocumentoUpdate

logger = structlog.get_logger()


class ModeloDocumentoService:
    """Modelos de peças reutilizáveis do escritório."""

    def __init__(self, store: DocumentStore, user: Usuario):
        self._repo = ModeloDocumentoRepository(store, user.office_id)
        self._user = user

    async def _carregar(self, modelo_id: str, action: Action) -> ModeloDocumento:
        modelo = await self._repo.get_by_id(modelo_id)
        if modelo is None:
            raise ResourceNotFoundError("Modelo", modelo_id)
        authorize(self._user, action, modelo, "Modelo")
        return modelo

    async def criar(self, dados: ModeloDocumentoCreate) -> ModeloDocumento:
        authorize(self._user, Action.TEMPLATE_CREATE)
        data = dados.model_dump(by_alias=True)
        data["createdBy"] = self._user.id
        modelo = await self._repo.create(data)
        logger.info("Modelo criado", modelo_id=modelo.id)
        return modelo

    async def listar(self) -> list[ModeloDocumento]:
        authorize(self._user, Action.TEMPLATE_READ)
        modelos = await self._repo.get_all()
        return sorted(modelos, key=lambda m: m.title.lower())

    async def obter(self, modelo_id: str) -> ModeloDocumento:
        return await self._carregar(modelo_id, Action.TEMPLATE_READ)

    async def atualizar(self, modelo_id: str, dados: ModeloDocumentoUpdate) -> ModeloDocumento:
        modelo = await self._carregar(modelo_id, Action.TEMPLATE_UPDATE)
        changes = dados.changes()
        if not changes:
            return modelo
        return await self._repo.update(modelo_id, changes)

    async def remover(self, modelo_id: str) -> None:
        await self._carregar(modelo_id, Action.TEMPLATE_DELETE)
        await self._repo.delete(modelo_id)
        logger.info("Modelo removido", modelo_id=modelo_id)
