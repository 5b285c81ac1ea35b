"""
Service do Perfil do usuário logado.
"""

from typing import BinaryIO

import structlog

from gestao_juridica.core.container import FileStorage
from gestao_juridica.core.exceptions import DocumentStoreError, FileUploadError
from gestao_juridica.db.store import DocumentStore
from gestao_juridica.models.usuario import Usuario
from gestao_juridica.repositories.usuario_repository import UsuarioRepository
from gestao_juridica.schemas.usuario import PerfilUpdate

logger = structlog.get_logger()


class PerfilService:
    """Atualizações que o usuário faz no próprio cadastro."""

    def __init__(self, store: DocumentStore, user: Usuario, storage: FileStorage | None = None):
        self._repo = UsuarioRepository(store)
        self._storage = storage
        self._user = user

    async def atualizar(self, dados: PerfilUpdate) -> Usuario:
        changes = dados.changes()
        if not changes:
            return self._user
        updated = await self._repo.update(self._user.id, changes)
        logger.info("Perfil atualizado", uid=self._user.id, campos=sorted(changes))
        return updated

    async def enviar_foto(
        self,
        content: bytes | BinaryIO,
        filename: str,
        content_type: str,
    ) -> Usuario:
        """
        Envia foto de perfil e grava a URL no cadastro.

        Se a gravação da URL falhar, o arquivo enviado permanece no storage.
        """
        result = await self._storage.upload_file(
            content,
            filename,
            content_type,
            office_id=self._user.office_id,
            prefix=f"avatars/{self._user.id}",
            images_only=True,
        )
        try:
            updated = await self._repo.update(self._user.id, {"photoUrl": result["url"]})
        except DocumentStoreError:
            logger.error("Foto enviada mas perfil não atualizado", uid=self._user.id, path=result["path"])
            raise FileUploadError("Não foi possível atualizar a foto de perfil.")

        logger.info("Foto de perfil atualizada", uid=self._user.id)
        return updated
