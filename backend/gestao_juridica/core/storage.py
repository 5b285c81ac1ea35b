"""
Serviço de armazenamento no Cloud Storage do projeto Firebase.

Gerencia upload, remoção e URLs assinadas de fotos de perfil e documentos
de processos.
"""

import hashlib
import uuid
from datetime import timedelta
from pathlib import Path
from typing import BinaryIO

import structlog
from google.cloud import storage
from google.cloud.exceptions import GoogleCloudError

from gestao_juridica.core.config import Settings
from gestao_juridica.core.exceptions import (
    FileTooLargeError,
    FileUploadError,
    InvalidFileTypeError,
    StorageError,
)

logger = structlog.get_logger()


class StorageService:
    """
    Serviço de armazenamento no Google Cloud Storage.

    Uso:
        service = StorageService(settings)
        result = await service.upload_file(conteudo, "peticao.pdf", "application/pdf", office_id)
    """

    def __init__(self, settings: Settings, client: storage.Client | None = None):
        self._settings = settings
        self._client = client
        self._bucket: storage.Bucket | None = None

    @property
    def client(self) -> storage.Client:
        """Inicializa cliente GCS sob demanda."""
        if self._client is None:
            self._client = storage.Client(project=self._settings.FIREBASE_PROJECT_ID or None)
        return self._client

    @property
    def bucket(self) -> storage.Bucket:
        if self._bucket is None:
            self._bucket = self.client.bucket(self._settings.FIREBASE_STORAGE_BUCKET)
        return self._bucket

    def validate_file(self, file_size: int, mime_type: str, images_only: bool = False) -> None:
        """Valida tamanho e tipo do arquivo antes do upload."""
        max_size_bytes = self._settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024
        if file_size > max_size_bytes:
            raise FileTooLargeError(
                max_size_mb=self._settings.MAX_UPLOAD_SIZE_MB,
                actual_size_mb=file_size / (1024 * 1024),
            )

        allowed = (
            self._settings.ALLOWED_IMAGE_TYPES
            if images_only
            else self._settings.ALLOWED_DOCUMENT_TYPES
        )
        if mime_type not in allowed:
            raise InvalidFileTypeError(mime_type=mime_type, allowed_types=allowed)

    @staticmethod
    def generate_path(office_id: str, prefix: str, original_filename: str) -> str:
        """
        Gera path único no bucket.

        Formato: {office_id}/{prefix}/{uuid}_{filename}
        """
        file_uuid = str(uuid.uuid4())[:8]
        safe_filename = Path(original_filename).name  # Remove path traversal
        return f"{office_id}/{prefix}/{file_uuid}_{safe_filename}"

    async def upload_file(
        self,
        file_content: bytes | BinaryIO,
        original_filename: str,
        mime_type: str,
        office_id: str,
        prefix: str = "documentos",
        images_only: bool = False,
    ) -> dict:
        """
        Faz upload de arquivo.

        Args:
            file_content: Conteúdo do arquivo (bytes ou file-like)
            original_filename: Nome original do arquivo
            mime_type: Tipo MIME
            office_id: Escritório dono do arquivo
            prefix: Prefixo do path (ex: 'processos/<id>', 'avatars')
            images_only: Aceita apenas imagens (fotos de perfil)

        Returns:
            Dict com path, url, hash_sha256 e size
        """
        if hasattr(file_content, "read"):
            content = file_content.read()
        else:
            content = file_content

        self.validate_file(len(content), mime_type, images_only=images_only)

        path = self.generate_path(office_id, prefix, original_filename)
        file_hash = hashlib.sha256(content).hexdigest()

        try:
            blob = self.bucket.blob(path)
            blob.upload_from_string(content, content_type=mime_type)
        except GoogleCloudError as e:
            logger.error("Erro no upload para o Storage", error=str(e), path=path)
            raise FileUploadError("Erro ao enviar arquivo")

        logger.info(
            "Arquivo enviado para o Storage",
            path=path,
            size_bytes=len(content),
            mime_type=mime_type,
        )
        return {
            "path": path,
            "url": blob.public_url,
            "hash_sha256": file_hash,
            "size": len(content),
        }

    def generate_signed_url(
        self,
        path: str,
        expiration_minutes: int = 60,
        method: str = "GET",
    ) -> str:
        """Gera URL assinada para acesso temporário."""
        try:
            blob = self.bucket.blob(path)
            return blob.generate_signed_url(
                version="v4",
                expiration=timedelta(minutes=expiration_minutes),
                method=method,
            )
        except GoogleCloudError as e:
            logger.error("Erro ao gerar URL assinada", error=str(e), path=path)
            raise StorageError("Erro ao gerar URL do arquivo", operation="signed_url")

    async def delete_file(self, path: str) -> bool:
        """Remove arquivo do bucket."""
        try:
            self.bucket.blob(path).delete()
        except GoogleCloudError as e:
            logger.error("Erro ao remover do Storage", error=str(e), path=path)
            raise StorageError("Erro ao remover arquivo", operation="delete")
        logger.info("Arquivo removido do Storage", path=path)
        return True
