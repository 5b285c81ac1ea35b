"""
Testes do serviço de storage com o cliente do Cloud Storage simulado.
"""
from unittest.mock import MagicMock

import pytest
from google.cloud.exceptions import GoogleCloudError

from gestao_juridica.core.exceptions import FileTooLargeError, FileUploadError, InvalidFileTypeError
from gestao_juridica.core.storage import StorageService


@pytest.fixture
def gcs_client() -> MagicMock:
    client = MagicMock()
    client.bucket.return_value.blob.return_value.public_url = "https://storage.googleapis.com/bucket/arquivo"
    return client


@pytest.fixture
def service(settings, gcs_client) -> StorageService:
    settings.MAX_UPLOAD_SIZE_MB = 1
    return StorageService(settings, client=gcs_client)


def test_generate_path_strips_directories():
    path = StorageService.generate_path("office_a", "processos/p1", "../../etc/passwd")

    assert path.startswith("office_a/processos/p1/")
    assert path.endswith("_passwd")
    assert ".." not in path


def test_validate_file(service: StorageService):
    service.validate_file(100, "application/pdf")

    with pytest.raises(FileTooLargeError):
        service.validate_file(2 * 1024 * 1024, "application/pdf")

    with pytest.raises(InvalidFileTypeError):
        service.validate_file(100, "application/x-msdownload")

    with pytest.raises(InvalidFileTypeError):
        service.validate_file(100, "application/pdf", images_only=True)


@pytest.mark.asyncio
async def test_upload_file(service: StorageService, gcs_client: MagicMock):
    result = await service.upload_file(b"conteudo", "inicial.pdf", "application/pdf", "office_a", prefix="processos/p1")

    assert result["path"].startswith("office_a/processos/p1/")
    assert result["size"] == len(b"conteudo")
    assert result["url"] == "https://storage.googleapis.com/bucket/arquivo"
    blob = gcs_client.bucket.return_value.blob.return_value
    blob.upload_from_string.assert_called_once_with(b"conteudo", content_type="application/pdf")


@pytest.mark.asyncio
async def test_upload_failure(service: StorageService, gcs_client: MagicMock):
    gcs_client.bucket.return_value.blob.return_value.upload_from_string.side_effect = GoogleCloudError("falhou")

    with pytest.raises(FileUploadError):
        await service.upload_file(b"conteudo", "inicial.pdf", "application/pdf", "office_a")
