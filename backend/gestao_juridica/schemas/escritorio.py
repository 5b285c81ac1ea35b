"""
Schemas do Escritório e das configurações.
"""

from datetime import datetime

from pydantic import Field

from gestao_juridica.models.escritorio import Escritorio, SeoMetadata
from gestao_juridica.schemas.base import BaseSchema


def mask_api_key(key: str) -> str:
    """Exibe apenas os 4 últimos caracteres da chave."""
    if not key:
        return ""
    if len(key) <= 4:
        return "*" * len(key)
    return "*" * (len(key) - 4) + key[-4:]


class EscritorioResponse(BaseSchema):
    """Escritório como exibido na tela de configurações (chave mascarada)."""

    id: str
    name: str
    owner_id: str | None = None
    google_api_key: str = ""
    has_api_key: bool = False
    seo: SeoMetadata = Field(default_factory=SeoMetadata)
    tag_manager_id: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_model(cls, escritorio: Escritorio) -> "EscritorioResponse":
        return cls(
            id=escritorio.id,
            name=escritorio.name,
            owner_id=escritorio.owner_id,
            google_api_key=mask_api_key(escritorio.google_api_key),
            has_api_key=escritorio.has_api_key,
            seo=escritorio.seo,
            tag_manager_id=escritorio.tag_manager_id,
            created_at=escritorio.created_at,
        )


class ApiKeyUpdate(BaseSchema):
    google_api_key: str = Field(..., min_length=1, max_length=200)


class SeoUpdate(BaseSchema):
    title: str | None = Field(None, max_length=120)
    description: str | None = Field(None, max_length=320)
    keywords: list[str] = Field(default_factory=list)


class TagManagerUpdate(BaseSchema):
    tag_manager_id: str = Field("", pattern=r"^(GTM-[A-Z0-9]+)?$")


class SeoPublicoResponse(BaseSchema):
    """Metadados usados pela página pública."""

    name: str | None = None
    seo: SeoMetadata = Field(default_factory=SeoMetadata)
    tag_manager_id: str | None = None
