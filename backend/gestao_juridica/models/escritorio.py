"""
Modelo do Escritório (tenant).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from gestao_juridica.models.base import DocumentModel


class SeoMetadata(BaseModel):
    """Metadados da página pública do escritório."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    keywords: list[str] = Field(default_factory=list)


class Escritorio(DocumentModel):
    """Escritório de advocacia: fronteira de isolamento dos dados."""

    name: str
    owner_id: str | None = None
    google_api_key: str = ""
    seo: SeoMetadata = Field(default_factory=SeoMetadata)
    tag_manager_id: str | None = None

    @property
    def has_api_key(self) -> bool:
        return bool(self.google_api_key)
