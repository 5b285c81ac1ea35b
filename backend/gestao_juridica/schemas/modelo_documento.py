"""
Schemas de Modelos de documento.
"""

from pydantic import Field

from gestao_juridica.schemas.base import BaseSchema


class ModeloDocumentoCreate(BaseSchema):
    title: str = Field(..., min_length=2, max_length=255)
    content: str = Field(..., min_length=1)


class ModeloDocumentoUpdate(BaseSchema):
    non_nullable = frozenset({"title", "content"})

    title: str | None = Field(None, min_length=2, max_length=255)
    content: str | None = Field(None, min_length=1)
