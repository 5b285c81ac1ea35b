"""
Base dos modelos de documento.

Os documentos são gravados com chaves camelCase (formato compartilhado com o
front-end); em Python os atributos são snake_case.
"""

from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from gestao_juridica.db.store import Snapshot

DocumentType = TypeVar("DocumentType", bound="DocumentModel")


class DocumentModel(BaseModel):
    """Documento armazenado em uma coleção."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_snapshot(cls: type[DocumentType], snapshot: Snapshot) -> DocumentType:
        return cls.model_validate({**snapshot.data, "id": snapshot.id})

    def to_document(self) -> dict[str, Any]:
        """Campos a gravar no banco (sem o ID, que é a chave do documento)."""
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)


class TenantDocument(DocumentModel):
    """Documento que pertence a exatamente um escritório."""

    office_id: str

    @property
    def responsavel_id(self) -> str | None:
        """Usuário dono do recurso, quando a regra de acesso depende disso."""
        return None

