"""
Modelos relacionados a Processos Judiciais.

Inclui Processo, Movimento (andamento), documentos anexados e mensagens
do chat interno do processo.
"""

import enum
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from gestao_juridica.models.base import DocumentModel, TenantDocument


class StatusProcesso(str, enum.Enum):
    """Situação do processo."""

    A_DISTRIBUIR = "a_distribuir"
    EM_ANDAMENTO = "em_andamento"
    EM_RECURSO = "em_recurso"
    EXECUCAO = "execucao"
    ARQUIVADO_PROVISORIO = "arquivado_provisorio"
    ARQUIVADO_DEFINITIVO = "arquivado_definitivo"


# Valores gravados pela primeira versão do cadastro de processos
LEGACY_STATUS_MAP: dict[str, StatusProcesso] = {
    "active": StatusProcesso.EM_ANDAMENTO,
    "pending": StatusProcesso.A_DISTRIBUIR,
    "archived": StatusProcesso.ARQUIVADO_DEFINITIVO,
}


def normalize_status(value: Any) -> Any:
    """Converte status legado para o enum canônico."""
    if isinstance(value, str) and value in LEGACY_STATUS_MAP:
        return LEGACY_STATUS_MAP[value]
    return value


class Representacao(str, enum.Enum):
    """Polo representado pelo escritório."""

    PLAINTIFF = "plaintiff"
    DEFENDANT = "defendant"


class Movimento(BaseModel):
    """Andamento processual (entrada de log somente-acréscimo)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: datetime
    description: str
    details: str = ""


class Processo(TenantDocument):
    """Processo judicial com lista de colaboradores (ACL)."""

    process_number: str
    client_id: str | None = None
    client_name: str | None = None
    client_document: str | None = None
    court: str | None = None
    action_type: str | None = None
    plaintiff: str | None = None
    defendant: str | None = None
    representation: Representacao | None = None
    status: StatusProcesso = StatusProcesso.A_DISTRIBUIR
    owner_id: str
    collaborator_ids: list[str] = Field(default_factory=list)
    movements: list[Movimento] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def legacy_owner(cls, data: Any) -> Any:
        """Documentos antigos gravavam o dono em `lawyerId`."""
        if isinstance(data, dict) and not data.get("ownerId") and not data.get("owner_id"):
            if data.get("lawyerId"):
                data = {**data, "ownerId": data["lawyerId"]}
        return data

    @field_validator("status", mode="before")
    @classmethod
    def legacy_status(cls, v: Any) -> Any:
        return normalize_status(v)

    @property
    def responsavel_id(self) -> str | None:
        return self.owner_id

    @property
    def last_movement(self) -> Movimento | None:
        if not self.movements:
            return None
        return max(self.movements, key=lambda m: m.date)


class DocumentoProcesso(DocumentModel):
    """Arquivo anexado a um processo (subcoleção `documents`)."""

    name: str
    path: str
    content_type: str
    size: int
    uploaded_by: str


class MensagemChat(DocumentModel):
    """Mensagem do chat interno de um processo (subcoleção `chatMessages`)."""

    text: str
    author_id: str
    author_name: str | None = None
