"""
Schemas das funcionalidades de IA generativa.

Cada funcionalidade tem um contrato fixo de entrada e saída; a saída do
modelo é sempre validada contra o schema antes de ser usada.
"""

import enum
from datetime import datetime

from pydantic import Field, field_validator

from gestao_juridica.schemas.base import BaseSchema, as_utc


# === Rascunho de petição ===

class PeticaoInput(BaseSchema):
    """Diretrizes do advogado para o rascunho da petição."""

    case_facts: str = Field(..., min_length=10, description="Resumo dos fatos relevantes do caso")
    petition_type: str = Field(..., min_length=3, description='Ex.: "Contestação", "Petição Inicial"')
    legal_thesis: str = Field(..., min_length=10, description="Tese jurídica central (guia mestre)")
    tone_and_style: str = Field(..., min_length=3, description="Tom e estilo da escrita")
    client_info: str = Field(..., min_length=2, description="Nome e qualificação do cliente")
    opponent_info: str = Field(..., min_length=2, description="Nome e qualificação da parte contrária")


class PeticaoOutput(BaseSchema):
    draft_content: str = Field(..., min_length=1)


# === Simulação de andamento ===

class AndamentoInput(BaseSchema):
    """Situação atual do processo enviada ao simulador."""

    process_number: str
    court: str
    current_status: str
    last_update: str


class AndamentoOutput(BaseSchema):
    """Próximo andamento gerado (data ISO 8601)."""

    date: datetime
    description: str = Field(..., min_length=1)
    details: str = ""

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: datetime) -> datetime:
        return as_utc(v)


# === Resumo de peças ===

class TomResumo(str, enum.Enum):
    FORMAL = "formal"
    INFORMAL = "informal"
    NEUTRAL = "neutral"


class ResumoInput(BaseSchema):
    document_text: str
    tone: TomResumo
    focus_areas: str


class ResumoOutput(BaseSchema):
    summary: str = Field(..., min_length=1)
