"""
Modelo de Evento da agenda.
"""

import enum
from datetime import datetime

from gestao_juridica.models.base import TenantDocument


class TipoEvento(str, enum.Enum):
    """Tipos de compromisso da agenda."""

    AUDIENCIA = "audiencia"
    PRAZO = "prazo"
    REUNIAO = "reuniao"
    OUTRO = "outro"


class StatusEvento(str, enum.Enum):
    """Situação do compromisso."""

    AGENDADO = "agendado"
    CONFIRMADO = "confirmado"
    REALIZADO = "realizado"
    CANCELADO = "cancelado"


class Evento(TenantDocument):
    """Compromisso (audiência, prazo, reunião) de um advogado."""

    title: str
    date: datetime
    type: TipoEvento
    description: str | None = None
    status: StatusEvento = StatusEvento.AGENDADO
    lawyer_id: str
    process_id: str | None = None
    client_id: str | None = None

    @property
    def responsavel_id(self) -> str | None:
        return self.lawyer_id
