"""
Endpoints da Agenda.
"""

from datetime import datetime

from fastapi import APIRouter, Query, status

from gestao_juridica.core.dependencies import CurrentUser, Store
from gestao_juridica.models.evento import Evento
from gestao_juridica.schemas.agenda import EventoCreate, EventoStatusUpdate
from gestao_juridica.schemas.base import APIResponse
from gestao_juridica.services.agenda_service import AgendaService

router = APIRouter(prefix="/agenda", tags=["Agenda"])


@router.post(
    "",
    response_model=APIResponse[Evento],
    status_code=status.HTTP_201_CREATED,
)
async def criar_evento(
    dados: EventoCreate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Evento]:
    evento = await AgendaService(store, current_user).criar(dados)
    return APIResponse(success=True, data=evento, message="Evento agendado")


@router.get("", response_model=APIResponse[list[Evento]])
async def listar_eventos(
    current_user: CurrentUser,
    store: Store,
    inicio: datetime | None = Query(None, description="Data/hora inicial (ISO 8601)"),
    fim: datetime | None = Query(None, description="Data/hora final (ISO 8601)"),
) -> APIResponse[list[Evento]]:
    """Compromissos do escritório em ordem cronológica."""
    eventos = await AgendaService(store, current_user).listar(inicio, fim)
    return APIResponse(success=True, data=eventos)


@router.patch("/{evento_id}/status", response_model=APIResponse[Evento])
async def atualizar_status_evento(
    evento_id: str,
    dados: EventoStatusUpdate,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse[Evento]:
    evento = await AgendaService(store, current_user).atualizar_status(evento_id, dados)
    return APIResponse(success=True, data=evento, message="Status atualizado")


@router.delete("/{evento_id}", response_model=APIResponse)
async def remover_evento(
    evento_id: str,
    current_user: CurrentUser,
    store: Store,
) -> APIResponse:
    await AgendaService(store, current_user).remover(evento_id)
    return APIResponse(success=True, message="Evento removido")
