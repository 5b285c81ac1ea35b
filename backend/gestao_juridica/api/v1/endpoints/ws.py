"""
WebSocket de assinaturas em tempo real.

O cliente conecta em `/ws/{coleção}?token=...` e recebe, a cada mudança, a
lista completa de documentos visíveis para ele na coleção.
"""

import asyncio

import structlog
from fastapi import APIRouter, Query, WebSocket, status

from gestao_juridica.core.container import Container
from gestao_juridica.core.dependencies import resolve_user
from gestao_juridica.core.exceptions import AuthenticationError, CRMException
from gestao_juridica.db.store import Snapshot
from gestao_juridica.services.realtime_service import RealtimeService, serialize_snapshots

logger = structlog.get_logger()

router = APIRouter(prefix="/ws", tags=["Tempo real"])


async def _aguardar_desconexao(websocket: WebSocket) -> None:
    """Consome mensagens do cliente até ele desconectar."""
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


@router.websocket("/{collection}")
async def assinar_colecao(
    websocket: WebSocket,
    collection: str,
    token: str | None = Query(None),
) -> None:
    """
    Assina uma coleção do escritório.

    Token ausente, inválido ou sem permissão de leitura encerra a conexão
    com código 1008 antes do aceite. A assinatura é cancelada quando o
    cliente desconecta.
    """
    container: Container = websocket.app.state.container

    try:
        if not token:
            raise AuthenticationError("Token de autenticação não fornecido")
        user = await resolve_user(token, container)
        service = RealtimeService(container.store, user)
        service.filtros(collection)
    except CRMException as e:
        logger.warning("Assinatura recusada", collection=collection, code=e.code)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason=e.message)
        return

    await websocket.accept()

    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[list[Snapshot]] = asyncio.Queue()

    # Listeners do Firestore rodam em outra thread
    def on_change(snapshots: list[Snapshot]) -> None:
        loop.call_soon_threadsafe(queue.put_nowait, snapshots)

    subscription = service.assinar(collection, on_change)
    desconexao = asyncio.create_task(_aguardar_desconexao(websocket))

    try:
        while True:
            proximo = asyncio.create_task(queue.get())
            done, _ = await asyncio.wait(
                {proximo, desconexao},
                return_when=asyncio.FIRST_COMPLETED,
            )
            if desconexao in done:
                proximo.cancel()
                break
            await websocket.send_json(serialize_snapshots(proximo.result()))
    finally:
        subscription.unsubscribe()
        desconexao.cancel()
        logger.info("Assinatura encerrada", collection=collection, uid=user.id)
