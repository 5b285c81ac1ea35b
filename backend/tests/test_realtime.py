"""
Testes das assinaturas em tempo real (service e WebSocket).
"""
import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from gestao_juridica.core.exceptions import InsufficientPermissionsError, ResourceNotFoundError
from gestao_juridica.core.security import create_access_token
from gestao_juridica.db.collections import COLLECTION_CLIENTS, COLLECTION_PROCESSES
from gestao_juridica.services.realtime_service import RealtimeService

from conftest import OFFICE_A, OFFICE_B, USERS


def processo(office_id: str, owner: str, collaborators: list[str], numero: str) -> dict:
    return {
        "officeId": office_id,
        "processNumber": numero,
        "status": "em_andamento",
        "ownerId": owner,
        "collaboratorIds": collaborators,
        "movements": [],
    }


# === Service ===

@pytest.mark.asyncio
async def test_subscription_is_scoped_to_office(store):
    await store.add(COLLECTION_CLIENTS, {"officeId": OFFICE_A, "fullName": "Cliente A"})
    await store.add(COLLECTION_CLIENTS, {"officeId": OFFICE_B, "fullName": "Cliente B"})
    received: list[list] = []

    subscription = RealtimeService(store, USERS["secretary"]).assinar(COLLECTION_CLIENTS, received.append)
    await store.add(COLLECTION_CLIENTS, {"officeId": OFFICE_A, "fullName": "Cliente A2"})
    await store.add(COLLECTION_CLIENTS, {"officeId": OFFICE_B, "fullName": "Cliente B2"})
    subscription.unsubscribe()

    assert [sorted(s.data["fullName"] for s in snaps) for snaps in received] == [
        ["Cliente A"],
        ["Cliente A", "Cliente A2"],
        ["Cliente A", "Cliente A2"],
    ]
    assert store.subscription_count == 0


@pytest.mark.asyncio
async def test_lawyer_process_subscription_follows_collaborators(store):
    await store.add(COLLECTION_PROCESSES, processo(OFFICE_A, "lawyer-a", ["lawyer-a"], "1"))
    await store.add(COLLECTION_PROCESSES, processo(OFFICE_A, "lawyer2-a", ["lawyer2-a"], "2"))
    await store.add(COLLECTION_PROCESSES, processo(OFFICE_B, "master-b", ["lawyer-a"], "3"))
    received: list[list] = []

    subscription = RealtimeService(store, USERS["lawyer"]).assinar(COLLECTION_PROCESSES, received.append)

    assert [s.data["processNumber"] for s in received[-1]] == ["1"]
    subscription.unsubscribe()


@pytest.mark.asyncio
async def test_subscription_rules(store):
    with pytest.raises(ResourceNotFoundError):
        RealtimeService(store, USERS["master"]).filtros("offices")

    with pytest.raises(InsufficientPermissionsError):
        RealtimeService(store, USERS["lawyer"]).filtros("financial_tasks")

    assert store.subscription_count == 0


# === WebSocket ===

@pytest.fixture
def ws_client(app) -> TestClient:
    return TestClient(app)


def token_for(settings, role: str) -> str:
    return create_access_token(USERS[role].id, settings=settings)


def test_websocket_without_token_is_rejected(ws_client: TestClient):
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with ws_client.websocket_connect("/api/v1/ws/clients"):
            pass

    assert exc_info.value.code == 1008


def test_websocket_forbidden_collection_is_rejected(ws_client: TestClient, settings):
    url = f"/api/v1/ws/financial_tasks?token={token_for(settings, 'lawyer')}"

    with pytest.raises(WebSocketDisconnect) as exc_info:
        with ws_client.websocket_connect(url):
            pass

    assert exc_info.value.code == 1008


def test_websocket_streams_changes(ws_client: TestClient, settings, auth_headers, store):
    url = f"/api/v1/ws/clients?token={token_for(settings, 'secretary')}"

    with ws_client.websocket_connect(url) as websocket:
        assert websocket.receive_json() == []

        response = ws_client.post(
            "/api/v1/clientes",
            json={"fullName": "João da Silva", "document": "123.456.789-01"},
            headers=auth_headers("lawyer"),
        )
        assert response.status_code == 201

        snapshot = websocket.receive_json()
        assert [c["fullName"] for c in snapshot] == ["João da Silva"]
        assert snapshot[0]["id"] == response.json()["data"]["id"]
