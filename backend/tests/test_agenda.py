"""
Testes da agenda.
"""
import pytest
from httpx import AsyncClient


async def criar_evento(client: AsyncClient, headers: dict, **overrides) -> dict:
    payload = {
        "title": "Audiência de conciliação",
        "date": "2025-04-10T14:00:00Z",
        "type": "audiencia",
        **overrides,
    }
    response = await client.post("/api/v1/agenda", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.mark.asyncio
async def test_create_evento(client: AsyncClient, auth_headers):
    evento = await criar_evento(client, auth_headers("lawyer"))

    assert evento["lawyerId"] == "lawyer-a"
    assert evento["status"] == "agendado"
    assert evento["officeId"] == "office_a"


@pytest.mark.asyncio
async def test_secretary_cannot_create_evento(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/agenda",
        json={"title": "Reunião", "date": "2025-04-10T14:00:00Z", "type": "reuniao"},
        headers=auth_headers("secretary"),
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_evento_with_unknown_process(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/agenda",
        json={"title": "Prazo", "date": "2025-04-10T14:00:00Z", "type": "prazo", "processId": "nope"},
        headers=auth_headers(),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_by_period(client: AsyncClient, auth_headers):
    headers = auth_headers("lawyer")
    await criar_evento(client, headers, title="Maio", date="2025-05-02T09:00:00Z")
    await criar_evento(client, headers, title="Abril", date="2025-04-02T09:00:00Z")
    await criar_evento(client, headers, title="Junho", date="2025-06-02T09:00:00Z")

    response = await client.get("/api/v1/agenda", headers=headers)
    assert [e["title"] for e in response.json()["data"]] == ["Abril", "Maio", "Junho"]

    response = await client.get(
        "/api/v1/agenda",
        params={"inicio": "2025-04-15T00:00:00", "fim": "2025-05-31T23:59:59"},
        headers=auth_headers("secretary"),
    )
    assert [e["title"] for e in response.json()["data"]] == ["Maio"]


@pytest.mark.asyncio
async def test_status_and_delete_follow_responsible_lawyer(client: AsyncClient, auth_headers):
    evento = await criar_evento(client, auth_headers("lawyer"))
    url = f"/api/v1/agenda/{evento['id']}"

    response = await client.patch(f"{url}/status", json={"status": "confirmado"}, headers=auth_headers("lawyer2"))
    assert response.status_code == 403

    response = await client.patch(f"{url}/status", json={"status": "confirmado"}, headers=auth_headers("secretary"))
    assert response.json()["data"]["status"] == "confirmado"

    response = await client.delete(url, headers=auth_headers("lawyer2"))
    assert response.status_code == 403

    response = await client.delete(url, headers=auth_headers("lawyer"))
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_evento_from_other_office(client: AsyncClient, auth_headers):
    evento = await criar_evento(client, auth_headers("master_b"))

    response = await client.patch(
        f"/api/v1/agenda/{evento['id']}/status",
        json={"status": "cancelado"},
        headers=auth_headers(),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_master_schedules_for_lawyer(client: AsyncClient, auth_headers):
    evento = await criar_evento(client, auth_headers(), lawyerId="lawyer2-a")
    url = f"/api/v1/agenda/{evento['id']}"

    assert evento["lawyerId"] == "lawyer2-a"

    response = await client.patch(f"{url}/status", json={"status": "confirmado"}, headers=auth_headers("lawyer2"))
    assert response.status_code == 200

    response = await client.delete(url, headers=auth_headers("lawyer"))
    assert response.status_code == 403

    response = await client.delete(url, headers=auth_headers("lawyer2"))
    assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "lawyer_id, status_code",
    [("master-b", 404), ("nao-existe", 404), ("secretary-a", 400)],
)
async def test_invalid_event_responsible(client: AsyncClient, auth_headers, lawyer_id: str, status_code: int):
    response = await client.post(
        "/api/v1/agenda",
        json={
            "title": "Audiência",
            "date": "2025-04-10T14:00:00Z",
            "type": "audiencia",
            "lawyerId": lawyer_id,
        },
        headers=auth_headers(),
    )
    assert response.status_code == status_code

    response = await client.get("/api/v1/agenda", headers=auth_headers())
    assert response.json()["data"] == []
