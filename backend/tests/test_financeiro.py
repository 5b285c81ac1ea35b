"""
Testes do financeiro e dos recibos.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient


@pytest_asyncio.fixture
async def cliente_id(store) -> str:
    return await store.add(
        "clients",
        {"officeId": "office_a", "fullName": "Maria Oliveira", "document": "98765432100"},
    )


async def criar_lancamento(client: AsyncClient, headers: dict, **overrides) -> dict:
    payload = {
        "title": "Honorários contratuais",
        "type": "honorarios",
        "dueDate": "2025-03-01T00:00:00Z",
        "value": 2500.0,
        **overrides,
    }
    response = await client.post("/api/v1/financeiro", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.mark.asyncio
async def test_create_lancamento(client: AsyncClient, auth_headers, cliente_id):
    lancamento = await criar_lancamento(client, auth_headers(), clientId=cliente_id)

    assert lancamento["status"] == "pendente"
    assert lancamento["createdBy"] == "master-a"
    assert lancamento["clientId"] == cliente_id
    assert lancamento.get("paymentDate") is None


@pytest.mark.asyncio
async def test_lancamento_inherits_process_data(client: AsyncClient, auth_headers, cliente_id, store):
    processo_id = await store.add(
        "processes",
        {
            "officeId": "office_a",
            "processNumber": "0005555-11.2024.8.26.0100",
            "clientId": cliente_id,
            "ownerId": "master-a",
            "collaboratorIds": ["master-a"],
        },
    )

    lancamento = await criar_lancamento(client, auth_headers(), processId=processo_id)

    assert lancamento["processNumber"] == "0005555-11.2024.8.26.0100"
    assert lancamento["clientId"] == cliente_id


@pytest.mark.asyncio
async def test_negative_value_is_rejected(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/financeiro",
        json={"title": "Custas", "type": "custas", "dueDate": "2025-03-01", "value": -1},
        headers=auth_headers(),
    )
    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("role,expected", [("master", 200), ("secretary", 200), ("lawyer", 403)])
async def test_list_lancamentos_by_role(client: AsyncClient, auth_headers, role: str, expected: int):
    await criar_lancamento(client, auth_headers())

    response = await client.get("/api/v1/financeiro", headers=auth_headers(role))
    assert response.status_code == expected


@pytest.mark.asyncio
async def test_only_master_creates_lancamento(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/financeiro",
        json={"title": "Guia", "type": "guia", "dueDate": "2025-03-01T00:00:00Z", "value": 10},
        headers=auth_headers("secretary"),
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_pay_and_revert(client: AsyncClient, auth_headers):
    lancamento = await criar_lancamento(client, auth_headers())
    url = f"/api/v1/financeiro/{lancamento['id']}/status"

    response = await client.patch(url, json={"status": "pago"}, headers=auth_headers("secretary"))
    data = response.json()["data"]
    assert data["status"] == "pago"
    assert data["paymentDate"] is not None

    response = await client.get("/api/v1/financeiro?status=pago", headers=auth_headers())
    assert [t["id"] for t in response.json()["data"]] == [lancamento["id"]]

    response = await client.patch(url, json={"status": "pendente"}, headers=auth_headers())
    data = response.json()["data"]
    assert data["status"] == "pendente"
    assert data["paymentDate"] is None


@pytest.mark.asyncio
async def test_receipt(client: AsyncClient, auth_headers, cliente_id):
    lancamento = await criar_lancamento(client, auth_headers(), clientId=cliente_id)

    response = await client.get(
        f"/api/v1/financeiro/{lancamento['id']}/recibo",
        headers=auth_headers("secretary"),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["task"]["id"] == lancamento["id"]
    assert data["client"]["fullName"] == "Maria Oliveira"
    assert data["officeName"] == "Ana's Office"
    assert data["issuer"] == {"fullName": "Ana Souza", "email": "ana@escritorio-a.com", "oab": "SP 100.000"}
    assert data["process"] is None


@pytest.mark.asyncio
async def test_receipt_requires_client(client: AsyncClient, auth_headers):
    lancamento = await criar_lancamento(client, auth_headers())

    response = await client.get(f"/api/v1/financeiro/{lancamento['id']}/recibo", headers=auth_headers())

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Este lançamento não está vinculado a um cliente."


@pytest.mark.asyncio
async def test_lancamento_from_other_office(client: AsyncClient, auth_headers):
    lancamento = await criar_lancamento(client, auth_headers("master_b"))

    response = await client.delete(f"/api/v1/financeiro/{lancamento['id']}", headers=auth_headers())
    assert response.status_code == 404
