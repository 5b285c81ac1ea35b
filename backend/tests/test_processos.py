"""
Testes de processos: colaboradores, andamentos, documentos, chat e
migração de status.
"""
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient

from gestao_juridica.models.processo import Movimento
from gestao_juridica.repositories.processo_repository import ProcessoRepository

NUMERO = "0001234-56.2024.8.26.0100"


@pytest_asyncio.fixture
async def cliente_id(store) -> str:
    return await store.add(
        "clients",
        {"officeId": "office_a", "fullName": "Maria Oliveira", "document": "98765432100"},
    )


async def criar_processo(client: AsyncClient, headers: dict, cliente_id: str, numero: str = NUMERO) -> dict:
    response = await client.post(
        "/api/v1/processos",
        json={
            "processNumber": numero,
            "clientId": cliente_id,
            "court": "TJSP - 2ª Vara Cível",
            "actionType": "Indenização",
            "plaintiff": "Maria Oliveira",
            "defendant": "Empresa X",
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.mark.asyncio
async def test_create_processo(client: AsyncClient, auth_headers, cliente_id):
    processo = await criar_processo(client, auth_headers("lawyer"), cliente_id)

    assert processo["ownerId"] == "lawyer-a"
    assert processo["collaboratorIds"] == ["lawyer-a"]
    assert processo["clientName"] == "Maria Oliveira"
    assert processo["status"] == "a_distribuir"
    assert processo["representation"] == "plaintiff"
    assert processo["movements"] == []


@pytest.mark.asyncio
async def test_create_processo_unknown_client(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/processos",
        json={"processNumber": NUMERO, "clientId": "nope", "court": "TJSP", "actionType": "Cobrança"},
        headers=auth_headers(),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_duplicate_process_number(client: AsyncClient, auth_headers, cliente_id):
    await criar_processo(client, auth_headers(), cliente_id)

    response = await client.post(
        "/api/v1/processos",
        json={"processNumber": NUMERO, "clientId": cliente_id, "court": "TJSP", "actionType": "Cobrança"},
        headers=auth_headers(),
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_lawyer_sees_only_collaborating_processes(client: AsyncClient, auth_headers, cliente_id):
    processo = await criar_processo(client, auth_headers("lawyer"), cliente_id)

    response = await client.get("/api/v1/processos", headers=auth_headers("lawyer2"))
    assert response.json()["data"] == []

    response = await client.get(f"/api/v1/processos/{processo['id']}", headers=auth_headers("lawyer2"))
    assert response.status_code == 403

    for role in ("master", "secretary", "lawyer"):
        response = await client.get("/api/v1/processos", headers=auth_headers(role))
        assert [p["id"] for p in response.json()["data"]] == [processo["id"]]


@pytest.mark.asyncio
async def test_process_from_other_office_is_not_found(client: AsyncClient, auth_headers, cliente_id):
    processo = await criar_processo(client, auth_headers(), cliente_id)

    response = await client.get(f"/api/v1/processos/{processo['id']}", headers=auth_headers("master_b"))
    assert response.status_code == 404

    response = await client.get("/api/v1/processos", headers=auth_headers("master_b"))
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_collaborator_management(client: AsyncClient, auth_headers, cliente_id):
    owner = auth_headers("lawyer")
    processo = await criar_processo(client, owner, cliente_id)
    url = f"/api/v1/processos/{processo['id']}/colaboradores"

    response = await client.post(url, json={"userId": "lawyer2-a"}, headers=owner)
    assert response.status_code == 200
    assert response.json()["data"]["collaboratorIds"] == ["lawyer-a", "lawyer2-a"]

    # Repetir não duplica
    response = await client.post(url, json={"userId": "lawyer2-a"}, headers=owner)
    assert response.json()["data"]["collaboratorIds"] == ["lawyer-a", "lawyer2-a"]

    # Colaborador que não é o responsável não gerencia a lista
    response = await client.post(url, json={"userId": "secretary-a"}, headers=auth_headers("lawyer2"))
    assert response.status_code == 403

    response = await client.get(f"/api/v1/processos/{processo['id']}", headers=auth_headers("lawyer2"))
    assert response.status_code == 200

    response = await client.delete(f"{url}/lawyer2-a", headers=owner)
    assert response.json()["data"]["collaboratorIds"] == ["lawyer-a"]


@pytest.mark.asyncio
async def test_collaborator_must_belong_to_office(client: AsyncClient, auth_headers, cliente_id):
    processo = await criar_processo(client, auth_headers(), cliente_id)

    response = await client.post(
        f"/api/v1/processos/{processo['id']}/colaboradores",
        json={"userId": "master-b"},
        headers=auth_headers(),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_owner_cannot_be_removed(client: AsyncClient, auth_headers, cliente_id):
    processo = await criar_processo(client, auth_headers("lawyer"), cliente_id)

    response = await client.delete(
        f"/api/v1/processos/{processo['id']}/colaboradores/lawyer-a",
        headers=auth_headers("master"),
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BUSINESS_RULE_VIOLATION"


@pytest.mark.asyncio
async def test_update_and_delete_processo(client: AsyncClient, auth_headers, cliente_id):
    processo = await criar_processo(client, auth_headers("lawyer"), cliente_id)
    url = f"/api/v1/processos/{processo['id']}"

    response = await client.put(url, json={"status": "em_andamento"}, headers=auth_headers("lawyer"))
    assert response.json()["data"]["status"] == "em_andamento"

    response = await client.put(url, json={"status": "em_recurso"}, headers=auth_headers("secretary"))
    assert response.status_code == 403

    response = await client.delete(url, headers=auth_headers("lawyer"))
    assert response.status_code == 403

    response = await client.delete(url, headers=auth_headers("master"))
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_register_movement(client: AsyncClient, auth_headers, cliente_id):
    headers = auth_headers("lawyer")
    processo = await criar_processo(client, headers, cliente_id)

    response = await client.post(
        f"/api/v1/processos/{processo['id']}/andamentos",
        json={"date": "2025-01-10T10:00:00", "description": "Juntada de petição", "details": "Fls. 30"},
        headers=headers,
    )
    assert response.status_code == 201

    response = await client.get(f"/api/v1/processos/{processo['id']}", headers=headers)
    movements = response.json()["data"]["movements"]
    assert len(movements) == 1
    assert movements[0]["description"] == "Juntada de petição"


@pytest.mark.asyncio
async def test_identical_movement_is_not_duplicated(store, cliente_id):
    repo = ProcessoRepository(store, "office_a")
    processo = await repo.create({"processNumber": NUMERO, "ownerId": "lawyer-a", "collaboratorIds": ["lawyer-a"]})
    movimento = Movimento(
        date=datetime(2025, 1, 10, tzinfo=timezone.utc),
        description="Conclusão para despacho",
    )

    await repo.append_movement(processo.id, movimento)
    await repo.append_movement(processo.id, movimento)

    recarregado = await repo.get_by_id(processo.id)
    assert recarregado.movements == [movimento]
    assert recarregado.last_movement == movimento


@pytest.mark.asyncio
async def test_documents(client: AsyncClient, auth_headers, cliente_id, storage):
    headers = auth_headers("lawyer")
    processo = await criar_processo(client, headers, cliente_id)
    base = f"/api/v1/processos/{processo['id']}/documentos"

    response = await client.post(
        base,
        files={"file": ("inicial.pdf", b"%PDF-1.4 conteudo", "application/pdf")},
        headers=headers,
    )
    assert response.status_code == 201
    documento = response.json()["data"]
    assert documento["name"] == "inicial.pdf"
    assert documento["uploadedBy"] == "lawyer-a"
    assert documento["size"] == len(b"%PDF-1.4 conteudo")
    assert documento["path"] in storage.files

    response = await client.post(
        base,
        files={"file": ("x.pdf", b"x", "application/pdf")},
        headers=auth_headers("secretary"),
    )
    assert response.status_code == 403

    response = await client.get(base, headers=auth_headers("secretary"))
    assert [d["id"] for d in response.json()["data"]] == [documento["id"]]

    response = await client.get(f"{base}/{documento['id']}/url", headers=headers)
    assert response.json()["data"].startswith("https://storage.test/")

    response = await client.delete(f"{base}/{documento['id']}", headers=headers)
    assert response.status_code == 200
    assert storage.files == {}


@pytest.mark.asyncio
async def test_chat(client: AsyncClient, auth_headers, cliente_id):
    headers = auth_headers("lawyer")
    processo = await criar_processo(client, headers, cliente_id)
    url = f"/api/v1/processos/{processo['id']}/mensagens"

    response = await client.post(url, json={"text": "Audiência remarcada"}, headers=headers)
    assert response.status_code == 201
    assert response.json()["data"]["authorName"] == "Bruno Lima"

    response = await client.post(url, json={"text": "Ok"}, headers=auth_headers("secretary"))
    assert response.status_code == 403

    response = await client.get(url, headers=auth_headers("secretary"))
    assert [m["text"] for m in response.json()["data"]] == ["Audiência remarcada"]

    response = await client.get(url, headers=auth_headers("lawyer2"))
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_legacy_status_is_read_as_current_enum(client: AsyncClient, auth_headers, store):
    processo_id = await store.add(
        "processes",
        {"officeId": "office_a", "processNumber": NUMERO, "lawyerId": "lawyer-a", "status": "active"},
    )

    response = await client.get(f"/api/v1/processos/{processo_id}", headers=auth_headers())
    data = response.json()["data"]
    assert data["status"] == "em_andamento"
    assert data["ownerId"] == "lawyer-a"


@pytest.mark.asyncio
async def test_migrate_legacy_status(client: AsyncClient, auth_headers, store):
    for numero, status in (("1", "active"), ("2", "pending"), ("3", "archived"), ("4", "active"), ("5", "execucao")):
        await store.add(
            "processes",
            {"officeId": "office_a", "processNumber": f"0000{numero}", "ownerId": "lawyer-a", "status": status},
        )
    await store.add(
        "processes",
        {"officeId": "office_b", "processNumber": "00009", "ownerId": "master-b", "status": "active"},
    )

    response = await client.post("/api/v1/processos/migrar-status", headers=auth_headers("lawyer"))
    assert response.status_code == 403

    response = await client.post("/api/v1/processos/migrar-status", headers=auth_headers("master"))
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["migrated"] == 4
    assert data["byStatus"] == {"active": 2, "pending": 1, "archived": 1}

    raw = sorted(s.data["status"] for s in await store.query("processes"))
    assert raw == [
        "a_distribuir",
        "active",
        "arquivado_definitivo",
        "em_andamento",
        "em_andamento",
        "execucao",
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("campo", ["processNumber", "status"])
async def test_update_rejects_null_required_field(client: AsyncClient, auth_headers, cliente_id, campo: str):
    processo = await criar_processo(client, auth_headers(), cliente_id)

    response = await client.put(
        f"/api/v1/processos/{processo['id']}",
        json={campo: None, "court": "TJRJ"},
        headers=auth_headers(),
    )
    assert response.status_code == 422

    response = await client.get("/api/v1/processos", headers=auth_headers())
    assert response.status_code == 200
    [listado] = response.json()["data"]
    assert listado["processNumber"] == NUMERO
    assert listado["court"] == "TJSP - 2ª Vara Cível"
