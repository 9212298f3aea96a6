"""Back-office report tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient

from conftest import auth, register_and_login_account

pytestmark = pytest.mark.asyncio


async def _pet(client: AsyncClient, token: str, name: str, species: str) -> int:
    response = await client.post(
        "/api/pets", json={"nome": name, "tipo": species}, headers=auth(token)
    )
    return response.json()["data"]["idPet"]


async def _schedule(
    client: AsyncClient, token: str, pet_id: int, kind: str, days: int
) -> None:
    when = (datetime.now(UTC) + timedelta(days=days)).isoformat()
    response = await client.post(
        "/api/pets/agendar",
        json={"petId": pet_id, "tipoServico": kind, "data": when},
        headers=auth(token),
    )
    assert response.status_code == 200


async def test_dashboard_totals(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    rex = await _pet(client, account_token, "Rex", "Cachorro")
    mia = await _pet(client, account_token, "Mia", "Gato")
    await _schedule(client, account_token, rex, "consulta", 2)
    await _schedule(client, account_token, mia, "hotel", 20)

    response = await client.get("/api/relatorios/dashboard", headers=auth(master_token))
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["totais"] == {
        "usuarios": 1,
        "pets": 2,
        "produtos": 0,
        "funcionarios": 1,
        "enderecos": 0,
    }
    assert data["logados"] == {"usuarios": 1, "funcionarios": 1}
    assert data["agendamentosProximos"] == {"consultas": 1, "hotel": 0}


async def test_upcoming_visits_cover_thirty_days(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    rex = await _pet(client, account_token, "Rex", "Cachorro")
    mia = await _pet(client, account_token, "Mia", "Gato")
    await _schedule(client, account_token, rex, "consulta", 2)
    await _schedule(client, account_token, mia, "hotel", 20)
    await _schedule(client, account_token, mia, "consulta", 45)

    response = await client.get(
        "/api/relatorios/agendamentos", headers=auth(master_token)
    )
    data = response.json()["data"]
    assert [pet["nome"] for pet in data["consultas"]] == ["Rex"]
    assert [pet["nome"] for pet in data["hotel"]] == ["Mia"]
    assert data["periodo"]["inicio"] < data["periodo"]["fim"]


async def test_pets_grouped_by_type(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    await _pet(client, account_token, "Rex", "Cachorro")
    await _pet(client, account_token, "Bob", "Cachorro")
    await _pet(client, account_token, "Mia", "Gato")

    response = await client.get(
        "/api/relatorios/pets-por-tipo", headers=auth(master_token)
    )
    groups = response.json()["data"]
    assert [(group["tipo"], group["quantidade"]) for group in groups] == [
        ("Cachorro", 2),
        ("Gato", 1),
    ]
    assert [pet["nome"] for pet in groups[0]["pets"]] == ["Bob", "Rex"]


async def test_products_grouped_by_type(
    client: AsyncClient, master_token: str
) -> None:
    for name, species in (("Alpiste", "Passarinho"), ("Ração", "Gato"), ("Sachê", "Gato")):
        await client.post(
            "/api/produtos",
            json={
                "nome": name,
                "descricao": "Produto de teste para relatório",
                "preco": "10.00",
                "tipo": species,
            },
            headers=auth(master_token),
        )

    response = await client.get(
        "/api/relatorios/produtos-por-tipo", headers=auth(master_token)
    )
    groups = response.json()["data"]
    assert [(group["tipo"], group["quantidade"]) for group in groups] == [
        ("Gato", 2),
        ("Passarinho", 1),
    ]


async def test_occupants_by_address(
    client: AsyncClient, master_token: str
) -> None:
    await register_and_login_account(client, cep="01001000")
    await register_and_login_account(
        client, cpf="98765432100", email="bia@example.com", name="Bia", cep="01001000"
    )

    response = await client.get(
        "/api/relatorios/usuarios-por-endereco", headers=auth(master_token)
    )
    rows = response.json()["data"]
    assert len(rows) == 1
    assert rows[0]["endereco"]["cep"] == "01001000"
    assert rows[0]["totalUsuarios"] == 2
    assert rows[0]["totalFuncionarios"] == 0


async def test_reports_are_staff_only(
    client: AsyncClient, account_token: str
) -> None:
    response = await client.get("/api/relatorios/dashboard", headers=auth(account_token))
    assert response.status_code == 403
    anonymous = await client.get("/api/relatorios/dashboard")
    assert anonymous.status_code == 401
