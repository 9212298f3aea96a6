"""Integration tests for pet APIs."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from conftest import auth, register_and_login_account

pytestmark = pytest.mark.asyncio


async def test_create_and_fetch_pet(client: AsyncClient, account_token: str) -> None:
    created = await client.post(
        "/api/pets", json={"nome": "Rex", "tipo": "Cachorro"}, headers=auth(account_token)
    )
    assert created.status_code == 201
    pet_id = created.json()["data"]["idPet"]

    fetched = await client.get(f"/api/pets/{pet_id}", headers=auth(account_token))
    assert fetched.status_code == 200
    data = fetched.json()["data"]
    assert data["nome"] == "Rex"
    assert data["tipo"] == "Cachorro"
    assert data["consulta"] is None
    assert data["hotel"] is None
    assert data["idUsuario"] == "12345678901"
    assert data["usuario"]["email"] == "ana@example.com"


async def test_numeric_age_is_stored_as_text(
    client: AsyncClient, account_token: str
) -> None:
    created = await client.post(
        "/api/pets",
        json={"nome": "Mia", "tipo": "Gato", "idade": 3},
        headers=auth(account_token),
    )
    assert created.status_code == 201
    assert created.json()["data"]["idade"] == "3"


async def test_pet_validation_collects_every_field(
    client: AsyncClient, account_token: str
) -> None:
    response = await client.post(
        "/api/pets", json={"nome": "R"}, headers=auth(account_token)
    )
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Dados inválidos"
    fields = {error["field"] for error in body["errors"]}
    assert {"nome", "tipo"} <= fields


async def test_pets_are_scoped_to_their_owner(
    client: AsyncClient, account_token: str
) -> None:
    created = await client.post(
        "/api/pets", json={"nome": "Rex", "tipo": "Cachorro"}, headers=auth(account_token)
    )
    pet_id = created.json()["data"]["idPet"]

    other_token = await register_and_login_account(
        client, cpf="98765432100", email="bia@example.com", name="Bia"
    )
    assert (
        await client.get(f"/api/pets/{pet_id}", headers=auth(other_token))
    ).status_code == 404
    assert (
        await client.put(
            f"/api/pets/{pet_id}", json={"nome": "Max"}, headers=auth(other_token)
        )
    ).status_code == 404
    assert (
        await client.delete(f"/api/pets/{pet_id}", headers=auth(other_token))
    ).status_code == 404

    mine = await client.get("/api/pets/my-pets", headers=auth(other_token))
    assert mine.json()["data"] == []


async def test_update_and_delete_pet(client: AsyncClient, account_token: str) -> None:
    created = await client.post(
        "/api/pets", json={"nome": "Rex", "tipo": "Cachorro"}, headers=auth(account_token)
    )
    pet_id = created.json()["data"]["idPet"]

    updated = await client.put(
        f"/api/pets/{pet_id}",
        json={"raca": "Vira-lata", "idade": "2 anos"},
        headers=auth(account_token),
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["raca"] == "Vira-lata"
    assert updated.json()["data"]["nome"] == "Rex"

    deleted = await client.delete(f"/api/pets/{pet_id}", headers=auth(account_token))
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Pet excluído com sucesso"

    missing = await client.get(f"/api/pets/{pet_id}", headers=auth(account_token))
    assert missing.status_code == 404
    assert missing.json()["message"] == "Pet não encontrado"


async def test_book_consultation_and_boarding(
    client: AsyncClient, account_token: str
) -> None:
    created = await client.post(
        "/api/pets", json={"nome": "Rex", "tipo": "Cachorro"}, headers=auth(account_token)
    )
    pet_id = created.json()["data"]["idPet"]

    consult = await client.post(
        "/api/pets/agendar",
        json={"petId": pet_id, "tipoServico": "consulta", "data": "2030-05-01T10:00:00Z"},
        headers=auth(account_token),
    )
    assert consult.status_code == 200
    assert consult.json()["message"] == "Consulta agendada com sucesso"
    assert consult.json()["data"]["consulta"].startswith("2030-05-01T10:00:00")

    hotel = await client.post(
        "/api/pets/agendar",
        json={"petId": pet_id, "tipoServico": "hotel", "data": "2030-06-01T08:00:00Z"},
        headers=auth(account_token),
    )
    assert hotel.json()["message"] == "Hotel agendado com sucesso"
    assert hotel.json()["data"]["hotel"].startswith("2030-06-01T08:00:00")

    invalid = await client.post(
        "/api/pets/agendar",
        json={"petId": pet_id, "tipoServico": "banho", "data": "2030-06-01T08:00:00Z"},
        headers=auth(account_token),
    )
    assert invalid.status_code == 400


async def test_staff_lists_and_opens_any_pet(
    client: AsyncClient, account_token: str, master_token: str
) -> None:
    created = await client.post(
        "/api/pets", json={"nome": "Rex", "tipo": "Cachorro"}, headers=auth(account_token)
    )
    pet_id = created.json()["data"]["idPet"]

    listing = await client.get("/api/pets/funcionario/all", headers=auth(master_token))
    assert listing.status_code == 200
    assert [pet["idPet"] for pet in listing.json()["data"]] == [pet_id]

    detail = await client.get(f"/api/pets/{pet_id}", headers=auth(master_token))
    assert detail.status_code == 200

    denied = await client.get("/api/pets/funcionario/all", headers=auth(account_token))
    assert denied.status_code == 403


async def test_staff_cannot_register_pets(
    client: AsyncClient, master_token: str
) -> None:
    response = await client.post(
        "/api/pets", json={"nome": "Rex", "tipo": "Cachorro"}, headers=auth(master_token)
    )
    assert response.status_code == 403
