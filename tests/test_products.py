"""Product catalog and store tests."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest
from httpx import AsyncClient
from sqlalchemy import delete

from conftest import auth, register_and_login_staff
from petshop.models.staff import Staff

pytestmark = pytest.mark.asyncio


def _product(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "nome": "Ração Premium",
        "descricao": "Ração seca para cães adultos",
        "preco": 129.9,
        "tipo": "Cachorro",
        "estoque": 10,
    }
    payload.update(overrides)
    return payload


async def test_catalog_is_public_and_filterable(
    client: AsyncClient, master_token: str
) -> None:
    store = await client.post(
        "/api/lojas",
        json={"nome": "Loja Centro", "cep": "01001000", "numero": "100"},
        headers=auth(master_token),
    )
    assert store.status_code == 201
    store_id = store.json()["data"]["idLoja"]

    dog = await client.post(
        "/api/produtos", json=_product(idLoja=store_id), headers=auth(master_token)
    )
    assert dog.status_code == 201
    data = dog.json()["data"]
    assert Decimal(data["preco"]) == Decimal("129.90")
    assert data["funcionario"]["idFuncionario"] == "master"
    assert data["loja"]["nome"] == "Loja Centro"

    await client.post(
        "/api/produtos",
        json=_product(nome="Arranhador", tipo="Gato", descricao="Arranhador de sisal"),
        headers=auth(master_token),
    )

    listing = await client.get("/api/produtos")
    assert listing.status_code == 200
    assert len(listing.json()["data"]) == 2

    cats = await client.get("/api/produtos/tipo/Gato")
    assert [row["nome"] for row in cats.json()["data"]] == ["Arranhador"]

    unknown_type = await client.get("/api/produtos/tipo/Dragao")
    assert unknown_type.status_code == 400

    detail = await client.get(f"/api/produtos/{data['idPro']}")
    assert detail.json()["data"]["nome"] == "Ração Premium"

    stores = await client.get("/api/lojas")
    assert [row["nome"] for row in stores.json()["data"]] == ["Loja Centro"]


async def test_product_validation_errors(
    client: AsyncClient, master_token: str
) -> None:
    response = await client.post(
        "/api/produtos",
        json={"nome": "X", "descricao": "curta", "preco": -1, "tipo": "Dragao"},
        headers=auth(master_token),
    )
    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"nome", "descricao", "preco", "tipo"} <= fields


async def test_create_product_with_missing_store(
    client: AsyncClient, master_token: str
) -> None:
    response = await client.post(
        "/api/produtos", json=_product(idLoja=999), headers=auth(master_token)
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Loja não encontrada"


async def test_only_creator_or_elevated_staff_edit_products(
    client: AsyncClient, master_token: str
) -> None:
    creator_token = await register_and_login_staff(
        client, staff_id="creator", email="creator@example.com", token=master_token
    )
    outsider_token = await register_and_login_staff(
        client, staff_id="outsider", email="outsider@example.com", token=master_token
    )

    created = await client.post(
        "/api/produtos", json=_product(), headers=auth(creator_token)
    )
    product_id = created.json()["data"]["idPro"]

    forbidden_update = await client.put(
        f"/api/produtos/{product_id}",
        json={"preco": 99.9},
        headers=auth(outsider_token),
    )
    assert forbidden_update.status_code == 403
    forbidden_delete = await client.delete(
        f"/api/produtos/{product_id}", headers=auth(outsider_token)
    )
    assert forbidden_delete.status_code == 403

    own_update = await client.put(
        f"/api/produtos/{product_id}",
        json={"estoque": 3},
        headers=auth(creator_token),
    )
    assert own_update.status_code == 200
    assert own_update.json()["data"]["estoque"] == 3

    master_update = await client.put(
        f"/api/produtos/{product_id}",
        json={"preco": 99.9},
        headers=auth(master_token),
    )
    assert Decimal(master_update.json()["data"]["preco"]) == Decimal("99.90")

    deleted = await client.delete(
        f"/api/produtos/{product_id}", headers=auth(master_token)
    )
    assert deleted.status_code == 200
    assert (await client.get(f"/api/produtos/{product_id}")).status_code == 404


async def test_accounts_cannot_manage_catalog(
    client: AsyncClient, account_token: str
) -> None:
    response = await client.post(
        "/api/produtos", json=_product(), headers=auth(account_token)
    )
    assert response.status_code == 403


async def test_only_elevated_staff_open_stores(
    client: AsyncClient, master_token: str
) -> None:
    clerk_token = await register_and_login_staff(
        client, staff_id="clerk", email="clerk@example.com", token=master_token
    )
    response = await client.post(
        "/api/lojas", json={"nome": "Loja Norte"}, headers=auth(clerk_token)
    )
    assert response.status_code == 403


async def test_removed_staff_member_gets_not_found(
    app_context: dict[str, Any], master_token: str
) -> None:
    client: AsyncClient = app_context["client"]
    created = await client.post(
        "/api/produtos", json=_product(), headers=auth(master_token)
    )
    product_id = created.json()["data"]["idPro"]
    manager_token = await register_and_login_staff(
        client,
        staff_id="gerente",
        email="gerente@example.com",
        role="Gerente",
        token=master_token,
    )
    async with app_context["database"].session() as session:
        await session.execute(delete(Staff).where(Staff.staff_id == "gerente"))
        await session.commit()

    update = await client.put(
        f"/api/produtos/{product_id}",
        json={"estoque": 1},
        headers=auth(manager_token),
    )
    assert update.status_code == 404
    assert update.json()["message"] == "Funcionário não encontrado"

    removal = await client.delete(
        f"/api/produtos/{product_id}", headers=auth(manager_token)
    )
    assert removal.status_code == 404
    assert removal.json()["message"] == "Funcionário não encontrado"

    creation = await client.post(
        "/api/produtos", json=_product(), headers=auth(manager_token)
    )
    assert creation.status_code == 404
    assert creation.json()["message"] == "Funcionário não encontrado"


async def test_missing_product_is_reported_before_missing_staff(
    app_context: dict[str, Any], master_token: str
) -> None:
    client: AsyncClient = app_context["client"]
    manager_token = await register_and_login_staff(
        client,
        staff_id="gerente",
        email="gerente@example.com",
        role="Gerente",
        token=master_token,
    )
    async with app_context["database"].session() as session:
        await session.execute(delete(Staff).where(Staff.staff_id == "gerente"))
        await session.commit()

    update = await client.put(
        "/api/produtos/999", json={"estoque": 1}, headers=auth(manager_token)
    )
    assert update.status_code == 404
    assert update.json()["message"] == "Produto não encontrado"

    removal = await client.delete("/api/produtos/999", headers=auth(manager_token))
    assert removal.status_code == 404
    assert removal.json()["message"] == "Produto não encontrado"


async def test_accounts_cannot_edit_products(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    created = await client.post(
        "/api/produtos", json=_product(), headers=auth(master_token)
    )
    product_id = created.json()["data"]["idPro"]

    update = await client.put(
        f"/api/produtos/{product_id}",
        json={"estoque": 1},
        headers=auth(account_token),
    )
    assert update.status_code == 403
    removal = await client.delete(
        f"/api/produtos/{product_id}", headers=auth(account_token)
    )
    assert removal.status_code == 403
