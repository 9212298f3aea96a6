"""Test fixtures for the pet shop API."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from petshop.api.deps import get_viacep_client
from petshop.core.config import get_settings
from petshop.db.session import Database
from petshop.integrations.viacep_client import ViaCepClient
from petshop.main import create_app

MASTER_PASSWORD = "Sup3rPass!"
ACCOUNT_PASSWORD = "123456"

VIACEP_ANSWERS: dict[str, dict[str, Any]] = {
    "01001000": {
        "cep": "01001-000",
        "logradouro": "Praça da Sé",
        "bairro": "Sé",
        "localidade": "São Paulo",
        "uf": "SP",
    },
    "99999999": {"erro": True},
}


def _viacep_handler(request: httpx.Request) -> httpx.Response:
    cep = request.url.path.split("/")[2]
    if cep == "50000000":
        return httpx.Response(503, text="unavailable")
    return httpx.Response(200, json=VIACEP_ANSWERS.get(cep, {"erro": True}))


@pytest.fixture()
def db_url(tmp_path: Path) -> str:
    """Provide a fresh SQLite database URL for each test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest_asyncio.fixture()
async def database(db_url: str) -> AsyncIterator[Database]:
    get_settings.cache_clear()
    db = Database(db_url)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture()
def viacep_calls() -> list[str]:
    return []


@pytest_asyncio.fixture()
async def app_context(
    database: Database, db_url: str, viacep_calls: list[str]
) -> AsyncIterator[dict[str, Any]]:
    """Yield an async client bound to an app on the temporary database."""
    settings = get_settings().model_copy(update={"database_url": db_url})
    app = create_app(settings, database=database)

    def handler(request: httpx.Request) -> httpx.Response:
        viacep_calls.append(str(request.url))
        return _viacep_handler(request)

    stub_client = ViaCepClient(
        "https://viacep.test", transport=httpx.MockTransport(handler)
    )
    app.dependency_overrides[get_viacep_client] = lambda: stub_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield {"app": app, "client": client, "database": database}


@pytest.fixture()
def client(app_context: dict[str, Any]) -> AsyncClient:
    return app_context["client"]


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def register_and_login_account(
    client: AsyncClient,
    *,
    cpf: str = "12345678901",
    email: str = "ana@example.com",
    name: str = "Ana",
    **extra: Any,
) -> str:
    payload = {"cpf": cpf, "nome": name, "email": email, "senha": ACCOUNT_PASSWORD}
    payload.update(extra)
    response = await client.post("/api/usuarios/register", json=payload)
    assert response.status_code == 201, response.text
    login = await client.post(
        "/api/usuarios/login", json={"email": email, "senha": ACCOUNT_PASSWORD}
    )
    assert login.status_code == 200, login.text
    return login.json()["data"]["token"]


async def register_and_login_staff(
    client: AsyncClient,
    *,
    staff_id: str,
    email: str,
    role: str = "Default",
    token: str | None = None,
    password: str = MASTER_PASSWORD,
) -> str:
    payload = {
        "idFuncionario": staff_id,
        "nome": "Sam",
        "sobrenome": "Staff",
        "email": email,
        "senha": password,
        "funcao": role,
    }
    headers = auth(token) if token else None
    response = await client.post(
        "/api/funcionarios/register", json=payload, headers=headers
    )
    assert response.status_code == 201, response.text
    login = await client.post(
        "/api/funcionarios/login", json={"email": email, "senha": password}
    )
    assert login.status_code == 200, login.text
    return login.json()["data"]["token"]


@pytest_asyncio.fixture()
async def master_token(client: AsyncClient) -> str:
    """Bootstrap the first staff member as Master."""
    return await register_and_login_staff(
        client, staff_id="master", email="master@example.com", role="Master"
    )


@pytest_asyncio.fixture()
async def account_token(client: AsyncClient) -> str:
    return await register_and_login_account(client)
