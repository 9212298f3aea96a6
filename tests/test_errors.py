"""Error envelope, exception mapping and log scrubbing tests."""

from __future__ import annotations

import logging
from typing import Any

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError

from petshop.security.logging_filters import REDACTED, SensitiveFilter, scrub

pytestmark = pytest.mark.asyncio


async def test_validation_errors_are_collected(client: AsyncClient) -> None:
    response = await client.post(
        "/api/usuarios/register",
        json={"cpf": "1", "nome": "A", "email": "not-an-email", "senha": "1"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "error"
    assert body["message"] == "Dados inválidos"
    fields = {error["field"] for error in body["errors"]}
    assert fields == {"cpf", "nome", "email", "senha"}
    assert all(error["message"] for error in body["errors"])


async def test_malformed_json_is_a_validation_error(client: AsyncClient) -> None:
    response = await client.post(
        "/api/usuarios/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Dados inválidos"


async def test_unknown_route_uses_error_envelope(client: AsyncClient) -> None:
    response = await client.get("/api/nada")
    assert response.status_code == 404
    assert response.json()["status"] == "error"


async def test_unhandled_error_returns_generic_500(
    app_context: dict[str, Any], caplog: pytest.LogCaptureFixture
) -> None:
    app = app_context["app"]
    client: AsyncClient = app_context["client"]

    async def boom() -> None:
        raise RuntimeError("database password is hunter2")

    app.add_api_route("/boom", boom)
    with caplog.at_level(logging.ERROR):
        response = await client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "status": "error",
        "message": "Erro interno do servidor",
        "errors": None,
    }
    assert "hunter2" not in response.text
    assert any(record.exc_info for record in caplog.records)


@pytest.mark.parametrize(
    ("driver_message", "status_code"),
    [
        ("UNIQUE constraint failed: accounts.email", 409),
        ("FOREIGN KEY constraint failed", 404),
        ("NOT NULL constraint failed: pets.name", 500),
    ],
)
async def test_integrity_errors_are_classified(
    app_context: dict[str, Any], driver_message: str, status_code: int
) -> None:
    app = app_context["app"]
    client: AsyncClient = app_context["client"]

    async def conflict() -> None:
        raise IntegrityError("INSERT ...", {}, Exception(driver_message))

    app.add_api_route("/conflict", conflict)
    response = await client.get("/conflict")
    assert response.status_code == status_code
    assert response.json()["status"] == "error"


def _record(msg: str, *args: Any) -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


async def test_sensitive_filter_scrubs_tokens_and_passwords() -> None:
    record = _record(
        "login %s with Authorization: Bearer abc.def.ghi", '{"senha": "123456"}'
    )
    assert SensitiveFilter().filter(record) is True
    message = record.getMessage()
    assert "abc.def.ghi" not in message
    assert "123456" not in message
    assert REDACTED in message

    assert scrub("token=xyz plain") == f"{REDACTED} plain"
