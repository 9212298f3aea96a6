"""Health endpoint smoke test."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_healthcheck_returns_ok(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "PetShop API"
    assert payload["timestamp"]


async def test_responses_carry_request_id_and_security_headers(
    client: AsyncClient,
) -> None:
    response = await client.get("/api/health")
    assert response.headers.get("X-Request-ID")
    assert response.headers.get("X-Content-Type-Options") == "nosniff"
