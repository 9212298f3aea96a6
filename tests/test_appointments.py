"""Appointment booking and status lifecycle tests."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError

from conftest import auth, register_and_login_account
from petshop.models.appointment import Appointment, AppointmentStatus
from petshop.services import appointment_service

pytestmark = pytest.mark.asyncio

SLOT = "2030-03-10T14:00:00Z"


async def _setup(
    client: AsyncClient, master_token: str, account_token: str
) -> dict[str, Any]:
    service = await client.post(
        "/api/servicos",
        json={"nome": "Consulta", "preco": "150.00", "categoria": "Veterinario"},
        headers=auth(master_token),
    )
    pet = await client.post(
        "/api/pets", json={"nome": "Rex", "tipo": "Cachorro"}, headers=auth(account_token)
    )
    return {
        "service_id": service.json()["data"]["idServico"],
        "pet_id": pet.json()["data"]["idPet"],
    }


async def _book(
    client: AsyncClient, token: str, ids: dict[str, Any], **extra: Any
) -> Any:
    payload = {
        "dataHora": SLOT,
        "idPet": ids["pet_id"],
        "idServico": ids["service_id"],
        "observacoes": "Primeira consulta",
    }
    payload.update(extra)
    return await client.post("/api/agendamentos", json=payload, headers=auth(token))


async def test_book_appointment_returns_summaries(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    ids = await _setup(client, master_token, account_token)

    response = await _book(client, account_token, ids)
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "Agendado"
    assert data["pet"]["nome"] == "Rex"
    assert data["servico"]["nome"] == "Consulta"
    assert data["usuario"]["cpf"] == "12345678901"

    listing = await client.get(f"/api/servicos/{ids['service_id']}")
    assert [row["idAgendamento"] for row in listing.json()["data"]["agendamentos"]] == [
        data["idAgendamento"]
    ]
    counts = await client.get("/api/servicos")
    assert counts.json()["data"][0]["totalAgendamentos"] == 1


async def test_double_booking_rejected_until_first_is_canceled(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    ids = await _setup(client, master_token, account_token)
    first = await _book(client, account_token, ids)
    assert first.status_code == 201

    second = await _book(client, account_token, ids)
    assert second.status_code == 400
    assert second.json()["message"] == "Já existe um agendamento para este horário"

    canceled = await client.patch(
        f"/api/agendamentos/{first.json()['data']['idAgendamento']}/status",
        json={"status": "Cancelado"},
        headers=auth(master_token),
    )
    assert canceled.status_code == 200
    assert canceled.json()["data"]["status"] == "Cancelado"

    retry = await _book(client, account_token, ids)
    assert retry.status_code == 201


async def test_booking_guards(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    ids = await _setup(client, master_token, account_token)

    missing_pet = await _book(client, account_token, {**ids, "pet_id": 999})
    assert missing_pet.status_code == 404
    missing_service = await _book(client, account_token, {**ids, "service_id": 999})
    assert missing_service.status_code == 404

    other_token = await register_and_login_account(
        client, cpf="98765432100", email="bia@example.com", name="Bia"
    )
    not_owner = await _book(client, other_token, ids)
    assert not_owner.status_code == 403
    assert not_owner.json()["message"] == "Pet não pertence ao usuário"

    await client.delete(f"/api/servicos/{ids['service_id']}", headers=auth(master_token))
    inactive = await _book(client, account_token, ids)
    assert inactive.status_code == 400
    assert inactive.json()["message"] == "Serviço não está disponível"


async def test_staff_books_on_behalf_of_account(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    ids = await _setup(client, master_token, account_token)

    without_account = await _book(client, master_token, ids)
    assert without_account.status_code == 400

    on_behalf = await _book(client, master_token, ids, idUsuario="12345678901")
    assert on_behalf.status_code == 201
    assert on_behalf.json()["data"]["idUsuario"] == "12345678901"


async def test_service_with_active_booking_cannot_be_deleted(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    ids = await _setup(client, master_token, account_token)
    await _book(client, account_token, ids)

    response = await client.delete(
        f"/api/servicos/{ids['service_id']}", headers=auth(master_token)
    )
    assert response.status_code == 400
    detail = await client.get(f"/api/servicos/{ids['service_id']}")
    assert detail.json()["data"]["ativo"] is True


async def test_status_lifecycle(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    ids = await _setup(client, master_token, account_token)
    booked = await _book(client, account_token, ids)
    appointment_id = booked.json()["data"]["idAgendamento"]
    url = f"/api/agendamentos/{appointment_id}/status"

    skip = await client.patch(
        url, json={"status": "Concluido"}, headers=auth(master_token)
    )
    assert skip.status_code == 400

    for status in ("Confirmado", "EmAndamento", "Concluido"):
        response = await client.patch(
            url, json={"status": status}, headers=auth(master_token)
        )
        assert response.status_code == 200, response.text
        assert response.json()["data"]["status"] == status

    reopen = await client.patch(
        url, json={"status": "Agendado"}, headers=auth(master_token)
    )
    assert reopen.status_code == 400

    unknown = await client.patch(
        url, json={"status": "Perdido"}, headers=auth(master_token)
    )
    assert unknown.status_code == 400

    by_account = await client.patch(
        url, json={"status": "Cancelado"}, headers=auth(account_token)
    )
    assert by_account.status_code == 403

    missing = await client.patch(
        "/api/agendamentos/999/status",
        json={"status": "Confirmado"},
        headers=auth(master_token),
    )
    assert missing.status_code == 404


async def test_listing_is_scoped_for_accounts(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    ids = await _setup(client, master_token, account_token)
    booked = await _book(client, account_token, ids)
    appointment_id = booked.json()["data"]["idAgendamento"]

    other_token = await register_and_login_account(
        client, cpf="98765432100", email="bia@example.com", name="Bia"
    )
    assert (
        await client.get("/api/agendamentos", headers=auth(other_token))
    ).json()["data"] == []
    assert (
        await client.get(f"/api/agendamentos/{appointment_id}", headers=auth(other_token))
    ).status_code == 404

    mine = await client.get("/api/agendamentos", headers=auth(account_token))
    assert [row["idAgendamento"] for row in mine.json()["data"]] == [appointment_id]

    staff_filtered = await client.get(
        "/api/agendamentos",
        params={"usuario": "12345678901", "status": "Agendado"},
        headers=auth(master_token),
    )
    assert len(staff_filtered.json()["data"]) == 1
    none_confirmed = await client.get(
        "/api/agendamentos",
        params={"status": "Confirmado"},
        headers=auth(master_token),
    )
    assert none_confirmed.json()["data"] == []



async def test_staff_booking_for_unknown_account_is_forbidden(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    ids = await _setup(client, master_token, account_token)

    response = await _book(client, master_token, ids, idUsuario="00000000000")
    assert response.status_code == 403
    assert response.json()["message"] == "Pet não pertence ao usuário"


async def test_same_instant_in_another_offset_is_taken(
    client: AsyncClient, master_token: str, account_token: str
) -> None:
    ids = await _setup(client, master_token, account_token)
    assert (await _book(client, account_token, ids)).status_code == 201

    shifted = await _book(
        client, account_token, ids, dataHora="2030-03-10T11:00:00-03:00"
    )
    assert shifted.status_code == 400


async def test_concurrent_booking_is_caught_by_slot_index(
    client: AsyncClient,
    master_token: str,
    account_token: str,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    ids = await _setup(client, master_token, account_token)
    assert (await _book(client, account_token, ids)).status_code == 201

    async def slot_looks_free(*_args: Any, **_kwargs: Any) -> bool:
        return False

    monkeypatch.setattr(appointment_service, "_slot_taken", slot_looks_free)
    response = await _book(client, account_token, ids)
    assert response.status_code == 400
    assert response.json()["message"] == "Já existe um agendamento para este horário"


async def test_slot_index_only_covers_active_appointments(
    app_context: dict[str, Any], master_token: str, account_token: str
) -> None:
    ids = await _setup(app_context["client"], master_token, account_token)
    when = datetime.fromisoformat("2030-03-10T14:00:00+00:00")

    def row(status: AppointmentStatus) -> Appointment:
        return Appointment(
            scheduled_at=when,
            pet_id=ids["pet_id"],
            service_id=ids["service_id"],
            account_cpf="12345678901",
            status=status,
        )

    async with app_context["database"].session() as session:
        session.add(row(AppointmentStatus.CANCELED))
        session.add(row(AppointmentStatus.SCHEDULED))
        await session.commit()

        session.add(row(AppointmentStatus.CONFIRMED))
        with pytest.raises(IntegrityError):
            await session.commit()
        await session.rollback()

        session.add(row(AppointmentStatus.CANCELED))
        await session.commit()
