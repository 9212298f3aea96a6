"""Appointment booking and status lifecycle."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select

from petshop.core.errors import (
    BadRequestError,
    ForbiddenError,
    InvalidStatusTransition,
    NotFoundError,
    SlotUnavailableError,
)
from petshop.models.appointment import (
    ACTIVE_STATUSES,
    ALLOWED_STATUS_TRANSITIONS,
    Appointment,
    AppointmentStatus,
)
from petshop.models.pet import Pet
from petshop.models.service import Service
from petshop.schemas.appointment import AppointmentCreate
from petshop.services.pet_service import coerce_utc

logger = logging.getLogger(__name__)

_NOT_FOUND = "Agendamento não encontrado"


def _base_appointment_query() -> Select[tuple[Appointment]]:
    return select(Appointment).options(
        selectinload(Appointment.pet),
        selectinload(Appointment.service),
        selectinload(Appointment.account),
    )


def _is_unique_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return "unique" in message or "ux_appointments_active_slot" in message


async def _slot_taken(
    session: AsyncSession, *, service_id: int, scheduled_at: datetime
) -> bool:
    """Whether an active appointment already holds this service slot."""
    result = await session.execute(
        select(Appointment.id).where(
            Appointment.service_id == service_id,
            Appointment.scheduled_at == scheduled_at,
            Appointment.status.in_(list(ACTIVE_STATUSES)),
        )
    )
    return result.first() is not None


async def list_appointments(
    session: AsyncSession,
    *,
    account_cpf: str | None = None,
    status: AppointmentStatus | None = None,
) -> Sequence[Appointment]:
    """Return appointments in chronological order."""
    stmt = _base_appointment_query().order_by(
        Appointment.scheduled_at.asc(), Appointment.id.asc()
    )
    if account_cpf is not None:
        stmt = stmt.where(Appointment.account_cpf == account_cpf)
    if status is not None:
        stmt = stmt.where(Appointment.status == status)
    result = await session.execute(stmt)
    return result.scalars().all()


async def get_appointment(
    session: AsyncSession, *, appointment_id: int, account_cpf: str | None = None
) -> Appointment:
    """Return one appointment; other accounts' bookings are reported as missing."""
    stmt = _base_appointment_query().where(Appointment.id == appointment_id)
    if account_cpf is not None:
        stmt = stmt.where(Appointment.account_cpf == account_cpf)
    result = await session.execute(stmt)
    appointment = result.scalar_one_or_none()
    if appointment is None:
        raise NotFoundError(_NOT_FOUND)
    return appointment


async def create_appointment(
    session: AsyncSession, *, account_cpf: str, payload: AppointmentCreate
) -> Appointment:
    """Book a service for one of the account's pets.

    The slot pre-check gives a friendly error in the common case; the partial
    unique index on (service, time) for active statuses catches two requests
    racing past the pre-check, and that violation is reported the same way.
    """
    pet = await session.get(Pet, payload.pet_id)
    if pet is None:
        raise NotFoundError("Pet não encontrado")
    if pet.owner_cpf != account_cpf:
        raise ForbiddenError("Pet não pertence ao usuário")

    service = await session.get(Service, payload.service_id)
    if service is None:
        raise NotFoundError("Serviço não encontrado")
    if not service.active:
        raise BadRequestError("Serviço não está disponível")

    scheduled_at = coerce_utc(payload.scheduled_at)
    if await _slot_taken(session, service_id=service.id, scheduled_at=scheduled_at):
        raise SlotUnavailableError()

    appointment = Appointment(
        scheduled_at=scheduled_at,
        notes=payload.notes,
        pet_id=pet.id,
        service_id=service.id,
        account_cpf=account_cpf,
        status=AppointmentStatus.SCHEDULED,
    )
    session.add(appointment)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        if _is_unique_violation(exc):
            logger.info(
                "Concurrent booking rejected for service %s at %s",
                payload.service_id,
                scheduled_at.isoformat(),
            )
            raise SlotUnavailableError() from exc
        raise
    await session.refresh(appointment)
    await session.refresh(appointment, attribute_names=["pet", "service", "account"])
    logger.info(
        "Booked appointment %s for pet %s on service %s",
        appointment.id,
        pet.id,
        service.id,
    )
    return appointment


def validate_status_transition(
    current: AppointmentStatus, target: AppointmentStatus
) -> None:
    """Raise :class:`InvalidStatusTransition` unless ``target`` is reachable."""
    if target not in ALLOWED_STATUS_TRANSITIONS.get(current, frozenset()):
        raise InvalidStatusTransition(current.value, target.value)


async def update_status(
    session: AsyncSession, *, appointment_id: int, status: AppointmentStatus
) -> Appointment:
    appointment = await get_appointment(session, appointment_id=appointment_id)
    validate_status_transition(appointment.status, status)
    appointment.status = status
    await session.commit()
    await session.refresh(appointment)
    await session.refresh(appointment, attribute_names=["pet", "service", "account"])
    logger.info("Appointment %s moved to %s", appointment_id, status.value)
    return appointment
