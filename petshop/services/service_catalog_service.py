"""Bookable service catalog helpers."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from petshop.core.errors import BadRequestError, NotFoundError
from petshop.models.appointment import ACTIVE_STATUSES, Appointment
from petshop.models.service import Service, ServiceCategory
from petshop.models.staff import Staff
from petshop.schemas.service import ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)

_NOT_FOUND = "Serviço não encontrado"


async def _require_staff(session: AsyncSession, staff_id: str) -> None:
    if await session.get(Staff, staff_id) is None:
        raise NotFoundError("Funcionário não encontrado")


async def list_services(
    session: AsyncSession,
    *,
    category: ServiceCategory | None = None,
    active: bool | None = None,
) -> list[tuple[Service, int]]:
    """Return services, newest first, each paired with its appointment count."""
    stmt = (
        select(Service, func.count(Appointment.id))
        .outerjoin(Appointment, Appointment.service_id == Service.id)
        .options(selectinload(Service.created_by))
        .group_by(Service.id)
        .order_by(Service.created_at.desc(), Service.id.desc())
    )
    if category is not None:
        stmt = stmt.where(Service.category == category)
    if active is not None:
        stmt = stmt.where(Service.active == active)
    result = await session.execute(stmt)
    return [(service, int(count)) for service, count in result.all()]


async def get_service(session: AsyncSession, service_id: int) -> Service:
    """Return a service with its appointments, or raise 404."""
    result = await session.execute(
        select(Service)
        .options(
            selectinload(Service.created_by),
            selectinload(Service.appointments).selectinload(Appointment.pet),
            selectinload(Service.appointments).selectinload(Appointment.service),
            selectinload(Service.appointments).selectinload(Appointment.account),
        )
        .where(Service.id == service_id)
    )
    service = result.scalar_one_or_none()
    if service is None:
        raise NotFoundError(_NOT_FOUND)
    return service


async def create_service(
    session: AsyncSession, *, acting_staff_id: str, payload: ServiceCreate
) -> Service:
    """Add a service; it is credited to ``idFuncionario`` or the acting staff."""
    staff_id = payload.staff_id or acting_staff_id
    await _require_staff(session, staff_id)
    service = Service(
        name=payload.name,
        description=payload.description,
        price=payload.price,
        duration=payload.duration,
        category=payload.category,
        active=True,
        staff_id=staff_id,
    )
    session.add(service)
    await session.commit()
    await session.refresh(service)
    await session.refresh(service, attribute_names=["created_by"])
    logger.info("Created service %s (%s)", service.id, service.category.value)
    return service


async def update_service(
    session: AsyncSession, *, service_id: int, payload: ServiceUpdate
) -> Service:
    service = await session.get(Service, service_id)
    if service is None:
        raise NotFoundError(_NOT_FOUND)
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("staff_id") is not None:
        await _require_staff(session, changes["staff_id"])
    for field, value in changes.items():
        if value is None and field not in ("description", "duration"):
            continue
        setattr(service, field, value)
    await session.commit()
    await session.refresh(service)
    await session.refresh(service, attribute_names=["created_by"])
    return service


async def deactivate_service(session: AsyncSession, *, service_id: int) -> Service:
    """Soft-delete a service; refused while it still has active bookings."""
    service = await session.get(Service, service_id)
    if service is None:
        raise NotFoundError(_NOT_FOUND)
    active_bookings = await session.scalar(
        select(func.count(Appointment.id)).where(
            Appointment.service_id == service_id,
            Appointment.status.in_(list(ACTIVE_STATUSES)),
        )
    )
    if active_bookings:
        raise BadRequestError(
            "Não é possível deletar serviço com agendamentos ativos"
        )
    service.active = False
    await session.commit()
    logger.info("Deactivated service %s", service_id)
    return service
