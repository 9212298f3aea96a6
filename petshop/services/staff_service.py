"""Staff data access helpers."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from petshop.core.config import Settings
from petshop.core.errors import ForbiddenError, NotFoundError
from petshop.core.security import hash_password
from petshop.models.staff import Staff, StaffRole
from petshop.schemas.staff import StaffUpdate
from petshop.services import address_service

_NOT_FOUND = "Funcionário não encontrado"


async def get_staff(session: AsyncSession, staff_id: str) -> Staff:
    """Return a staff member with the resolved address, or raise 404."""
    result = await session.execute(
        select(Staff)
        .options(selectinload(Staff.address))
        .where(Staff.staff_id == staff_id)
    )
    staff = result.scalar_one_or_none()
    if staff is None:
        raise NotFoundError(_NOT_FOUND)
    return staff


async def list_staff(session: AsyncSession) -> Sequence[Staff]:
    result = await session.execute(select(Staff).order_by(Staff.first_name))
    return result.scalars().all()


async def update_staff(
    session: AsyncSession,
    *,
    staff_id: str,
    payload: StaffUpdate,
    settings: Settings | None = None,
) -> Staff:
    """Apply a partial profile update.

    Only a Master may change a role, including their own.
    """
    staff = await get_staff(session, staff_id)
    changes = payload.model_dump(exclude_unset=True)
    role = changes.pop("role", None)
    if role is not None and role != staff.role:
        if staff.role != StaffRole.MASTER:
            raise ForbiddenError("Sem permissão para alterar a função")
        staff.role = role
    password = changes.pop("password", None)
    if password is not None:
        staff.hashed_password = hash_password(password, settings=settings)
    if "cep" in changes:
        changes["cep"] = await address_service.ensure_address(session, changes["cep"])
    if changes.get("email"):
        changes["email"] = changes["email"].lower()
    for field, value in changes.items():
        if value is None and field in ("first_name", "last_name", "email"):
            continue
        setattr(staff, field, value)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(staff)
    await session.refresh(staff, attribute_names=["address"])
    return staff
