"""Back-office reporting queries."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from petshop.models.account import Account
from petshop.models.address import Address
from petshop.models.pet import Pet
from petshop.models.product import Product
from petshop.models.staff import Staff

DASHBOARD_WINDOW = timedelta(days=7)
SCHEDULE_WINDOW = timedelta(days=30)


async def _count(session: AsyncSession, model: type, *criteria: Any) -> int:
    stmt = select(func.count()).select_from(model)
    if criteria:
        stmt = stmt.where(*criteria)
    return int(await session.scalar(stmt) or 0)


async def dashboard(
    session: AsyncSession, *, now: datetime | None = None
) -> dict[str, Any]:
    """Totals, logged-in counts and visits booked for the coming week."""
    start = now or datetime.now(UTC)
    end = start + DASHBOARD_WINDOW
    return {
        "totals": {
            "accounts": await _count(session, Account),
            "pets": await _count(session, Pet),
            "products": await _count(session, Product),
            "staff": await _count(session, Staff),
            "addresses": await _count(session, Address),
        },
        "logged_in": {
            "accounts": await _count(session, Account, Account.is_logged_in.is_(True)),
            "staff": await _count(session, Staff, Staff.is_logged_in.is_(True)),
        },
        "upcoming": {
            "consultations": await _count(
                session, Pet, Pet.consultation_at.between(start, end)
            ),
            "boarding": await _count(session, Pet, Pet.boarding_at.between(start, end)),
        },
    }


async def occupants_by_address(session: AsyncSession) -> list[dict[str, Any]]:
    """Accounts and staff grouped by address, ordered by city."""
    result = await session.execute(
        select(Address)
        .options(selectinload(Address.accounts), selectinload(Address.staff_members))
        .order_by(Address.city, Address.cep)
    )
    return [
        {
            "address": address,
            "accounts": list(address.accounts),
            "staff": list(address.staff_members),
            "account_count": len(address.accounts),
            "staff_count": len(address.staff_members),
        }
        for address in result.scalars().all()
    ]


async def pets_by_species(session: AsyncSession) -> list[dict[str, Any]]:
    """Pets grouped by type, most common type first."""
    result = await session.execute(
        select(Pet).options(selectinload(Pet.owner)).order_by(Pet.name)
    )
    groups: dict[str, list[Pet]] = {}
    for pet in result.scalars().all():
        groups.setdefault(pet.species, []).append(pet)
    ordered = sorted(groups.items(), key=lambda item: (-len(item[1]), item[0]))
    return [
        {"species": species, "count": len(pets), "pets": pets}
        for species, pets in ordered
    ]


async def products_by_species(session: AsyncSession) -> list[dict[str, Any]]:
    """Products grouped by target animal, most stocked type first."""
    result = await session.execute(
        select(Product)
        .options(selectinload(Product.created_by), selectinload(Product.store))
        .order_by(Product.name)
    )
    groups: dict[str, list[Product]] = {}
    for product in result.scalars().all():
        groups.setdefault(product.species.value, []).append(product)
    ordered = sorted(groups.items(), key=lambda item: (-len(item[1]), item[0]))
    return [
        {"species": species, "count": len(products), "products": products}
        for species, products in ordered
    ]


async def upcoming_visits(
    session: AsyncSession, *, now: datetime | None = None
) -> dict[str, Any]:
    """Pets with a consultation or boarding date in the next 30 days."""
    start = now or datetime.now(UTC)
    end = start + SCHEDULE_WINDOW
    consultations = await session.execute(
        select(Pet)
        .options(selectinload(Pet.owner))
        .where(Pet.consultation_at.between(start, end))
        .order_by(Pet.consultation_at)
    )
    boarding = await session.execute(
        select(Pet)
        .options(selectinload(Pet.owner))
        .where(Pet.boarding_at.between(start, end))
        .order_by(Pet.boarding_at)
    )
    return {
        "consultations": list(consultations.scalars().all()),
        "boarding": list(boarding.scalars().all()),
        "period": {"start": start.date(), "end": end.date()},
    }
