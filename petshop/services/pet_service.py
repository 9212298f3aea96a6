"""Pet management service helpers."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select

from petshop.core.errors import NotFoundError
from petshop.models.account import Account
from petshop.models.pet import Pet
from petshop.schemas.pet import PetCreate, PetUpdate, VisitBooking

_NOT_FOUND = "Pet não encontrado"


def coerce_utc(dt: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def _base_pet_query() -> Select[tuple[Pet]]:
    return select(Pet).options(selectinload(Pet.owner))


async def list_pets(
    session: AsyncSession, *, owner_cpf: str | None = None
) -> Sequence[Pet]:
    """Return pets, newest first, optionally restricted to one owner."""
    stmt = _base_pet_query().order_by(Pet.id.desc())
    if owner_cpf is not None:
        stmt = stmt.where(Pet.owner_cpf == owner_cpf)
    result = await session.execute(stmt)
    return result.scalars().all()


async def get_pet(
    session: AsyncSession, *, pet_id: int, owner_cpf: str | None = None
) -> Pet:
    """Return a pet; when ``owner_cpf`` is given, pets of other owners are 404."""
    stmt = _base_pet_query().where(Pet.id == pet_id)
    if owner_cpf is not None:
        stmt = stmt.where(Pet.owner_cpf == owner_cpf)
    result = await session.execute(stmt)
    pet = result.scalar_one_or_none()
    if pet is None:
        raise NotFoundError(_NOT_FOUND)
    return pet


async def create_pet(
    session: AsyncSession, *, owner_cpf: str, payload: PetCreate
) -> Pet:
    """Register a pet for an existing account."""
    if await session.get(Account, owner_cpf) is None:
        raise NotFoundError("Usuário não encontrado")
    pet = Pet(
        owner_cpf=owner_cpf,
        name=payload.name,
        species=payload.species,
        breed=payload.breed,
        age=payload.age,
        consultation_at=coerce_utc(payload.consultation_at),
        boarding_at=coerce_utc(payload.boarding_at),
    )
    session.add(pet)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(pet)
    await session.refresh(pet, attribute_names=["owner"])
    return pet


async def update_pet(
    session: AsyncSession, *, pet_id: int, owner_cpf: str, payload: PetUpdate
) -> Pet:
    pet = await get_pet(session, pet_id=pet_id, owner_cpf=owner_cpf)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if field in ("consultation_at", "boarding_at"):
            value = coerce_utc(value)
        elif value is None and field in ("name", "species"):
            continue
        setattr(pet, field, value)
    await session.commit()
    await session.refresh(pet)
    await session.refresh(pet, attribute_names=["owner"])
    return pet


async def delete_pet(session: AsyncSession, *, pet_id: int, owner_cpf: str) -> None:
    result = await session.execute(
        select(Pet)
        .options(selectinload(Pet.appointments))
        .where(Pet.id == pet_id, Pet.owner_cpf == owner_cpf)
    )
    pet = result.scalar_one_or_none()
    if pet is None:
        raise NotFoundError(_NOT_FOUND)
    await session.delete(pet)
    await session.commit()


async def book_visit(
    session: AsyncSession, *, owner_cpf: str, payload: VisitBooking
) -> Pet:
    """Set the pet's consultation or boarding date."""
    pet = await get_pet(session, pet_id=payload.pet_id, owner_cpf=owner_cpf)
    when = coerce_utc(payload.when)
    if payload.visit_type == "consulta":
        pet.consultation_at = when
    else:
        pet.boarding_at = when
    await session.commit()
    await session.refresh(pet)
    await session.refresh(pet, attribute_names=["owner"])
    return pet
