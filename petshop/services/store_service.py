"""Store helpers."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from petshop.core.errors import ForbiddenError
from petshop.models.staff import Staff
from petshop.models.store import Store
from petshop.schemas.store import StoreCreate
from petshop.services import address_service


async def list_stores(session: AsyncSession) -> Sequence[Store]:
    result = await session.execute(select(Store).order_by(Store.name))
    return result.scalars().all()


async def create_store(
    session: AsyncSession, *, actor: Staff, payload: StoreCreate
) -> Store:
    """Open a store owned by the acting Master or Gerente."""
    if not actor.is_elevated:
        raise ForbiddenError("Acesso negado")
    cep = await address_service.ensure_address(session, payload.cep)
    store = Store(
        name=payload.name,
        cep=cep,
        number=payload.number,
        complement=payload.complement,
        staff_id=actor.staff_id,
    )
    session.add(store)
    await session.commit()
    await session.refresh(store)
    return store
