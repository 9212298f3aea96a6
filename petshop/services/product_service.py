"""Product catalog service helpers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select

from petshop.core.errors import ForbiddenError, NotFoundError
from petshop.models.product import Product, ProductSpecies
from petshop.models.staff import Staff
from petshop.models.store import Store
from petshop.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

_NOT_FOUND = "Produto não encontrado"
_STAFF_NOT_FOUND = "Funcionário não encontrado"


def _base_product_query() -> Select[tuple[Product]]:
    return select(Product).options(
        selectinload(Product.created_by), selectinload(Product.store)
    )


async def _require_staff(session: AsyncSession, staff_id: str) -> Staff:
    staff = await session.get(Staff, staff_id)
    if staff is None:
        raise NotFoundError(_STAFF_NOT_FOUND)
    return staff


async def _require_store(session: AsyncSession, store_id: int) -> None:
    if await session.get(Store, store_id) is None:
        raise NotFoundError("Loja não encontrada")


def _assert_can_edit(staff: Staff, product: Product, action: str) -> None:
    if product.staff_id != staff.staff_id and not staff.is_elevated:
        raise ForbiddenError(f"Sem permissão para {action} este produto")


async def list_products(
    session: AsyncSession, *, species: ProductSpecies | None = None
) -> Sequence[Product]:
    stmt = _base_product_query().order_by(Product.id.desc())
    if species is not None:
        stmt = stmt.where(Product.species == species)
    result = await session.execute(stmt)
    return result.scalars().all()


async def get_product(session: AsyncSession, product_id: int) -> Product:
    result = await session.execute(
        _base_product_query().where(Product.id == product_id)
    )
    product = result.scalar_one_or_none()
    if product is None:
        raise NotFoundError(_NOT_FOUND)
    return product


async def create_product(
    session: AsyncSession, *, staff_id: str, payload: ProductCreate
) -> Product:
    """Add a product on behalf of the acting staff member."""
    await _require_staff(session, staff_id)
    if payload.store_id is not None:
        await _require_store(session, payload.store_id)
    product = Product(
        name=payload.name,
        description=payload.description,
        price=payload.price,
        species=payload.species,
        stock=payload.stock,
        store_id=payload.store_id,
        staff_id=staff_id,
    )
    session.add(product)
    await session.commit()
    await session.refresh(product)
    await session.refresh(product, attribute_names=["created_by", "store"])
    logger.info("Staff %s created product %s", staff_id, product.id)
    return product


async def update_product(
    session: AsyncSession, *, product_id: int, staff_id: str, payload: ProductUpdate
) -> Product:
    """Edit a product; only its creator or an elevated role may do so."""
    product = await get_product(session, product_id)
    staff = await _require_staff(session, staff_id)
    _assert_can_edit(staff, product, "editar")

    changes = payload.model_dump(exclude_unset=True)
    if changes.get("store_id") is not None:
        await _require_store(session, changes["store_id"])
    for field, value in changes.items():
        if value is None and field != "stock":
            continue
        setattr(product, field, value)
    await session.commit()
    await session.refresh(product)
    await session.refresh(product, attribute_names=["created_by", "store"])
    return product


async def delete_product(
    session: AsyncSession, *, product_id: int, staff_id: str
) -> None:
    product = await get_product(session, product_id)
    staff = await _require_staff(session, staff_id)
    _assert_can_edit(staff, product, "excluir")
    await session.delete(product)
    await session.commit()
    logger.info("Staff %s deleted product %s", staff_id, product_id)
