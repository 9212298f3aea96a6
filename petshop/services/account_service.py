"""Customer account data access helpers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from petshop.core.config import Settings
from petshop.core.errors import NotFoundError
from petshop.core.security import hash_password
from petshop.models.account import Account
from petshop.models.pet import Pet
from petshop.schemas.account import AccountUpdate
from petshop.services import address_service

logger = logging.getLogger(__name__)

_NOT_FOUND = "Usuário não encontrado"


def _profile_query():
    return select(Account).options(
        selectinload(Account.address), selectinload(Account.pets)
    )


async def get_account(session: AsyncSession, cpf: str) -> Account:
    """Return an account with its address and pets, or raise 404."""
    result = await session.execute(_profile_query().where(Account.cpf == cpf))
    account = result.scalar_one_or_none()
    if account is None:
        raise NotFoundError(_NOT_FOUND)
    return account


async def list_accounts(session: AsyncSession) -> Sequence[Account]:
    result = await session.execute(_profile_query().order_by(Account.cpf.desc()))
    return result.scalars().all()


async def update_account(
    session: AsyncSession,
    *,
    cpf: str,
    payload: AccountUpdate,
    settings: Settings | None = None,
) -> Account:
    """Apply a partial profile update; a new password is re-hashed."""
    account = await get_account(session, cpf)
    changes = payload.model_dump(exclude_unset=True)
    password = changes.pop("password", None)
    if password is not None:
        account.hashed_password = hash_password(password, settings=settings)
    if "cep" in changes:
        changes["cep"] = await address_service.ensure_address(session, changes["cep"])
    if changes.get("email"):
        changes["email"] = changes["email"].lower()
    for field, value in changes.items():
        if value is None and field in ("first_name", "email"):
            continue
        setattr(account, field, value)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(account)
    await session.refresh(account, attribute_names=["address", "pets"])
    return account


async def delete_account(session: AsyncSession, cpf: str) -> None:
    """Hard-delete an account together with its pets and appointments."""
    result = await session.execute(
        select(Account)
        .options(
            selectinload(Account.pets).selectinload(Pet.appointments),
            selectinload(Account.appointments),
        )
        .where(Account.cpf == cpf)
    )
    account = result.scalar_one_or_none()
    if account is None:
        raise NotFoundError(_NOT_FOUND)
    await session.delete(account)
    await session.commit()
    logger.info("Deleted account %s", cpf)
