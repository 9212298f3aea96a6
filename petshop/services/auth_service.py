"""Registration, login and logout for accounts and staff."""

from __future__ import annotations

import logging

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from petshop.core.config import Settings
from petshop.core.errors import ConflictError, ForbiddenError, UnauthorizedError
from petshop.core.security import (
    ACCOUNT_KIND,
    STAFF_KIND,
    hash_password,
    issue_token,
    password_matches,
)
from petshop.models.account import Account
from petshop.models.staff import Staff, StaffRole
from petshop.schemas.account import AccountCreate
from petshop.schemas.staff import StaffCreate
from petshop.services import address_service

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Credenciais inválidas"


async def register_account(
    session: AsyncSession, payload: AccountCreate, *, settings: Settings | None = None
) -> Account:
    """Create a customer account; 409 when the CPF or e-mail is taken."""
    email = payload.email.lower()
    existing = await session.execute(
        select(Account.cpf).where(
            or_(Account.cpf == payload.cpf, func.lower(Account.email) == email)
        )
    )
    if existing.first() is not None:
        raise ConflictError("Usuário já existe com este CPF ou email")

    cep = await address_service.ensure_address(session, payload.cep)
    account = Account(
        cpf=payload.cpf,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=email,
        hashed_password=hash_password(payload.password, settings=settings),
        mobile_phone=payload.mobile_phone,
        cep=cep,
        number=payload.number,
        complement=payload.complement,
        is_logged_in=False,
    )
    session.add(account)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(account)
    logger.info("Registered account %s", account.cpf)
    return account


async def authenticate_account(
    session: AsyncSession,
    *,
    email: str,
    password: str,
    settings: Settings | None = None,
) -> tuple[Account, str]:
    """Validate account credentials, flag the account as logged in and issue a token."""
    result = await session.execute(
        select(Account).where(func.lower(Account.email) == email.lower())
    )
    account = result.scalar_one_or_none()
    if account is None or not password_matches(password, account.hashed_password):
        raise UnauthorizedError(_INVALID_CREDENTIALS)
    account.is_logged_in = True
    await session.commit()
    await session.refresh(account)
    return account, issue_token(account.cpf, ACCOUNT_KIND, settings=settings)


async def logout_account(session: AsyncSession, cpf: str) -> None:
    account = await session.get(Account, cpf)
    if account is not None and account.is_logged_in:
        account.is_logged_in = False
        await session.commit()


def _assert_assignable_role(actor: Staff, role: StaffRole) -> None:
    if not actor.is_elevated:
        raise ForbiddenError("Acesso negado")
    if role == StaffRole.MASTER and actor.role != StaffRole.MASTER:
        raise ForbiddenError("Somente Master pode atribuir a função Master")


async def register_staff(
    session: AsyncSession,
    payload: StaffCreate,
    *,
    actor: Staff | None,
    settings: Settings | None = None,
) -> Staff:
    """Create a staff member.

    The very first staff member may register without credentials; after that
    only an authenticated Master or Gerente may add colleagues, and only a
    Master may hand out the Master role.
    """
    staff_count = await session.scalar(select(func.count()).select_from(Staff))
    if staff_count:
        if actor is None:
            raise ForbiddenError("Acesso negado")
        _assert_assignable_role(actor, payload.role)

    email = payload.email.lower()
    existing = await session.execute(
        select(Staff.staff_id).where(
            or_(
                Staff.staff_id == payload.staff_id,
                func.lower(Staff.email) == email,
            )
        )
    )
    if existing.first() is not None:
        raise ConflictError("Funcionário já existe com este ID ou email")

    cep = await address_service.ensure_address(session, payload.cep)
    staff = Staff(
        staff_id=payload.staff_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=email,
        hashed_password=hash_password(payload.password, settings=settings),
        role=payload.role,
        phone=payload.phone,
        cep=cep,
        number=payload.number,
        complement=payload.complement,
        is_logged_in=False,
    )
    session.add(staff)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    await session.refresh(staff)
    logger.info("Registered staff member %s as %s", staff.staff_id, staff.role.value)
    return staff


async def authenticate_staff(
    session: AsyncSession,
    *,
    email: str,
    password: str,
    settings: Settings | None = None,
) -> tuple[Staff, str]:
    """Validate staff credentials, flag the member as logged in and issue a token."""
    result = await session.execute(
        select(Staff).where(func.lower(Staff.email) == email.lower())
    )
    staff = result.scalar_one_or_none()
    if staff is None or not password_matches(password, staff.hashed_password):
        raise UnauthorizedError(_INVALID_CREDENTIALS)
    staff.is_logged_in = True
    await session.commit()
    await session.refresh(staff)
    return staff, issue_token(staff.staff_id, STAFF_KIND, settings=settings)


async def logout_staff(session: AsyncSession, staff_id: str) -> None:
    staff = await session.get(Staff, staff_id)
    if staff is not None and staff.is_logged_in:
        staff.is_logged_in = False
        await session.commit()
