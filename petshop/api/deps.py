"""Common API dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from petshop.core.config import Settings
from petshop.core.errors import ForbiddenError, UnauthorizedError
from petshop.core.security import ACCOUNT_KIND, STAFF_KIND, read_token
from petshop.db.session import Database
from petshop.integrations.viacep_client import ViaCepClient
from petshop.models.staff import Staff

bearer_scheme = HTTPBearer(auto_error=False)

_TOKEN_REQUIRED = "Token de acesso requerido"
_TOKEN_INVALID = "Token inválido"
_ACCESS_DENIED = "Acesso negado"


@dataclass(frozen=True)
class Principal:
    """Caller identity decoded from the bearer token."""

    subject: str
    kind: str

    @property
    def is_account(self) -> bool:
        return self.kind == ACCOUNT_KIND

    @property
    def is_staff(self) -> bool:
        return self.kind == STAFF_KIND


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db_session(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session scoped to the request."""
    async with database.session() as session:
        yield session


def get_viacep_client(request: Request) -> ViaCepClient:
    return request.app.state.viacep_client


async def get_optional_principal(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> Principal | None:
    """Decode the bearer token when one is supplied."""
    if credentials is None:
        return None
    try:
        claims = read_token(credentials.credentials, settings=settings)
    except JWTError as exc:
        raise UnauthorizedError(_TOKEN_INVALID) from exc
    return Principal(subject=claims.subject, kind=claims.kind)


async def get_current_principal(
    principal: Annotated[Principal | None, Depends(get_optional_principal)],
) -> Principal:
    """Require a valid bearer token."""
    if principal is None:
        raise UnauthorizedError(_TOKEN_REQUIRED)
    return principal


async def require_account(
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> Principal:
    """Require a customer account token."""
    if not principal.is_account:
        raise ForbiddenError(_ACCESS_DENIED)
    return principal


async def require_staff_token(
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> Principal:
    """Require a staff token; the member row is checked by the service."""
    if not principal.is_staff:
        raise ForbiddenError(_ACCESS_DENIED)
    return principal


async def get_current_staff(
    principal: Annotated[Principal, Depends(get_current_principal)],
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> Staff:
    """Require a staff token whose member still exists."""
    if not principal.is_staff:
        raise ForbiddenError(_ACCESS_DENIED)
    staff = await session.get(Staff, principal.subject)
    if staff is None:
        raise ForbiddenError(_ACCESS_DENIED)
    return staff


async def get_optional_staff(
    principal: Annotated[Principal | None, Depends(get_optional_principal)],
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> Staff | None:
    if principal is None or not principal.is_staff:
        return None
    return await session.get(Staff, principal.subject)


async def require_elevated_staff(
    staff: Annotated[Staff, Depends(get_current_staff)],
) -> Staff:
    """Require a Master or Gerente."""
    if not staff.is_elevated:
        raise ForbiddenError(_ACCESS_DENIED)
    return staff


def _parse_rate(value: str, *, fallback: tuple[int, int]) -> tuple[int, int]:
    try:
        count_str, window_str = value.split("/", 1)
        count = int(count_str.strip())
    except ValueError:
        return fallback
    seconds_map = {
        "second": 1,
        "seconds": 1,
        "minute": 60,
        "minutes": 60,
        "hour": 3600,
        "hours": 3600,
        "day": 86400,
        "days": 86400,
    }
    return count, seconds_map.get(window_str.strip().lower(), fallback[1])


async def login_rate_limit(request: Request, response: Response) -> None:
    """Throttle login attempts when the Redis-backed limiter is initialised."""
    if FastAPILimiter.redis is None:
        return None
    settings = get_app_settings(request)
    times, seconds = _parse_rate(settings.rate_limit_login, fallback=(10, 60))
    limiter = RateLimiter(times=times, seconds=seconds)
    await limiter(request, response)


AppSettings = Annotated[Settings, Depends(get_app_settings)]
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
AccountPrincipal = Annotated[Principal, Depends(require_account)]
StaffPrincipal = Annotated[Principal, Depends(require_staff_token)]
CurrentStaff = Annotated[Staff, Depends(get_current_staff)]
ElevatedStaff = Annotated[Staff, Depends(require_elevated_staff)]
