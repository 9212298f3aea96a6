"""Address directory helpers and the CEP lookup flow."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from petshop.core.errors import BadRequestError, NotFoundError
from petshop.integrations.viacep_client import ViaCepClient
from petshop.models.address import NO_POSTAL_CODE, Address

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")


def normalize_cep(raw: str) -> str:
    """Strip everything but digits from a postal code."""
    return _NON_DIGITS.sub("", raw)


async def ensure_address(session: AsyncSession, cep: str | None) -> str | None:
    """Register a placeholder address for an unseen CEP.

    Returns the normalized CEP to store on the referencing row, or ``None``
    when no postal code (or the ``"Nenhum"`` sentinel) was supplied. The
    caller commits.
    """
    if cep is None or cep.strip() in ("", NO_POSTAL_CODE):
        return None
    normalized = normalize_cep(cep) or cep.strip()
    if await session.get(Address, normalized) is None:
        session.add(Address(cep=normalized))
        await session.flush()
    return normalized


async def list_addresses(session: AsyncSession) -> Sequence[Address]:
    result = await session.execute(select(Address).order_by(Address.cep))
    return result.scalars().all()


async def lookup_postal_code(
    session: AsyncSession, *, raw_cep: str, client: ViaCepClient
) -> tuple[Address, bool]:
    """Resolve a CEP, consulting ViaCEP and persisting the answer when unseen.

    Returns the address and whether it was already stored. Placeholder rows
    left behind by registration (blank street and city) are completed from
    the lookup service instead of being returned empty.
    """
    cep = normalize_cep(raw_cep)
    if len(cep) != 8:
        raise BadRequestError("CEP deve conter 8 dígitos")

    existing = await session.get(Address, cep)
    if existing is not None and (existing.street or existing.city):
        return existing, True

    result = await client.lookup(cep)
    if not result.found:
        raise NotFoundError("CEP não encontrado")

    address = existing or Address(cep=cep)
    address.street = result.street
    address.neighborhood = result.neighborhood
    address.city = result.city
    address.state = result.state
    session.add(address)
    await session.commit()
    logger.info("Stored address for CEP %s", cep)
    return address, False
