"""Postal code lookup and address directory endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from petshop.api.deps import DbSession, get_viacep_client
from petshop.integrations.viacep_client import ViaCepClient
from petshop.schemas.address import AddressRead, PostalCodeLookup
from petshop.schemas.common import SuccessResponse
from petshop.services import address_service

router = APIRouter()


@router.get(
    "/consultar/{cep}",
    response_model=SuccessResponse[PostalCodeLookup],
    summary="Look up a CEP",
)
async def lookup_postal_code(
    cep: str,
    session: DbSession,
    client: Annotated[ViaCepClient, Depends(get_viacep_client)],
) -> SuccessResponse[PostalCodeLookup]:
    """Answer from the directory when possible, otherwise ask ViaCEP and store it."""
    address, already_stored = await address_service.lookup_postal_code(
        session, raw_cep=cep, client=client
    )
    message = (
        "CEP encontrado no banco de dados"
        if already_stored
        else "CEP consultado e cadastrado com sucesso"
    )
    data = PostalCodeLookup(
        **AddressRead.model_validate(address).model_dump(),
        already_stored=already_stored,
    )
    return SuccessResponse[PostalCodeLookup](message=message, data=data)


@router.get(
    "/enderecos",
    response_model=SuccessResponse[list[AddressRead]],
    summary="List stored addresses",
)
async def list_addresses(session: DbSession) -> SuccessResponse[list[AddressRead]]:
    addresses = await address_service.list_addresses(session)
    return SuccessResponse[list[AddressRead]](
        data=[AddressRead.model_validate(address) for address in addresses]
    )
