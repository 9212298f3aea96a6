"""Reporting endpoints for the back office."""

from __future__ import annotations

from fastapi import APIRouter

from petshop.api.deps import CurrentStaff, DbSession
from petshop.schemas.common import SuccessResponse
from petshop.schemas.report import (
    AddressOccupancy,
    Dashboard,
    PetsBySpecies,
    ProductsBySpecies,
    UpcomingVisits,
)
from petshop.services import report_service

router = APIRouter()


@router.get(
    "/dashboard", response_model=SuccessResponse[Dashboard], summary="Dashboard totals"
)
async def dashboard(_: CurrentStaff, session: DbSession) -> SuccessResponse[Dashboard]:
    data = await report_service.dashboard(session)
    return SuccessResponse[Dashboard](data=Dashboard.model_validate(data))


@router.get(
    "/usuarios-por-endereco",
    response_model=SuccessResponse[list[AddressOccupancy]],
    summary="Accounts and staff per address",
)
async def occupants_by_address(
    _: CurrentStaff, session: DbSession
) -> SuccessResponse[list[AddressOccupancy]]:
    rows = await report_service.occupants_by_address(session)
    return SuccessResponse[list[AddressOccupancy]](
        data=[AddressOccupancy.model_validate(row) for row in rows]
    )


@router.get(
    "/pets-por-tipo",
    response_model=SuccessResponse[list[PetsBySpecies]],
    summary="Pets grouped by type",
)
async def pets_by_species(
    _: CurrentStaff, session: DbSession
) -> SuccessResponse[list[PetsBySpecies]]:
    rows = await report_service.pets_by_species(session)
    return SuccessResponse[list[PetsBySpecies]](
        data=[PetsBySpecies.model_validate(row) for row in rows]
    )


@router.get(
    "/produtos-por-tipo",
    response_model=SuccessResponse[list[ProductsBySpecies]],
    summary="Products grouped by type",
)
async def products_by_species(
    _: CurrentStaff, session: DbSession
) -> SuccessResponse[list[ProductsBySpecies]]:
    rows = await report_service.products_by_species(session)
    return SuccessResponse[list[ProductsBySpecies]](
        data=[ProductsBySpecies.model_validate(row) for row in rows]
    )


@router.get(
    "/agendamentos",
    response_model=SuccessResponse[UpcomingVisits],
    summary="Consultations and boarding in the next 30 days",
)
async def upcoming_visits(
    _: CurrentStaff, session: DbSession
) -> SuccessResponse[UpcomingVisits]:
    data = await report_service.upcoming_visits(session)
    return SuccessResponse[UpcomingVisits](data=UpcomingVisits.model_validate(data))
