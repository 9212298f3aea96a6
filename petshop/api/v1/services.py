"""Service catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from petshop.api.deps import CurrentStaff, DbSession
from petshop.models.service import ServiceCategory
from petshop.schemas.common import MessageResponse, SuccessResponse
from petshop.schemas.service import (
    ServiceCreate,
    ServiceDetail,
    ServiceListItem,
    ServiceRead,
    ServiceUpdate,
)
from petshop.services import service_catalog_service

router = APIRouter()


@router.get(
    "",
    response_model=SuccessResponse[list[ServiceListItem]],
    summary="List services",
)
async def list_services(
    session: DbSession,
    categoria: ServiceCategory | None = Query(default=None),
    ativo: bool | None = Query(default=None),
) -> SuccessResponse[list[ServiceListItem]]:
    """Return services with their appointment counts, newest first."""
    rows = await service_catalog_service.list_services(
        session, category=categoria, active=ativo
    )
    return SuccessResponse[list[ServiceListItem]](
        data=[
            ServiceListItem.model_validate(service).model_copy(
                update={"appointment_count": count}
            )
            for service, count in rows
        ]
    )


@router.get(
    "/{service_id}",
    response_model=SuccessResponse[ServiceDetail],
    summary="Get service with its appointments",
)
async def get_service(
    service_id: int, session: DbSession
) -> SuccessResponse[ServiceDetail]:
    service = await service_catalog_service.get_service(session, service_id)
    return SuccessResponse[ServiceDetail](data=ServiceDetail.model_validate(service))


@router.post(
    "",
    response_model=SuccessResponse[ServiceRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create service",
)
async def create_service(
    payload: ServiceCreate, staff: CurrentStaff, session: DbSession
) -> SuccessResponse[ServiceRead]:
    service = await service_catalog_service.create_service(
        session, acting_staff_id=staff.staff_id, payload=payload
    )
    return SuccessResponse[ServiceRead](
        message="Serviço criado com sucesso", data=ServiceRead.model_validate(service)
    )


@router.put(
    "/{service_id}",
    response_model=SuccessResponse[ServiceRead],
    summary="Update service",
)
async def update_service(
    service_id: int, payload: ServiceUpdate, _: CurrentStaff, session: DbSession
) -> SuccessResponse[ServiceRead]:
    service = await service_catalog_service.update_service(
        session, service_id=service_id, payload=payload
    )
    return SuccessResponse[ServiceRead](
        message="Serviço atualizado com sucesso",
        data=ServiceRead.model_validate(service),
    )


@router.delete(
    "/{service_id}", response_model=MessageResponse, summary="Deactivate service"
)
async def delete_service(
    service_id: int, _: CurrentStaff, session: DbSession
) -> MessageResponse:
    """Soft-delete: the row stays, flagged inactive."""
    await service_catalog_service.deactivate_service(session, service_id=service_id)
    return MessageResponse(message="Serviço desativado com sucesso")
