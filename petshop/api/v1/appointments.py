"""Appointment booking endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from petshop.api.deps import CurrentPrincipal, CurrentStaff, DbSession, Principal
from petshop.core.errors import BadRequestError, ForbiddenError
from petshop.models.appointment import AppointmentStatus
from petshop.schemas.appointment import (
    AppointmentCreate,
    AppointmentRead,
    AppointmentStatusUpdate,
)
from petshop.schemas.common import SuccessResponse
from petshop.services import appointment_service

router = APIRouter()


def _booking_account(principal: Principal, payload: AppointmentCreate) -> str:
    """Accounts book for themselves; staff book on behalf of ``idUsuario``."""
    if principal.is_account:
        if payload.account_cpf and payload.account_cpf != principal.subject:
            raise ForbiddenError("Acesso negado")
        return principal.subject
    if not payload.account_cpf:
        raise BadRequestError("idUsuario é obrigatório")
    return payload.account_cpf


@router.post(
    "",
    response_model=SuccessResponse[AppointmentRead],
    status_code=status.HTTP_201_CREATED,
    summary="Book a service",
)
async def create_appointment(
    payload: AppointmentCreate, principal: CurrentPrincipal, session: DbSession
) -> SuccessResponse[AppointmentRead]:
    appointment = await appointment_service.create_appointment(
        session, account_cpf=_booking_account(principal, payload), payload=payload
    )
    return SuccessResponse[AppointmentRead](
        message="Agendamento criado com sucesso",
        data=AppointmentRead.model_validate(appointment),
    )


@router.get(
    "",
    response_model=SuccessResponse[list[AppointmentRead]],
    summary="List appointments",
)
async def list_appointments(
    principal: CurrentPrincipal,
    session: DbSession,
    usuario: str | None = Query(default=None),
    appointment_status: AppointmentStatus | None = Query(default=None, alias="status"),
) -> SuccessResponse[list[AppointmentRead]]:
    """Staff see every booking; accounts only their own."""
    account_cpf = principal.subject if principal.is_account else usuario
    appointments = await appointment_service.list_appointments(
        session, account_cpf=account_cpf, status=appointment_status
    )
    return SuccessResponse[list[AppointmentRead]](
        data=[AppointmentRead.model_validate(item) for item in appointments]
    )


@router.get(
    "/{appointment_id}",
    response_model=SuccessResponse[AppointmentRead],
    summary="Get appointment",
)
async def get_appointment(
    appointment_id: int, principal: CurrentPrincipal, session: DbSession
) -> SuccessResponse[AppointmentRead]:
    appointment = await appointment_service.get_appointment(
        session,
        appointment_id=appointment_id,
        account_cpf=principal.subject if principal.is_account else None,
    )
    return SuccessResponse[AppointmentRead](
        data=AppointmentRead.model_validate(appointment)
    )


@router.patch(
    "/{appointment_id}/status",
    response_model=SuccessResponse[AppointmentRead],
    summary="Move an appointment to its next status",
)
async def update_appointment_status(
    appointment_id: int,
    payload: AppointmentStatusUpdate,
    _: CurrentStaff,
    session: DbSession,
) -> SuccessResponse[AppointmentRead]:
    appointment = await appointment_service.update_status(
        session, appointment_id=appointment_id, status=payload.status
    )
    return SuccessResponse[AppointmentRead](
        message="Status do agendamento atualizado com sucesso",
        data=AppointmentRead.model_validate(appointment),
    )
