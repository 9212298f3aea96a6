"""Staff endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from petshop.api.deps import (
    AppSettings,
    CurrentStaff,
    DbSession,
    get_optional_staff,
    login_rate_limit,
)
from petshop.models.staff import Staff
from petshop.schemas.account import LoginRequest
from petshop.schemas.common import MessageResponse, SuccessResponse
from petshop.schemas.staff import (
    StaffCreate,
    StaffLogin,
    StaffProfile,
    StaffRead,
    StaffUpdate,
)
from petshop.services import auth_service, staff_service

router = APIRouter()


@router.post(
    "/register",
    response_model=SuccessResponse[StaffRead],
    status_code=status.HTTP_201_CREATED,
    summary="Register staff member",
)
async def register_staff(
    payload: StaffCreate,
    session: DbSession,
    actor: Annotated[Staff | None, Depends(get_optional_staff)],
    settings: AppSettings,
) -> SuccessResponse[StaffRead]:
    """Register a colleague; open only while no staff exists yet."""
    staff = await auth_service.register_staff(
        session, payload, actor=actor, settings=settings
    )
    return SuccessResponse[StaffRead](
        message="Funcionário criado com sucesso",
        data=StaffRead.model_validate(staff),
    )


@router.post(
    "/login",
    response_model=SuccessResponse[StaffLogin],
    summary="Log in as staff",
    dependencies=[Depends(login_rate_limit)],
)
async def login_staff(
    payload: LoginRequest, session: DbSession, settings: AppSettings
) -> SuccessResponse[StaffLogin]:
    staff, token = await auth_service.authenticate_staff(
        session, email=payload.email, password=payload.senha, settings=settings
    )
    return SuccessResponse[StaffLogin](
        message="Login realizado com sucesso",
        data=StaffLogin(funcionario=StaffRead.model_validate(staff), token=token),
    )


@router.post("/logout", response_model=MessageResponse, summary="Log out")
async def logout_staff(staff: CurrentStaff, session: DbSession) -> MessageResponse:
    await auth_service.logout_staff(session, staff.staff_id)
    return MessageResponse(message="Logout realizado com sucesso")


@router.get(
    "/profile",
    response_model=SuccessResponse[StaffProfile],
    summary="Current staff profile",
)
async def get_profile(
    staff: CurrentStaff, session: DbSession
) -> SuccessResponse[StaffProfile]:
    profile = await staff_service.get_staff(session, staff.staff_id)
    return SuccessResponse[StaffProfile](data=StaffProfile.model_validate(profile))


@router.put(
    "/profile",
    response_model=SuccessResponse[StaffProfile],
    summary="Update current staff profile",
)
async def update_profile(
    payload: StaffUpdate,
    staff: CurrentStaff,
    session: DbSession,
    settings: AppSettings,
) -> SuccessResponse[StaffProfile]:
    updated = await staff_service.update_staff(
        session, staff_id=staff.staff_id, payload=payload, settings=settings
    )
    return SuccessResponse[StaffProfile](
        message="Perfil atualizado com sucesso",
        data=StaffProfile.model_validate(updated),
    )


@router.get(
    "/all", response_model=SuccessResponse[list[StaffRead]], summary="List staff"
)
async def list_staff(
    _: CurrentStaff, session: DbSession
) -> SuccessResponse[list[StaffRead]]:
    members = await staff_service.list_staff(session)
    return SuccessResponse[list[StaffRead]](
        data=[StaffRead.model_validate(member) for member in members]
    )
