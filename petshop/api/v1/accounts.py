"""Customer account endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from petshop.api.deps import (
    AccountPrincipal,
    AppSettings,
    CurrentStaff,
    DbSession,
    ElevatedStaff,
    login_rate_limit,
)
from petshop.schemas.account import (
    AccountCreate,
    AccountLogin,
    AccountProfile,
    AccountRead,
    AccountUpdate,
    LoginRequest,
)
from petshop.schemas.common import MessageResponse, SuccessResponse
from petshop.services import account_service, auth_service

router = APIRouter()


@router.post(
    "/register",
    response_model=SuccessResponse[AccountRead],
    status_code=status.HTTP_201_CREATED,
    summary="Register customer account",
)
async def register_account(
    payload: AccountCreate, session: DbSession, settings: AppSettings
) -> SuccessResponse[AccountRead]:
    account = await auth_service.register_account(session, payload, settings=settings)
    return SuccessResponse[AccountRead](
        message="Usuário criado com sucesso",
        data=AccountRead.model_validate(account),
    )


@router.post(
    "/login",
    response_model=SuccessResponse[AccountLogin],
    summary="Log in as a customer",
    dependencies=[Depends(login_rate_limit)],
)
async def login_account(
    payload: LoginRequest, session: DbSession, settings: AppSettings
) -> SuccessResponse[AccountLogin]:
    """Validate credentials and issue a bearer token."""
    account, token = await auth_service.authenticate_account(
        session, email=payload.email, password=payload.senha, settings=settings
    )
    return SuccessResponse[AccountLogin](
        message="Login realizado com sucesso",
        data=AccountLogin(usuario=AccountRead.model_validate(account), token=token),
    )


@router.post("/logout", response_model=MessageResponse, summary="Log out")
async def logout_account(
    principal: AccountPrincipal, session: DbSession
) -> MessageResponse:
    await auth_service.logout_account(session, principal.subject)
    return MessageResponse(message="Logout realizado com sucesso")


@router.get(
    "/profile",
    response_model=SuccessResponse[AccountProfile],
    summary="Current account profile",
)
async def get_profile(
    principal: AccountPrincipal, session: DbSession
) -> SuccessResponse[AccountProfile]:
    account = await account_service.get_account(session, principal.subject)
    return SuccessResponse[AccountProfile](data=AccountProfile.model_validate(account))


@router.put(
    "/profile",
    response_model=SuccessResponse[AccountProfile],
    summary="Update current account profile",
)
async def update_profile(
    payload: AccountUpdate,
    principal: AccountPrincipal,
    session: DbSession,
    settings: AppSettings,
) -> SuccessResponse[AccountProfile]:
    account = await account_service.update_account(
        session, cpf=principal.subject, payload=payload, settings=settings
    )
    return SuccessResponse[AccountProfile](
        message="Perfil atualizado com sucesso",
        data=AccountProfile.model_validate(account),
    )


@router.get(
    "/all",
    response_model=SuccessResponse[list[AccountProfile]],
    summary="List customer accounts",
)
async def list_accounts(
    _: CurrentStaff, session: DbSession
) -> SuccessResponse[list[AccountProfile]]:
    accounts = await account_service.list_accounts(session)
    return SuccessResponse[list[AccountProfile]](
        data=[AccountProfile.model_validate(account) for account in accounts]
    )


@router.get(
    "/{cpf}",
    response_model=SuccessResponse[AccountProfile],
    summary="Get customer account",
)
async def get_account(
    cpf: str, _: ElevatedStaff, session: DbSession
) -> SuccessResponse[AccountProfile]:
    account = await account_service.get_account(session, cpf)
    return SuccessResponse[AccountProfile](data=AccountProfile.model_validate(account))


@router.delete(
    "/{cpf}", response_model=MessageResponse, summary="Delete customer account"
)
async def delete_account(
    cpf: str, _: ElevatedStaff, session: DbSession
) -> MessageResponse:
    await account_service.delete_account(session, cpf)
    return MessageResponse(message="Usuário excluído com sucesso")
