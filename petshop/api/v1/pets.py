"""Pet management API."""

from __future__ import annotations

from fastapi import APIRouter, status

from petshop.api.deps import AccountPrincipal, CurrentPrincipal, CurrentStaff, DbSession
from petshop.schemas.common import MessageResponse, SuccessResponse
from petshop.schemas.pet import PetCreate, PetRead, PetUpdate, VisitBooking
from petshop.services import pet_service

router = APIRouter()


@router.post(
    "",
    response_model=SuccessResponse[PetRead],
    status_code=status.HTTP_201_CREATED,
    summary="Register pet",
)
async def create_pet(
    payload: PetCreate, principal: AccountPrincipal, session: DbSession
) -> SuccessResponse[PetRead]:
    pet = await pet_service.create_pet(
        session, owner_cpf=principal.subject, payload=payload
    )
    return SuccessResponse[PetRead](
        message="Pet cadastrado com sucesso", data=PetRead.model_validate(pet)
    )


@router.get(
    "/my-pets", response_model=SuccessResponse[list[PetRead]], summary="List my pets"
)
async def list_my_pets(
    principal: AccountPrincipal, session: DbSession
) -> SuccessResponse[list[PetRead]]:
    pets = await pet_service.list_pets(session, owner_cpf=principal.subject)
    return SuccessResponse[list[PetRead]](
        data=[PetRead.model_validate(pet) for pet in pets]
    )


@router.get(
    "/funcionario/all",
    response_model=SuccessResponse[list[PetRead]],
    summary="List every pet (staff)",
)
async def list_all_pets(
    _: CurrentStaff, session: DbSession
) -> SuccessResponse[list[PetRead]]:
    pets = await pet_service.list_pets(session)
    return SuccessResponse[list[PetRead]](
        data=[PetRead.model_validate(pet) for pet in pets]
    )


@router.post(
    "/agendar",
    response_model=SuccessResponse[PetRead],
    summary="Set a consultation or boarding date",
)
async def book_visit(
    payload: VisitBooking, principal: AccountPrincipal, session: DbSession
) -> SuccessResponse[PetRead]:
    pet = await pet_service.book_visit(
        session, owner_cpf=principal.subject, payload=payload
    )
    message = (
        "Consulta agendada com sucesso"
        if payload.visit_type == "consulta"
        else "Hotel agendado com sucesso"
    )
    return SuccessResponse[PetRead](message=message, data=PetRead.model_validate(pet))


@router.get("/{pet_id}", response_model=SuccessResponse[PetRead], summary="Get pet")
async def get_pet(
    pet_id: int, principal: CurrentPrincipal, session: DbSession
) -> SuccessResponse[PetRead]:
    """Owners see their own pets; staff can open any pet."""
    owner_cpf = principal.subject if principal.is_account else None
    pet = await pet_service.get_pet(session, pet_id=pet_id, owner_cpf=owner_cpf)
    return SuccessResponse[PetRead](data=PetRead.model_validate(pet))


@router.put("/{pet_id}", response_model=SuccessResponse[PetRead], summary="Update pet")
async def update_pet(
    pet_id: int, payload: PetUpdate, principal: AccountPrincipal, session: DbSession
) -> SuccessResponse[PetRead]:
    pet = await pet_service.update_pet(
        session, pet_id=pet_id, owner_cpf=principal.subject, payload=payload
    )
    return SuccessResponse[PetRead](
        message="Pet atualizado com sucesso", data=PetRead.model_validate(pet)
    )


@router.delete("/{pet_id}", response_model=MessageResponse, summary="Delete pet")
async def delete_pet(
    pet_id: int, principal: AccountPrincipal, session: DbSession
) -> MessageResponse:
    await pet_service.delete_pet(session, pet_id=pet_id, owner_cpf=principal.subject)
    return MessageResponse(message="Pet excluído com sucesso")
