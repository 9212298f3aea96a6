"""Store endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from petshop.api.deps import DbSession, ElevatedStaff
from petshop.schemas.common import SuccessResponse
from petshop.schemas.store import StoreCreate, StoreRead
from petshop.services import store_service

router = APIRouter()


@router.get("", response_model=SuccessResponse[list[StoreRead]], summary="List stores")
async def list_stores(session: DbSession) -> SuccessResponse[list[StoreRead]]:
    stores = await store_service.list_stores(session)
    return SuccessResponse[list[StoreRead]](
        data=[StoreRead.model_validate(store) for store in stores]
    )


@router.post(
    "",
    response_model=SuccessResponse[StoreRead],
    status_code=status.HTTP_201_CREATED,
    summary="Open a store",
)
async def create_store(
    payload: StoreCreate, staff: ElevatedStaff, session: DbSession
) -> SuccessResponse[StoreRead]:
    store = await store_service.create_store(session, actor=staff, payload=payload)
    return SuccessResponse[StoreRead](
        message="Loja criada com sucesso", data=StoreRead.model_validate(store)
    )
