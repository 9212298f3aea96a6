"""Product catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from petshop.api.deps import DbSession, StaffPrincipal
from petshop.models.product import ProductSpecies
from petshop.schemas.common import MessageResponse, SuccessResponse
from petshop.schemas.product import ProductCreate, ProductRead, ProductUpdate
from petshop.services import product_service

router = APIRouter()


@router.get(
    "", response_model=SuccessResponse[list[ProductRead]], summary="List products"
)
async def list_products(session: DbSession) -> SuccessResponse[list[ProductRead]]:
    products = await product_service.list_products(session)
    return SuccessResponse[list[ProductRead]](
        data=[ProductRead.model_validate(product) for product in products]
    )


@router.get(
    "/tipo/{tipo}",
    response_model=SuccessResponse[list[ProductRead]],
    summary="List products for one animal type",
)
async def list_products_by_species(
    tipo: ProductSpecies, session: DbSession
) -> SuccessResponse[list[ProductRead]]:
    products = await product_service.list_products(session, species=tipo)
    return SuccessResponse[list[ProductRead]](
        data=[ProductRead.model_validate(product) for product in products]
    )


@router.get(
    "/{product_id}", response_model=SuccessResponse[ProductRead], summary="Get product"
)
async def get_product(
    product_id: int, session: DbSession
) -> SuccessResponse[ProductRead]:
    product = await product_service.get_product(session, product_id)
    return SuccessResponse[ProductRead](data=ProductRead.model_validate(product))


@router.post(
    "",
    response_model=SuccessResponse[ProductRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
)
async def create_product(
    payload: ProductCreate, principal: StaffPrincipal, session: DbSession
) -> SuccessResponse[ProductRead]:
    product = await product_service.create_product(
        session, staff_id=principal.subject, payload=payload
    )
    return SuccessResponse[ProductRead](
        message="Produto criado com sucesso", data=ProductRead.model_validate(product)
    )


@router.put(
    "/{product_id}",
    response_model=SuccessResponse[ProductRead],
    summary="Update product",
)
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    principal: StaffPrincipal,
    session: DbSession,
) -> SuccessResponse[ProductRead]:
    product = await product_service.update_product(
        session, product_id=product_id, staff_id=principal.subject, payload=payload
    )
    return SuccessResponse[ProductRead](
        message="Produto atualizado com sucesso",
        data=ProductRead.model_validate(product),
    )


@router.delete(
    "/{product_id}", response_model=MessageResponse, summary="Delete product"
)
async def delete_product(
    product_id: int, principal: StaffPrincipal, session: DbSession
) -> MessageResponse:
    await product_service.delete_product(
        session, product_id=product_id, staff_id=principal.subject
    )
    return MessageResponse(message="Produto excluído com sucesso")
