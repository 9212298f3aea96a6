"""Product catalog schemas."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field, PositiveInt

from petshop.models.product import ProductSpecies
from petshop.schemas.common import APIModel
from petshop.schemas.staff import StaffSummary
from petshop.schemas.store import StoreSummary


class ProductCreate(APIModel):
    """Payload for adding a product to the catalog."""

    name: str = Field(alias="nome", min_length=2)
    description: str = Field(alias="descricao", min_length=10)
    price: Decimal = Field(alias="preco", gt=0, max_digits=10, decimal_places=2)
    species: ProductSpecies = Field(alias="tipo")
    stock: int | None = Field(default=None, alias="estoque")
    store_id: PositiveInt | None = Field(default=None, alias="idLoja")


class ProductUpdate(APIModel):
    """Mutable product fields."""

    name: str | None = Field(default=None, alias="nome", min_length=2)
    description: str | None = Field(default=None, alias="descricao", min_length=10)
    price: Decimal | None = Field(
        default=None, alias="preco", gt=0, max_digits=10, decimal_places=2
    )
    species: ProductSpecies | None = Field(default=None, alias="tipo")
    stock: int | None = Field(default=None, alias="estoque")
    store_id: PositiveInt | None = Field(default=None, alias="idLoja")


class ProductRead(APIModel):
    """Serialized product with its creator and store."""

    id: int = Field(alias="idPro")
    name: str = Field(alias="nome")
    description: str = Field(alias="descricao")
    price: Decimal = Field(alias="preco")
    species: ProductSpecies = Field(alias="tipo")
    stock: int | None = Field(default=None, alias="estoque")
    store_id: int | None = Field(default=None, alias="idLoja")
    staff_id: str | None = Field(default=None, alias="idFuncionario")
    image: str = Field(alias="img")
    created_by: StaffSummary | None = Field(default=None, alias="funcionario")
    store: StoreSummary | None = Field(default=None, alias="loja")
