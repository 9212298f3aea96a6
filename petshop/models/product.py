"""Catalog product model."""

from __future__ import annotations

import enum
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshop.db.base import Base
from petshop.models.mixins import TimestampMixin, value_enum

if TYPE_CHECKING:
    from petshop.models import Staff, Store

DEFAULT_PRODUCT_IMAGE = "./img/imagemProdutoOFF.png"


class ProductSpecies(str, enum.Enum):
    """Animal a product is meant for."""

    DOG = "Cachorro"
    CAT = "Gato"
    BIRD = "Passarinho"
    FISH = "Peixe"
    OTHER = "Outros"


class Product(TimestampMixin, Base):
    """Item sold by the shop."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str] = mapped_column(String(1024), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    species: Mapped[ProductSpecies] = mapped_column(
        value_enum(ProductSpecies), nullable=False, index=True
    )
    stock: Mapped[int | None] = mapped_column()
    store_id: Mapped[int | None] = mapped_column(
        ForeignKey("stores.id", ondelete="SET NULL")
    )
    staff_id: Mapped[str | None] = mapped_column(
        ForeignKey("staff.staff_id", ondelete="SET NULL")
    )
    image: Mapped[str] = mapped_column(
        String(255), default=DEFAULT_PRODUCT_IMAGE, nullable=False
    )

    store: Mapped["Store | None"] = relationship("Store", back_populates="products")
    created_by: Mapped["Staff | None"] = relationship(
        "Staff", back_populates="products"
    )
