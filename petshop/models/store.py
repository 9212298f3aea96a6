"""Store model grouping products."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshop.db.base import Base
from petshop.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from petshop.models import Address, Product, Staff

DEFAULT_STORE_IMAGE = "./img/loja.png"


class Store(TimestampMixin, Base):
    """Physical shop owned by a staff member."""

    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    image: Mapped[str] = mapped_column(
        String(255), default=DEFAULT_STORE_IMAGE, nullable=False
    )
    cep: Mapped[str | None] = mapped_column(
        ForeignKey("addresses.cep", ondelete="SET NULL")
    )
    number: Mapped[str | None] = mapped_column(String(20))
    complement: Mapped[str | None] = mapped_column(String(120))
    staff_id: Mapped[str | None] = mapped_column(
        ForeignKey("staff.staff_id", ondelete="SET NULL")
    )

    address: Mapped["Address | None"] = relationship("Address", back_populates="stores")
    owner: Mapped["Staff | None"] = relationship("Staff", back_populates="stores")
    products: Mapped[list["Product"]] = relationship("Product", back_populates="store")
