"""Staff member model."""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshop.db.base import Base
from petshop.models.account import DEFAULT_AVATAR
from petshop.models.mixins import TimestampMixin, value_enum

if TYPE_CHECKING:
    from petshop.models import Address, Product, Service, Store


class StaffRole(str, enum.Enum):
    """Role enumeration for back-office permissions."""

    DEFAULT = "Default"
    VET = "Veterinario"
    MANAGER = "Gerente"
    MASTER = "Master"


ELEVATED_ROLES: frozenset[StaffRole] = frozenset({StaffRole.MASTER, StaffRole.MANAGER})


class Staff(TimestampMixin, Base):
    """Employee identity used for catalog management and reports."""

    __tablename__ = "staff"

    staff_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[StaffRole] = mapped_column(
        value_enum(StaffRole), default=StaffRole.DEFAULT, nullable=False
    )
    phone: Mapped[str | None] = mapped_column(String(32))
    cep: Mapped[str | None] = mapped_column(
        ForeignKey("addresses.cep", ondelete="SET NULL")
    )
    number: Mapped[str | None] = mapped_column(String(20))
    complement: Mapped[str | None] = mapped_column(String(120))
    is_logged_in: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    avatar: Mapped[str] = mapped_column(
        String(255), default=DEFAULT_AVATAR, nullable=False
    )

    address: Mapped["Address | None"] = relationship(
        "Address", back_populates="staff_members"
    )
    products: Mapped[list["Product"]] = relationship(
        "Product", back_populates="created_by"
    )
    services: Mapped[list["Service"]] = relationship(
        "Service", back_populates="created_by"
    )
    stores: Mapped[list["Store"]] = relationship("Store", back_populates="owner")

    @property
    def is_elevated(self) -> bool:
        return self.role in ELEVATED_ROLES
