"""Postal address keyed by CEP."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshop.db.base import Base

if TYPE_CHECKING:
    from petshop.models import Account, Staff, Store

NO_POSTAL_CODE = "Nenhum"


class Address(Base):
    """Street-level address shared by accounts, staff and stores."""

    __tablename__ = "addresses"

    cep: Mapped[str] = mapped_column(String(16), primary_key=True)
    street: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    neighborhood: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    state: Mapped[str] = mapped_column(String(60), nullable=False, default="")

    accounts: Mapped[list["Account"]] = relationship(
        "Account", back_populates="address"
    )
    staff_members: Mapped[list["Staff"]] = relationship(
        "Staff", back_populates="address"
    )
    stores: Mapped[list["Store"]] = relationship("Store", back_populates="address")
