"""Customer account model."""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshop.db.base import Base
from petshop.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from petshop.models import Address, Appointment, Pet

DEFAULT_AVATAR = "./img/UsuarioOFF.png"


class Account(TimestampMixin, Base):
    """End customer identified by CPF."""

    __tablename__ = "accounts"

    cpf: Mapped[str] = mapped_column(String(14), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str | None] = mapped_column(String(120))
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    mobile_phone: Mapped[str | None] = mapped_column(String(32))
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
        "Address", back_populates="accounts"
    )
    pets: Mapped[list["Pet"]] = relationship(
        "Pet", back_populates="owner", cascade="all, delete-orphan"
    )
    appointments: Mapped[list["Appointment"]] = relationship(
        "Appointment", back_populates="account", cascade="all, delete-orphan"
    )
