"""Pet profile model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshop.db.base import Base
from petshop.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from petshop.models import Account, Appointment


class Pet(TimestampMixin, Base):
    """Represents a pet registered by a customer account."""

    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    owner_cpf: Mapped[str] = mapped_column(
        ForeignKey("accounts.cpf", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    species: Mapped[str] = mapped_column(String(60), nullable=False)
    breed: Mapped[str | None] = mapped_column(String(120))
    age: Mapped[str | None] = mapped_column(String(20))
    consultation_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    boarding_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    owner: Mapped["Account"] = relationship("Account", back_populates="pets")
    appointments: Mapped[list["Appointment"]] = relationship(
        "Appointment", back_populates="pet", cascade="all, delete-orphan"
    )
