"""Bookable service model."""

from __future__ import annotations

import enum
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshop.db.base import Base
from petshop.models.mixins import TimestampMixin, value_enum

if TYPE_CHECKING:
    from petshop.models import Appointment, Staff


class ServiceCategory(str, enum.Enum):
    """Service catalog groupings."""

    VETERINARY = "Veterinario"
    GROOMING = "Estetica"
    BOARDING = "Hospedagem"
    OTHER = "Outros"


class Service(TimestampMixin, Base):
    """Service that customers can book appointments for."""

    __tablename__ = "services"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1024))
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    duration: Mapped[str | None] = mapped_column(String(60))
    category: Mapped[ServiceCategory] = mapped_column(
        value_enum(ServiceCategory), nullable=False
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    staff_id: Mapped[str | None] = mapped_column(
        ForeignKey("staff.staff_id", ondelete="SET NULL")
    )

    created_by: Mapped["Staff | None"] = relationship(
        "Staff", back_populates="services"
    )
    appointments: Mapped[list["Appointment"]] = relationship(
        "Appointment",
        back_populates="service",
        order_by="Appointment.scheduled_at.desc()",
    )
