"""Service appointment model and its status lifecycle."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshop.db.base import Base
from petshop.models.mixins import TimestampMixin, value_enum

if TYPE_CHECKING:
    from petshop.models import Account, Pet, Service


class AppointmentStatus(str, enum.Enum):
    """Lifecycle states for an appointment."""

    SCHEDULED = "Agendado"
    CONFIRMED = "Confirmado"
    IN_PROGRESS = "EmAndamento"
    COMPLETED = "Concluido"
    CANCELED = "Cancelado"


ACTIVE_STATUSES: frozenset[AppointmentStatus] = frozenset(
    {
        AppointmentStatus.SCHEDULED,
        AppointmentStatus.CONFIRMED,
        AppointmentStatus.IN_PROGRESS,
    }
)

ALLOWED_STATUS_TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    AppointmentStatus.SCHEDULED: frozenset(
        {AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELED}
    ),
    AppointmentStatus.CONFIRMED: frozenset(
        {AppointmentStatus.IN_PROGRESS, AppointmentStatus.CANCELED}
    ),
    AppointmentStatus.IN_PROGRESS: frozenset(
        {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELED}
    ),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELED: frozenset(),
}

_ACTIVE_SLOT_PREDICATE = "status IN ('Agendado', 'Confirmado', 'EmAndamento')"


class Appointment(TimestampMixin, Base):
    """A pet booked into a service at a given time."""

    __tablename__ = "appointments"

    __table_args__ = (
        Index(
            "ux_appointments_active_slot",
            "service_id",
            "scheduled_at",
            unique=True,
            sqlite_where=text(_ACTIVE_SLOT_PREDICATE),
            postgresql_where=text(_ACTIVE_SLOT_PREDICATE),
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    scheduled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    notes: Mapped[str | None] = mapped_column(String(1024))
    pet_id: Mapped[int] = mapped_column(
        ForeignKey("pets.id", ondelete="CASCADE"), nullable=False
    )
    service_id: Mapped[int] = mapped_column(
        ForeignKey("services.id", ondelete="CASCADE"), nullable=False
    )
    account_cpf: Mapped[str] = mapped_column(
        ForeignKey("accounts.cpf", ondelete="CASCADE"), nullable=False
    )
    status: Mapped[AppointmentStatus] = mapped_column(
        value_enum(AppointmentStatus),
        default=AppointmentStatus.SCHEDULED,
        nullable=False,
    )

    pet: Mapped["Pet"] = relationship("Pet", back_populates="appointments")
    service: Mapped["Service"] = relationship("Service", back_populates="appointments")
    account: Mapped["Account"] = relationship("Account", back_populates="appointments")

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES
