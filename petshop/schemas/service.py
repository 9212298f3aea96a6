"""Service catalog schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from petshop.models.service import ServiceCategory
from petshop.schemas.appointment import AppointmentRead
from petshop.schemas.common import APIModel
from petshop.schemas.staff import StaffSummary


class ServiceCreate(APIModel):
    """Payload for adding a bookable service."""

    name: str = Field(alias="nome", min_length=1)
    description: str | None = Field(default=None, alias="descricao")
    price: Decimal = Field(alias="preco", gt=0, max_digits=10, decimal_places=2)
    duration: str | None = Field(default=None, alias="duracao")
    category: ServiceCategory = Field(alias="categoria")
    staff_id: str | None = Field(default=None, alias="idFuncionario")


class ServiceUpdate(APIModel):
    """Mutable service fields."""

    name: str | None = Field(default=None, alias="nome", min_length=1)
    description: str | None = Field(default=None, alias="descricao")
    price: Decimal | None = Field(
        default=None, alias="preco", gt=0, max_digits=10, decimal_places=2
    )
    duration: str | None = Field(default=None, alias="duracao")
    category: ServiceCategory | None = Field(default=None, alias="categoria")
    active: bool | None = Field(default=None, alias="ativo")
    staff_id: str | None = Field(default=None, alias="idFuncionario")


class ServiceRead(APIModel):
    """Serialized service."""

    id: int = Field(alias="idServico")
    name: str = Field(alias="nome")
    description: str | None = Field(default=None, alias="descricao")
    price: Decimal = Field(alias="preco")
    duration: str | None = Field(default=None, alias="duracao")
    category: ServiceCategory = Field(alias="categoria")
    active: bool = Field(alias="ativo")
    staff_id: str | None = Field(default=None, alias="idFuncionario")
    created_by: StaffSummary | None = Field(default=None, alias="funcionario")
    created_at: datetime = Field(alias="createdAt")


class ServiceListItem(ServiceRead):
    """Service row with its booking count."""

    appointment_count: int = Field(default=0, alias="totalAgendamentos")


class ServiceDetail(ServiceRead):
    """Service with its appointments, newest first."""

    appointments: list[AppointmentRead] = Field(
        default_factory=list, alias="agendamentos"
    )
