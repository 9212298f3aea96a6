"""Appointment booking schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import Field, PositiveInt

from petshop.models.appointment import AppointmentStatus
from petshop.models.service import ServiceCategory
from petshop.schemas.common import APIModel


class AppointmentCreate(APIModel):
    """Payload for booking a service for a pet."""

    scheduled_at: datetime = Field(alias="dataHora")
    notes: str | None = Field(default=None, alias="observacoes")
    pet_id: PositiveInt = Field(alias="idPet")
    service_id: PositiveInt = Field(alias="idServico")
    account_cpf: str | None = Field(default=None, alias="idUsuario")


class AppointmentStatusUpdate(APIModel):
    status: AppointmentStatus


class AppointmentPet(APIModel):
    id: int = Field(alias="idPet")
    name: str = Field(alias="nome")
    species: str = Field(alias="tipo")
    breed: str | None = Field(default=None, alias="raca")


class AppointmentService(APIModel):
    id: int = Field(alias="idServico")
    name: str = Field(alias="nome")
    price: Decimal = Field(alias="preco")
    duration: str | None = Field(default=None, alias="duracao")
    category: ServiceCategory = Field(alias="categoria")


class AppointmentAccount(APIModel):
    cpf: str
    first_name: str = Field(alias="nome")
    last_name: str | None = Field(default=None, alias="sobrenome")
    email: str
    mobile_phone: str | None = Field(default=None, alias="celular")


class AppointmentRead(APIModel):
    """Serialized appointment with pet, service and account summaries."""

    id: int = Field(alias="idAgendamento")
    scheduled_at: datetime = Field(alias="dataHora")
    notes: str | None = Field(default=None, alias="observacoes")
    status: AppointmentStatus
    pet_id: int = Field(alias="idPet")
    service_id: int = Field(alias="idServico")
    account_cpf: str = Field(alias="idUsuario")
    pet: AppointmentPet
    service: AppointmentService = Field(alias="servico")
    account: AppointmentAccount = Field(alias="usuario")
