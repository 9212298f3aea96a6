"""Reporting schemas."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from petshop.models.staff import StaffRole
from petshop.schemas.address import AddressRead
from petshop.schemas.common import APIModel
from petshop.schemas.pet import PetRead
from petshop.schemas.product import ProductRead


class EntityTotals(APIModel):
    accounts: int = Field(alias="usuarios")
    pets: int
    products: int = Field(alias="produtos")
    staff: int = Field(alias="funcionarios")
    addresses: int = Field(alias="enderecos")


class LoggedInTotals(APIModel):
    accounts: int = Field(alias="usuarios")
    staff: int = Field(alias="funcionarios")


class UpcomingTotals(APIModel):
    consultations: int = Field(alias="consultas")
    boarding: int = Field(alias="hotel")


class Dashboard(APIModel):
    """Back-office headline numbers."""

    totals: EntityTotals = Field(alias="totais")
    logged_in: LoggedInTotals = Field(alias="logados")
    upcoming: UpcomingTotals = Field(alias="agendamentosProximos")


class ResidentAccount(APIModel):
    cpf: str
    first_name: str = Field(alias="nome")
    last_name: str | None = Field(default=None, alias="sobrenome")
    email: str
    mobile_phone: str | None = Field(default=None, alias="celular")
    number: str | None = Field(default=None, alias="numero")
    complement: str | None = Field(default=None, alias="complemento")


class ResidentStaff(APIModel):
    staff_id: str = Field(alias="idFuncionario")
    first_name: str = Field(alias="nome")
    last_name: str = Field(alias="sobrenome")
    email: str
    phone: str | None = Field(default=None, alias="telefone")
    role: StaffRole = Field(alias="funcao")


class AddressOccupancy(APIModel):
    """One address with the people registered at it."""

    address: AddressRead = Field(alias="endereco")
    accounts: list[ResidentAccount] = Field(alias="usuarios")
    staff: list[ResidentStaff] = Field(alias="funcionarios")
    account_count: int = Field(alias="totalUsuarios")
    staff_count: int = Field(alias="totalFuncionarios")


class PetsBySpecies(APIModel):
    species: str = Field(alias="tipo")
    count: int = Field(alias="quantidade")
    pets: list[PetRead]


class ProductsBySpecies(APIModel):
    species: str = Field(alias="tipo")
    count: int = Field(alias="quantidade")
    products: list[ProductRead] = Field(alias="produtos")


class ReportPeriod(APIModel):
    start: date = Field(alias="inicio")
    end: date = Field(alias="fim")


class UpcomingVisits(APIModel):
    """Pets with consultations or boarding booked in the reporting window."""

    consultations: list[PetRead] = Field(alias="consultas")
    boarding: list[PetRead] = Field(alias="hotel")
    period: ReportPeriod = Field(alias="periodo")

