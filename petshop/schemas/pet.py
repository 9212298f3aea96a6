"""Pydantic schemas for pet profiles."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field, PositiveInt, field_validator

from petshop.schemas.common import APIModel


def _coerce_age(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class OwnerSummary(APIModel):
    """Lightweight owner representation embedded in pet payloads."""

    first_name: str = Field(alias="nome")
    last_name: str | None = Field(default=None, alias="sobrenome")
    email: str
    mobile_phone: str | None = Field(default=None, alias="celular")


class PetCreate(APIModel):
    """Payload for registering a pet."""

    name: str = Field(alias="nome", min_length=2)
    species: str = Field(alias="tipo", min_length=2)
    breed: str | None = Field(default=None, alias="raca")
    age: str | None = Field(default=None, alias="idade")
    consultation_at: datetime | None = Field(default=None, alias="consulta")
    boarding_at: datetime | None = Field(default=None, alias="hotel")

    @field_validator("age", mode="before")
    @classmethod
    def _age_as_text(cls, value: Any) -> Any:
        return _coerce_age(value)


class PetUpdate(APIModel):
    """Mutable pet fields."""

    name: str | None = Field(default=None, alias="nome", min_length=2)
    species: str | None = Field(default=None, alias="tipo", min_length=2)
    breed: str | None = Field(default=None, alias="raca")
    age: str | None = Field(default=None, alias="idade")
    consultation_at: datetime | None = Field(default=None, alias="consulta")
    boarding_at: datetime | None = Field(default=None, alias="hotel")

    @field_validator("age", mode="before")
    @classmethod
    def _age_as_text(cls, value: Any) -> Any:
        return _coerce_age(value)


class PetSummary(APIModel):
    """Pet fields without the owner."""

    id: int = Field(alias="idPet")
    name: str = Field(alias="nome")
    species: str = Field(alias="tipo")
    breed: str | None = Field(default=None, alias="raca")
    age: str | None = Field(default=None, alias="idade")
    consultation_at: datetime | None = Field(default=None, alias="consulta")
    boarding_at: datetime | None = Field(default=None, alias="hotel")


class PetRead(PetSummary):
    """Serialized pet representation."""

    owner_cpf: str = Field(alias="idUsuario")
    owner: OwnerSummary | None = Field(default=None, alias="usuario")


class VisitBooking(APIModel):
    """Payload for setting a pet's consultation or boarding date."""

    pet_id: PositiveInt = Field(alias="petId")
    visit_type: Literal["consulta", "hotel"] = Field(alias="tipoServico")
    when: datetime = Field(alias="data")
