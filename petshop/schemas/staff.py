"""Staff schemas."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field

from petshop.models.staff import StaffRole
from petshop.schemas.address import AddressRead
from petshop.schemas.common import APIModel


class StaffCreate(APIModel):
    """Payload for registering a staff member."""

    staff_id: str = Field(alias="idFuncionario", min_length=1, max_length=64)
    first_name: str = Field(alias="nome", min_length=2)
    last_name: str = Field(alias="sobrenome", min_length=2)
    email: EmailStr
    password: str = Field(alias="senha", min_length=6)
    role: StaffRole = Field(default=StaffRole.DEFAULT, alias="funcao")
    phone: str | None = Field(default=None, alias="telefone")
    cep: str | None = None
    number: str | None = Field(default=None, alias="numero")
    complement: str | None = Field(default=None, alias="complemento")


class StaffUpdate(APIModel):
    """Mutable staff profile fields."""

    first_name: str | None = Field(default=None, alias="nome", min_length=2)
    last_name: str | None = Field(default=None, alias="sobrenome", min_length=2)
    email: EmailStr | None = None
    password: str | None = Field(default=None, alias="senha", min_length=6)
    role: StaffRole | None = Field(default=None, alias="funcao")
    phone: str | None = Field(default=None, alias="telefone")
    cep: str | None = None
    number: str | None = Field(default=None, alias="numero")
    complement: str | None = Field(default=None, alias="complemento")


class StaffRead(APIModel):
    """Serialized staff member."""

    staff_id: str = Field(alias="idFuncionario")
    first_name: str = Field(alias="nome")
    last_name: str = Field(alias="sobrenome")
    email: str
    role: StaffRole = Field(alias="funcao")
    phone: str | None = Field(default=None, alias="telefone")
    cep: str | None = None
    number: str | None = Field(default=None, alias="numero")
    complement: str | None = Field(default=None, alias="complemento")
    avatar: str = Field(alias="img")
    is_logged_in: bool = Field(alias="logado")


class StaffProfile(StaffRead):
    """Staff member with the resolved address."""

    address: AddressRead | None = Field(default=None, alias="endereco")


class StaffSummary(APIModel):
    """Staff fields embedded in catalog payloads."""

    staff_id: str = Field(alias="idFuncionario")
    first_name: str = Field(alias="nome")
    last_name: str = Field(alias="sobrenome")
    role: StaffRole = Field(alias="funcao")


class StaffLogin(BaseModel):
    """Result of a successful staff login."""

    funcionario: StaffRead
    token: str
