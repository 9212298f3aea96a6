"""Customer account schemas."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field

from petshop.schemas.address import AddressRead
from petshop.schemas.common import APIModel
from petshop.schemas.pet import PetSummary


class LoginRequest(BaseModel):
    """Credentials shared by account and staff login."""

    email: EmailStr
    senha: str = Field(min_length=1)


class AccountCreate(APIModel):
    """Self-registration payload."""

    cpf: str = Field(min_length=11, max_length=14)
    first_name: str = Field(alias="nome", min_length=2)
    last_name: str | None = Field(default=None, alias="sobrenome", min_length=2)
    email: EmailStr
    password: str = Field(alias="senha", min_length=6)
    mobile_phone: str | None = Field(default=None, alias="celular")
    cep: str | None = None
    number: str | None = Field(default=None, alias="numero")
    complement: str | None = Field(default=None, alias="complemento")


class AccountUpdate(APIModel):
    """Mutable profile fields."""

    first_name: str | None = Field(default=None, alias="nome", min_length=2)
    last_name: str | None = Field(default=None, alias="sobrenome", min_length=2)
    email: EmailStr | None = None
    password: str | None = Field(default=None, alias="senha", min_length=6)
    mobile_phone: str | None = Field(default=None, alias="celular")
    cep: str | None = None
    number: str | None = Field(default=None, alias="numero")
    complement: str | None = Field(default=None, alias="complemento")


class AccountRead(APIModel):
    """Serialized account; never carries the password hash."""

    cpf: str
    first_name: str = Field(alias="nome")
    last_name: str | None = Field(default=None, alias="sobrenome")
    email: str
    mobile_phone: str | None = Field(default=None, alias="celular")
    cep: str | None = None
    number: str | None = Field(default=None, alias="numero")
    complement: str | None = Field(default=None, alias="complemento")
    avatar: str = Field(alias="img")
    is_logged_in: bool = Field(alias="logado")


class AccountProfile(AccountRead):
    """Account with its address and pets."""

    address: AddressRead | None = Field(default=None, alias="endereco")
    pets: list[PetSummary] = Field(default_factory=list)


class AccountLogin(BaseModel):
    """Result of a successful account login."""

    usuario: AccountRead
    token: str
