"""Store schemas."""

from __future__ import annotations

from pydantic import Field

from petshop.schemas.common import APIModel


class StoreCreate(APIModel):
    """Payload for opening a store."""

    name: str = Field(alias="nome", min_length=2)
    cep: str | None = None
    number: str | None = Field(default=None, alias="numero")
    complement: str | None = Field(default=None, alias="complemento")


class StoreRead(APIModel):
    """Serialized store."""

    id: int = Field(alias="idLoja")
    name: str = Field(alias="nome")
    image: str = Field(alias="img")
    cep: str | None = None
    number: str | None = Field(default=None, alias="numero")
    complement: str | None = Field(default=None, alias="complemento")
    staff_id: str | None = Field(default=None, alias="idFuncionario")


class StoreSummary(APIModel):
    id: int = Field(alias="idLoja")
    name: str = Field(alias="nome")
