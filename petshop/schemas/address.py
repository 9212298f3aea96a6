"""Address schemas."""

from __future__ import annotations

from pydantic import Field

from petshop.schemas.common import APIModel


class AddressRead(APIModel):
    """Serialized address."""

    cep: str
    street: str = Field(alias="rua")
    neighborhood: str = Field(alias="bairro")
    city: str = Field(alias="cidade")
    state: str = Field(alias="estado")


class PostalCodeLookup(AddressRead):
    """Address returned by a CEP lookup, flagged when it was already stored."""

    already_stored: bool = Field(alias="jaExiste")
