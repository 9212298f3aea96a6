"""Shared schema bases and response envelopes."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

DataT = TypeVar("DataT")


class APIModel(BaseModel):
    """Base for payloads whose wire keys differ from attribute names."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class SuccessResponse(BaseModel, Generic[DataT]):
    """Envelope for successful responses."""

    status: Literal["success"] = "success"
    message: str | None = None
    data: DataT


class MessageResponse(BaseModel):
    """Envelope for successful responses without a payload."""

    status: Literal["success"] = "success"
    message: str


class FieldError(BaseModel):
    """A single rejected input field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Envelope for every error response."""

    status: Literal["error"] = "error"
    message: str
    errors: list[FieldError] | None = None
