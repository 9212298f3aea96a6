"""Operational errors raised by services and translated by the API layer."""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    """Base class for errors that carry an explicit HTTP status."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class SlotUnavailableError(BadRequestError):
    """Another active appointment already holds the service time slot."""

    def __init__(self) -> None:
        super().__init__("Já existe um agendamento para este horário")


class InvalidStatusTransition(BadRequestError):
    """The requested appointment status is not reachable from the current one."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"Transição de status inválida: {current} -> {requested}"
        )
        self.current = current
        self.requested = requested


__all__ = [
    "AppError",
    "BadRequestError",
    "ConflictError",
    "ForbiddenError",
    "InvalidStatusTransition",
    "NotFoundError",
    "SlotUnavailableError",
    "UnauthorizedError",
]
