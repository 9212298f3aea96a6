"""Translate raised errors into the JSON error envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from petshop.core.errors import AppError
from petshop.schemas.common import ErrorResponse, FieldError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"
VALIDATION_ERROR_MESSAGE = "Dados inválidos"


def error_response(
    status_code: int,
    message: str,
    errors: list[FieldError] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )


def _field_name(location: tuple[int | str, ...]) -> str:
    parts = [str(part) for part in location if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def handle_app_error(_: Request, exc: AppError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(exc.status_code, exc.message, headers=headers)


async def handle_validation_error(
    _: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        FieldError(field=_field_name(tuple(error.get("loc", ()))), message=error["msg"])
        for error in exc.errors()
    ]
    return error_response(
        status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR_MESSAGE, errors=errors
    )


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    detail = str(exc.orig)
    lowered = detail.lower()
    if "unique" in lowered or "duplicate" in lowered:
        return error_response(status.HTTP_409_CONFLICT, "Registro já existe")
    if "foreign key" in lowered:
        return error_response(
            status.HTTP_404_NOT_FOUND, "Registro relacionado não encontrado"
        )
    logger.error(
        "Unclassified integrity error on %s %s: %s",
        request.method,
        request.url.path,
        detail,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
    )


async def handle_http_exception(
    _: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Erro na requisição"
    return error_response(exc.status_code, message, headers=exc.headers)


async def catch_unhandled_errors(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Collapse anything unclassified into a generic 500."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
        )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, handle_app_error)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, handle_validation_error  # type: ignore[arg-type]
    )
    app.add_exception_handler(IntegrityError, handle_integrity_error)  # type: ignore[arg-type]
    app.add_exception_handler(
        StarletteHTTPException, handle_http_exception  # type: ignore[arg-type]
    )
