"""Application factory for the pet shop API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import redis.asyncio as redis  # type: ignore[import-untyped]
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi_limiter import FastAPILimiter
from secure import Secure

from petshop.api import api_router
from petshop.api.errors import catch_unhandled_errors, register_exception_handlers
from petshop.core.config import Settings, get_settings
from petshop.db.session import Database
from petshop.integrations.viacep_client import ViaCepClient
from petshop.security.logging_filters import install_sensitive_filter

logger = logging.getLogger(__name__)

_secure_headers = Secure.with_default_headers()

CORS_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    redis_pool = None
    if settings.redis_url:
        try:
            redis_pool = redis.from_url(
                settings.redis_url, encoding="utf-8", decode_responses=True
            )
            await FastAPILimiter.init(redis_pool)
        except Exception:  # pragma: no cover - limiter startup is best effort
            logger.exception("Login rate limiter unavailable, continuing without it")
    try:
        yield
    finally:
        if redis_pool is not None:
            try:
                await FastAPILimiter.close()
                await redis_pool.aclose()
            except Exception:  # pragma: no cover - limiter shutdown
                logger.exception("Error shutting down login rate limiter")
        await app.state.database.dispose()


async def _apply_security_headers(request, call_next):  # type: ignore[no-untyped-def]
    response = await call_next(request)
    _secure_headers.set_headers(response)
    correlation_id = getattr(request.state, "correlation_id", None)
    if correlation_id:
        response.headers.setdefault(REQUEST_ID_HEADER, str(correlation_id))
    return response


def create_app(
    settings: Settings | None = None,
    *,
    database: Database | None = None,
    viacep_client: ViaCepClient | None = None,
) -> FastAPI:
    """Build the application around an explicit database handle."""
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)
    app.state.viacep_client = viacep_client or ViaCepClient.from_settings(settings)

    # registered first so it sits innermost and the outer layers still decorate the 500
    app.middleware("http")(catch_unhandled_errors)
    app.middleware("http")(_apply_security_headers)
    app.add_middleware(CorrelationIdMiddleware, header_name=REQUEST_ID_HEADER)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["http://localhost:3000"],
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=CORS_METHODS,
        allow_headers=["Authorization", "Content-Type", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )

    register_exception_handlers(app)
    install_sensitive_filter()
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def index() -> dict[str, str]:
        return {"message": settings.app_name, "docs": "/docs"}

    return app


app = create_app()
