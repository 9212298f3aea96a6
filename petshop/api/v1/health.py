"""Health check endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("", summary="Service health status")
async def healthcheck(request: Request) -> dict[str, str]:
    """Return application health metadata."""
    settings = request.app.state.settings
    return {
        "status": "ok",
        "message": "PetShop API está funcionando!",
        "service": settings.app_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "environment": settings.app_env,
    }
