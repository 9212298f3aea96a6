"""API router modules."""

from .v1 import router as api_router

__all__ = ["api_router"]
