"""Health check endpoint."""

from fastapi import APIRouter, Request

from lingorelay.core.config import settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(request: Request) -> dict:
    """Liveness plus the configured provider cascade."""
    return {
        "status": "ok",
        "env": settings.app_env,
        "providers": getattr(request.app.state, "provider_names", []),
        "pair_store": settings.pair_store,
    }
