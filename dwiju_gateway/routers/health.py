"""Health and readiness endpoints.

- GET /health — service status + which providers are configured
- GET /readiness — 200 only when the language model credential is present
"""

from __future__ import annotations

from fastapi import APIRouter, Response

from dwiju_gateway import __version__
from dwiju_gateway.config.settings import GatewaySettings


def create_health_router(*, settings: GatewaySettings) -> APIRouter:
    """Factory that creates the health router with injected settings."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    async def health() -> dict:
        """Service health check with provider configuration flags."""
        return {
            "success": True,
            "status": "healthy",
            "version": __version__,
            "providers": settings.configured_providers(),
        }

    @health_router.get("/readiness")
    async def readiness(response: Response) -> dict:
        """Readiness probe — most capabilities depend on the language model."""
        providers = settings.configured_providers()
        is_ready = providers["gemini"]
        if not is_ready:
            response.status_code = 503
            return {"success": False, "error": "Service not ready", "providers": providers}
        return {"success": True, "ready": True, "providers": providers}

    return health_router
