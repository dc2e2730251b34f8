"""FastAPI application entry point with lifespan management.

Startup: configure logging.
Shutdown: close the shared outbound HTTP client when the app owns it.

Run with any ASGI server, e.g. ``uvicorn dwiju_gateway.main:app``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from dwiju_gateway import __version__
from dwiju_gateway.config.settings import GatewaySettings
from dwiju_gateway.handlers import build_handlers
from dwiju_gateway.logging_config import configure_logging
from dwiju_gateway.middleware.cors import OpenCorsMiddleware
from dwiju_gateway.middleware.error_handler import register_error_handlers
from dwiju_gateway.middleware.request_id import RequestIdMiddleware
from dwiju_gateway.routers.capabilities import create_capability_router
from dwiju_gateway.routers.health import create_health_router

logger = logging.getLogger(__name__)


def create_app(
    settings: GatewaySettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings:
        Gateway settings; read from ``DWIJU_*`` environment variables when
        omitted.
    http_client:
        Outbound client shared by all providers. When omitted the app creates
        one and closes it on shutdown; a caller-supplied client stays open.
    """
    settings = settings or GatewaySettings()
    owns_client = http_client is None
    client = http_client or httpx.AsyncClient()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level, json_format=settings.log_json)
        configured = [name for name, ok in settings.configured_providers().items() if ok]
        logger.info("Starting gateway, configured providers: %s", ", ".join(configured) or "none")

        yield

        logger.info("Shutting down gateway")
        if owns_client:
            await client.aclose()

    app = FastAPI(
        title="Dwiju Gateway",
        version=__version__,
        lifespan=lifespan,
    )

    register_error_handlers(app)

    # Starlette applies middleware in reverse order: request_id wraps cors
    app.add_middleware(OpenCorsMiddleware)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(create_health_router(settings=settings))
    app.include_router(create_capability_router(handlers=build_handlers(settings, client)))

    app.state.settings = settings
    return app


app = create_app()
