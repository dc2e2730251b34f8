"""HTTP routers."""

from dwiju_gateway.routers.capabilities import create_capability_router
from dwiju_gateway.routers.health import create_health_router

__all__ = ["create_capability_router", "create_health_router"]
