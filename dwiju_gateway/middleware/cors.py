"""Open CORS middleware.

Every capability is callable from any browser origin. Preflight ``OPTIONS``
requests are answered directly with the CORS headers and an empty body; all
other responses get the same headers added, error responses included.
"""

from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from dwiju_gateway.middleware.error_handler import CORS_HEADERS


class OpenCorsMiddleware(BaseHTTPMiddleware):
    """Answer preflight requests and stamp ``*`` CORS headers on responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response: Response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
