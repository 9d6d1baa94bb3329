"""
Rodrise School Management Backend — Request ID Middleware
==========================================================

What:  Assigns a short ID to each incoming request and echoes it in the response.
Why:   Every log line of one request shares the ID, and the X-Request-ID
       header lets a user quote it when reporting a failed save.
How:   Reuses the client's X-Request-ID header or generates 8 hex chars,
       stores it in a ContextVar and on request.state.
When:  Outermost middleware (runs before all other processing).
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate the first 8 chars of a UUID4
        3. Store in ContextVar (loggers, handlers) and request.state (routes)
        4. Add to response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid
        return response
