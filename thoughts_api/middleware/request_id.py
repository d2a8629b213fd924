"""
Thoughts API — Request ID Middleware
======================================

What:  Assigns an id to each request and echoes it in `X-Request-ID`.
Why:   Every log line and every JSON error body for a request carries the
       same id, so a client-reported error can be matched to server logs.
How:   Client-supplied `X-Request-ID` is reused; otherwise a short UUID prefix.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
