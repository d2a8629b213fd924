"""
Thoughts API — Rate Limiting Middleware
=========================================

What:  Per-IP sliding window rate limiter.
Why:   /register and /login run bcrypt on every call; an unthrottled client
       could pin the CPU or brute-force passwords.
How:   Keeps each IP's request timestamps in memory, drops the ones older
       than the window, and answers 429 once the window is full.

This is per-process state. Behind several uvicorn workers each worker
enforces its own limit.
"""

import logging
import time
from collections import defaultdict
from typing import Dict, List

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from thoughts_api.config import settings
from thoughts_api.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    In-memory sliding window rate limiter.

    Configuration (from settings):
        rate_limit_enabled:  Master switch, off by default
        rate_limit_requests: Max requests per window
        rate_limit_window:   Window duration in seconds

    Response on rate limit:
        HTTP 429 with a Retry-After header and the standard error body.
    """

    EXCLUDED_PATHS = {"/health", "/docs", "/openapi.json", "/redoc"}

    def __init__(self, app, **kwargs):
        super().__init__(app, **kwargs)
        self._requests: Dict[str, List[float]] = defaultdict(list)
        self._seen = 0

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not settings.rate_limit_enabled or request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        client_ip = (
            getattr(request.client, "host", "unknown")
            if request.client
            else "unknown"
        )

        now = time.time()
        window_start = now - settings.rate_limit_window

        self._requests[client_ip] = [
            ts for ts in self._requests[client_ip] if ts > window_start
        ]

        if len(self._requests[client_ip]) >= settings.rate_limit_requests:
            oldest = self._requests[client_ip][0]
            exc = RateLimitExceededError(
                retry_after=int(oldest + settings.rate_limit_window - now) + 1
            )

            logger.warning(
                "Rate limit exceeded for IP %s: %d requests in %ds window",
                client_ip,
                len(self._requests[client_ip]),
                settings.rate_limit_window,
            )

            # Raised exceptions don't reach the app's handlers from inside
            # BaseHTTPMiddleware, so the error body is built here
            return JSONResponse(
                status_code=429,
                content={
                    "error": "rate_limit_exceeded",
                    "message": exc.message,
                    "details": exc.context,
                },
                headers={"Retry-After": str(exc.retry_after)},
            )

        self._requests[client_ip].append(now)

        self._seen += 1
        if self._seen % 1000 == 0:
            self._cleanup_inactive_ips(window_start)

        return await call_next(request)

    def _cleanup_inactive_ips(self, window_start: float) -> None:
        """Drop IPs with no requests inside the current window."""
        inactive_ips = [
            ip for ip, timestamps in self._requests.items()
            if not timestamps or max(timestamps) < window_start
        ]
        for ip in inactive_ips:
            del self._requests[ip]

        if inactive_ips:
            logger.debug("Cleaned up %d inactive IP entries", len(inactive_ips))
