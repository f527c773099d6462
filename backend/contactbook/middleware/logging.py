"""
Contact Book Backend — Request Logging Middleware
===================================================

What:  One access log line per HTTP request: method, path, status, duration.
Why:   Operational visibility without logging request bodies.
How:   Times the downstream call and logs at a level chosen by status code.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

What we log vs what we DON'T log (privacy):
    ✅ Log: method, path, status, duration, client IP, request ID
    ❌ Don't log: request bodies (sign-up and sign-in carry passwords)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from contactbook.middleware.request_id import request_id_var

logger = logging.getLogger("contactbook.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Level by status:
        5xx → ERROR, 4xx → WARNING, everything else → INFO.
    /health is skipped: probes hit it every few seconds.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path == "/health":
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
