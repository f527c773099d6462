"""
Contact Book Backend — Request ID Middleware
==============================================

What:  Assigns a short correlation ID to each incoming request and echoes it
       in the X-Request-ID response header.
Why:   Every log line and every error body of a request share the same ID,
       so a user-reported error can be matched to server logs.
How:   Reuses the client's X-Request-ID when it is a plain token (at most
       64 letters, digits, ".", "_" or "-"), otherwise generates one; stores
       it in a ContextVar (coroutine-local) and on request.state.

Client IDs are echoed into log lines and error bodies, so anything longer or
containing other characters (spaces, newlines, markup) is replaced.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# ContextVar, not threading.local: concurrent requests share one thread
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

MAX_REQUEST_ID_LENGTH = 64
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,%d}" % MAX_REQUEST_ID_LENGTH)


def resolve_request_id(supplied: Optional[str]) -> str:
    """Returns the client's ID if it is a plain token, else a fresh 8-hex-char one."""
    if supplied and _REQUEST_ID_PATTERN.fullmatch(supplied):
        return supplied
    # 8 hex chars are enough to correlate within a log window
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get("X-Request-ID"))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
