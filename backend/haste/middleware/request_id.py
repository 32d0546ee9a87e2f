"""
Haste Store — Request ID Middleware
=====================================

What:  Assigns a correlation ID to each request and returns it in X-Request-ID.
Why:   Every log line and error body for one request shares the same ID.
How:   Uses the client's X-Request-ID when it is a short token of safe
       characters, otherwise a short UUID; stores it in a ContextVar for
       loggers and exception handlers.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Client IDs are echoed into headers, logs and error bodies
VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def accept_request_id(candidate: Optional[str]) -> Optional[str]:
    """Return the client-supplied ID if it is safe to echo, else None."""
    if candidate and VALID_REQUEST_ID.match(candidate):
        return candidate
    return None


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags each request with a correlation ID for document and asset logs."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = accept_request_id(request.headers.get(REQUEST_ID_HEADER)) or new_request_id()

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
