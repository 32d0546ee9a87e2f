"""
Haste Store — Request Logging Middleware
==========================================

What:  One access log line per HTTP request with status and duration.
How:   Measures from middleware entry to response return; picks the log level
       from the status class.

What we log vs what we DON'T log (privacy):
    Log: method, path, status, duration, client IP, request ID
    Don't log: request bodies (pastes may contain anything), response bodies
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from haste.middleware.request_id import request_id_var

logger = logging.getLogger("haste.access")

# Probed every few seconds by orchestrators; not worth a log line each
QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Typical durations:
        - GET /raw/<key> (memory store): < 2ms
        - GET /documents/<key> (database store): 2-20ms
        - GET /<spa path> with index.html fallback: two file lookups, < 5ms
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        if path in QUIET_PATHS:
            return await call_next(request)

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
