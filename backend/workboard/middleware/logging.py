"""
Workboard Backend: Request Logging Middleware
===============================================

What:  One access log line per HTTP request.
How:   Times the downstream call and logs the request line, status and
       duration on the "workboard.access" logger, tagged with the ID that
       RequestIDMiddleware put on request.state.

Log level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

A 500 caused by the database also names the table and the operation that
failed; the storage error handler leaves them on request.state. Request
bodies are never logged.
"""

import logging
import time
from typing import Any, Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("workboard.access")

# Hit every few seconds by orchestrators
QUIET_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request/response pair with its duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        request_line = f"{request.method} {request.url.path}"
        rid = getattr(request.state, "request_id", "")
        failure: Optional[Dict[str, Any]] = getattr(request.state, "storage_error", None)

        message = "[%s] %s -> %d in %.1fms"
        args = [rid, request_line, response.status_code, elapsed_ms]
        if failure:
            message += " (storage: %s on %s)"
            args += [failure.get("operation"), failure.get("table")]

        logger.log(
            level_for_status(response.status_code),
            message,
            *args,
            extra={
                "request_id": rid,
                "request_line": request_line,
                "status": response.status_code,
                "duration_ms": elapsed_ms,
                "storage_error": failure,
            },
        )
        return response
