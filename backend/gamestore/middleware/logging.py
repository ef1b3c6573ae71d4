"""
GameStore Backend - Request Logging Middleware
================================================

What:  One access log line per HTTP request.
How:   Times the request from middleware entry to response and logs
       method, path, status, duration, request id and client address.
       Level follows the status class: 5xx ERROR, 4xx WARNING, else INFO.

Example line:
    POST /games 201 4.2ms [a1b2c3d4] from 127.0.0.1 -> http://localhost:8000/games/6

Not logged: request bodies.
"""

import logging
import time
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from gamestore.middleware.request_id import request_id_var

logger = logging.getLogger("gamestore.access")


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Access log for the catalog routes.

    Args:
        skip_paths: Paths that are never logged. Defaults to the health
            probe, which would otherwise drown the catalog traffic.
    """

    def __init__(self, app: ASGIApp, skip_paths: Iterable[str] = ("/health",)):
        super().__init__(app)
        self.skip_paths = frozenset(skip_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.skip_paths:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        client = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        line = "%s %s %d %.1fms [%s] from %s"
        args = [request.method, path, response.status_code, elapsed_ms, rid, client]

        # Created resources: record where they ended up
        location = response.headers.get("location")
        if location:
            line += " -> %s"
            args.append(location)

        logger.log(
            _level_for(response.status_code),
            line,
            *args,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
            },
        )
        return response
