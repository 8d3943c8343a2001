# src/cityhall/middleware/logging.py

"""Request/response logging middleware for the City Hall API."""

import logging
import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("cityhall.api")

REQUEST_ID_HEADER = "X-Request-ID"


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and one per response.

    The request id is taken from an incoming X-Request-ID header when the
    client (or a proxy) sent one, otherwise a short random id is generated.
    It is echoed back on the response. Responses are logged at WARNING for
    4xx and ERROR for 5xx.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        client_host = request.client.host if request.client else "unknown"
        started = time.perf_counter()

        logger.info(
            "[%s] %s %s from %s",
            request_id,
            request.method,
            request.url.path,
            client_host,
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client_ip": client_host,
                "content_length": request.headers.get("content-length"),
            },
        )

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(
                "[%s] %s %s failed after %.2fms: %s",
                request_id,
                request.method,
                request.url.path,
                elapsed_ms,
                e,
                extra={"request_id": request_id, "duration_ms": round(elapsed_ms, 2)},
                exc_info=True,
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.log(
            _level_for(response.status_code),
            "[%s] %s %s -> %d (%.2fms)",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
            },
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response  # type: ignore[no-any-return]
