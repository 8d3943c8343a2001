# src/cityhall/middleware/body_limit.py

"""Rejects requests whose body exceeds the configured cap."""

import logging

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger("cityhall.api")

TOO_LARGE_DETAIL = "Request body too large"


class BodySizeLimitMiddleware:
    """Return 413 once a request body is larger than `max_body_bytes`.

    A declared Content-Length over the cap is refused before the app runs.
    Bodies without one (chunked uploads) are counted as they are received,
    and reading past the cap raises a 413 HTTPException inside the app.

    Photos are uploaded inline as data URLs, so the default cap is large.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None and declared.isdigit():
            if int(declared) > self.max_body_bytes:
                self._log_rejection(scope, int(declared))
                response = JSONResponse(
                    status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    content={"detail": TOO_LARGE_DETAIL},
                )
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    self._log_rejection(scope, received)
                    raise HTTPException(
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                        detail=TOO_LARGE_DETAIL,
                    )
            return message

        await self.app(scope, limited_receive, send)

    def _log_rejection(self, scope: Scope, size: int) -> None:
        logger.warning(
            "Rejected %s %s: body of at least %d bytes exceeds %d",
            scope.get("method"),
            scope.get("path"),
            size,
            self.max_body_bytes,
        )
