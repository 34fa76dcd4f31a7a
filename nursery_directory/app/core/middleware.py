"""
ASGI middleware guarding the API.

``OriginAllowListMiddleware`` rejects browser requests whose ``Origin``
header is not on the configured allow-list before they reach routing.
Requests without an ``Origin`` header (same-origin navigation, curl,
server-to-server calls) pass through.  CORS response headers for
allowed origins are added separately by Starlette's ``CORSMiddleware``.

``BodySizeLimitMiddleware`` refuses request bodies larger than the
configured limit, whether announced by ``Content-Length`` or streamed.
"""

import logging
from typing import Iterable, List

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send


logger = logging.getLogger(__name__)


class OriginAllowListMiddleware:
    """Reject requests from origins that are not explicitly allowed."""

    def __init__(self, app: ASGIApp, allowed_origins: Iterable[str]) -> None:
        self.app = app
        self.allowed_origins = frozenset(allowed_origins)

    def is_allowed(self, origin: str | None) -> bool:
        return origin is None or origin in self.allowed_origins

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        origin = Headers(scope=scope).get("origin")
        if self.is_allowed(origin):
            await self.app(scope, receive, send)
            return
        logger.warning("Blocked by CORS: %s", origin)
        response = JSONResponse({"message": "Not allowed by CORS"}, status_code=403)
        await response(scope, receive, send)


class BodySizeLimitMiddleware:
    """Reject request bodies larger than ``max_bytes``.

    A declared ``Content-Length`` is checked up front.  Bodies sent
    without one (chunked uploads) are read here, counting bytes as
    they arrive, and refused as soon as the running total passes the
    limit.  Accepted chunks are replayed to the application unchanged,
    so buffering stops one chunk past ``max_bytes``.
    """

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        self.app = app
        self.max_bytes = max_bytes

    async def reject(self, scope: Scope, receive: Receive, send: Send, size: str) -> None:
        logger.warning("Rejected request body of %s bytes", size)
        response = JSONResponse({"message": "Request body too large"}, status_code=413)
        await response(scope, receive, send)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None:
            if content_length.isdigit() and int(content_length) > self.max_bytes:
                await self.reject(scope, receive, send, content_length)
                return
            await self.app(scope, receive, send)
            return

        buffered: List[Message] = []
        received = 0
        more_body = True
        while more_body:
            message = await receive()
            buffered.append(message)
            if message["type"] != "http.request":
                break
            received += len(message.get("body", b""))
            if received > self.max_bytes:
                await self.reject(scope, receive, send, f"more than {self.max_bytes}")
                return
            more_body = message.get("more_body", False)

        async def replay() -> Message:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await self.app(scope, replay, send)
