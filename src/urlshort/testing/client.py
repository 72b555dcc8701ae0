"""Async test client for urlshort handlers.

Uses the same Request and Response types as production.
No wrapper translation layer.
"""

from __future__ import annotations

from urlshort._internal.asgi import http_scope
from urlshort.app import App
from urlshort.http.headers import Headers
from urlshort.http.response import Response
from urlshort.protocol import Handler
from urlshort.server.bridge import call_asgi


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client for urlshort handlers and apps.

    Accepts a bare handler or an ``App``. Requests go through the ASGI
    interface directly, so error mapping and header encoding are the
    same as in production. No sockets involved.

    Usage::

        async with TestClient(map_handler(paths, fallback=not_found)) as client:
            response = await client.get("/urlshort-godoc")
            assert response.status == 302
    """

    __slots__ = ("app",)

    def __init__(self, app: App | Handler) -> None:
        self.app = app if isinstance(app, App) else App(app)

    async def __aenter__(self) -> TestClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def head(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a HEAD request."""
        return await self.request("HEAD", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send a POST request."""
        return await self.request("POST", path, headers=headers, body=body)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send an arbitrary request through the ASGI app."""
        path_part, _, query_string = path.partition("?")

        raw_headers = Headers.from_mapping(headers or {}).raw
        scope = http_scope(
            method,
            path_part,
            query_string=query_string.encode("latin-1"),
            headers=raw_headers,
        )
        return await call_asgi(self.app, scope, body or b"")
