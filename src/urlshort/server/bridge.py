"""Bridge to foreign ASGI applications.

``asgi_fallback`` lets an application written with any ASGI framework
serve every path the redirect table does not know::

    from urlshort import App, asgi_fallback, map_handler

    app = App(map_handler(paths, fallback=asgi_fallback(other_framework_app)))

The request is replayed into the foreign app with its original method,
path, query string, headers, and body, and the messages it sends are
collected into a Response. ``call_asgi`` is the same capture loop,
shared with the test client.
"""

import asyncio
from typing import Any

from urlshort._internal.asgi import ASGIApp, Message, Scope, http_scope
from urlshort.http.request import Request
from urlshort.http.response import Response
from urlshort.protocol import Handler


async def call_asgi(app: ASGIApp, scope: Scope, body: bytes = b"") -> Response:
    """Run *app* for one HTTP request and collect what it sends.

    After the request body is delivered, ``receive()`` blocks until the
    app has sent its final body chunk, so apps watching for a client
    disconnect keep streaming until they are done.
    """
    response_complete = asyncio.Event()
    body_sent = False

    async def receive() -> Message:
        nonlocal body_sent
        if not body_sent:
            body_sent = True
            return {"type": "http.request", "body": body, "more_body": False}
        await response_complete.wait()
        return {"type": "http.disconnect"}

    status = 200
    headers: list[tuple[bytes, bytes]] = []
    body_parts: list[bytes] = []

    async def send(message: Message) -> None:
        nonlocal status
        if message["type"] == "http.response.start":
            status = message["status"]
            headers.extend(message.get("headers", []))
        elif message["type"] == "http.response.body":
            body_parts.append(message.get("body", b""))
            if not message.get("more_body", False):
                response_complete.set()

    await app(scope, receive, send)

    content_type = "application/octet-stream"
    extra_headers: list[tuple[str, str]] = []
    for name_b, value_b in headers:
        name = name_b.decode("latin-1").lower()
        value = value_b.decode("utf-8", errors="replace")
        if name == "content-type":
            content_type = value
        elif name != "content-length":
            extra_headers.append((name, value))

    return Response(
        body=b"".join(body_parts),
        status=status,
        content_type=content_type,
        headers=tuple(extra_headers),
    )


def scope_for(request: Request) -> dict[str, Any]:
    """Rebuild an ASGI HTTP scope describing *request*."""
    return http_scope(
        request.method,
        request.path,
        query_string=request.query_string,
        headers=request.headers.raw,
        http_version=request.http_version,
        server=request.server,
        client=request.client,
    )


def asgi_fallback(app: ASGIApp) -> Handler:
    """Adapt a foreign ASGI 3.0 application into a fallback handler."""

    async def fallback(request: Request) -> Response:
        return await call_asgi(app, scope_for(request), await request.body())

    return fallback
