"""ASGI type aliases shared by the adapter, bridge, and test client."""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Message: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


def http_scope(
    method: str,
    path: str,
    *,
    query_string: bytes = b"",
    headers: tuple[tuple[bytes, bytes], ...] = (),
    http_version: str = "1.1",
    server: tuple[str, int] | None = ("testserver", 80),
    client: tuple[str, int] | None = ("127.0.0.1", 0),
) -> dict[str, Any]:
    """Build a minimal ASGI 3.0 HTTP scope dict."""
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": http_version,
        "method": method.upper(),
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": query_string,
        "root_path": "",
        "headers": list(headers),
        "server": server,
        "client": client,
    }
