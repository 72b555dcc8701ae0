"""Tests for urlshort.http.request — frozen Request with async body access."""

import pytest

from urlshort._internal.asgi import http_scope
from urlshort.http.request import Request


def _make_receive(*bodies: bytes):
    """Create an ASGI receive callable that yields bodies."""
    messages = []
    for i, body in enumerate(bodies):
        is_last = i == len(bodies) - 1
        messages.append({"type": "http.request", "body": body, "more_body": not is_last})
    if not messages:
        messages.append({"type": "http.request", "body": b"", "more_body": False})
    it = iter(messages)

    async def receive():
        return next(it)

    return receive


class TestRequestFromASGI:
    def test_basic_fields(self) -> None:
        scope = http_scope("post", "/users", server=("localhost", 8000), client=("127.0.0.1", 1))
        req = Request.from_asgi(scope, _make_receive())

        assert req.method == "POST"
        assert req.path == "/users"
        assert req.http_version == "1.1"
        assert req.server == ("localhost", 8000)
        assert req.client == ("127.0.0.1", 1)

    def test_headers_parsed(self) -> None:
        scope = http_scope("GET", "/", headers=((b"accept", b"*/*"),))
        req = Request.from_asgi(scope, _make_receive())

        assert req.headers["Accept"] == "*/*"

    def test_headers_from_lists(self) -> None:
        # Some servers send header pairs as lists, not tuples.
        scope = http_scope("GET", "/")
        scope["headers"] = [[b"accept", b"*/*"]]
        req = Request.from_asgi(scope, _make_receive())

        assert req.headers.raw == ((b"accept", b"*/*"),)

    def test_missing_optional_keys(self) -> None:
        req = Request.from_asgi({"type": "http", "method": "GET", "path": "/"}, _make_receive())

        assert req.query_string == b""
        assert req.http_version == "1.1"
        assert req.server is None
        assert req.client is None
        assert len(req.headers) == 0

    def test_url_includes_query(self) -> None:
        req = Request.from_asgi(http_scope("GET", "/a", query_string=b"x=1"), _make_receive())
        assert req.url == "/a?x=1"

    def test_url_without_query(self) -> None:
        req = Request.from_asgi(http_scope("GET", "/a"), _make_receive())
        assert req.url == "/a"

    def test_frozen(self) -> None:
        req = Request.from_asgi(http_scope("GET", "/"), _make_receive())
        with pytest.raises(AttributeError):
            req.path = "/other"  # type: ignore[misc]


class TestRequestBody:
    async def test_body_joins_chunks(self) -> None:
        req = Request.from_asgi(http_scope("POST", "/"), _make_receive(b"hel", b"lo"))
        assert await req.body() == b"hello"

    async def test_body_cached(self) -> None:
        req = Request.from_asgi(http_scope("POST", "/"), _make_receive(b"once"))
        assert await req.body() == b"once"
        # receive is exhausted; a second read must come from the cache
        assert await req.body() == b"once"

    async def test_text(self) -> None:
        req = Request.from_asgi(http_scope("POST", "/"), _make_receive("héllo".encode()))
        assert await req.text() == "héllo"

    async def test_disconnect_ends_stream(self) -> None:
        async def receive():
            return {"type": "http.disconnect"}

        req = Request.from_asgi(http_scope("POST", "/"), receive)
        assert await req.body() == b""
