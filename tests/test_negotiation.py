"""Tests for urlshort.server.negotiation — handler return values to Response."""

import pytest

from urlshort.http.response import Redirect, Response
from urlshort.server.negotiation import negotiate


class TestNegotiate:
    def test_response_passthrough(self) -> None:
        r = Response("x", status=418)
        assert negotiate(r) is r

    def test_redirect(self) -> None:
        r = negotiate(Redirect("/x"))
        assert r.status == 302
        assert r.location == "/x"

    def test_str(self) -> None:
        r = negotiate("hello")
        assert r.status == 200
        assert r.text == "hello"
        assert r.content_type.startswith("text/plain")

    def test_bytes(self) -> None:
        r = negotiate(b"\x00\x01")
        assert r.body == b"\x00\x01"
        assert r.content_type == "application/octet-stream"

    @pytest.mark.parametrize("value", [None, 42, {"a": 1}])
    def test_unsupported(self, value: object) -> None:
        with pytest.raises(TypeError, match="expected Response"):
            negotiate(value)
