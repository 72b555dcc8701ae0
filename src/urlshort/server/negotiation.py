"""Normalize handler return values into a Response.

Handlers may return:

1. ``Response``   -> passed through unchanged
2. ``Redirect``   -> empty Response with status and Location header
3. ``str``        -> 200 plain-text Response
4. ``bytes``      -> 200 Response with ``application/octet-stream``
"""

from typing import Any

from urlshort.http.response import Redirect, Response


def negotiate(value: Any) -> Response:
    """Convert a handler return value to a Response."""
    match value:
        case Response():
            return value
        case Redirect():
            return value.to_response()
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case _:
            msg = (
                f"Handler returned {type(value).__name__}, "
                f"expected Response, Redirect, str, or bytes."
            )
            raise TypeError(msg)
