"""Ready-made fallback handlers."""

from urlshort.errors import NotFound
from urlshort.http.request import Request
from urlshort.http.response import Response
from urlshort.protocol import Handler


def not_found(request: Request) -> Response:
    """Answer every request with 404. The default fallback."""
    raise NotFound(f"No redirect for {request.path}")


def text_fallback(body: str, status: int = 200) -> Handler:
    """A fallback that always answers with the same plain-text body::

        handler = map_handler(paths, fallback=text_fallback("Hello, world!"))
    """
    response = Response(body=body, status=status)

    def fallback(request: Request) -> Response:
        return response

    return fallback
