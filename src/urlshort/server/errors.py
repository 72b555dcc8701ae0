"""Error handling pipeline for served requests.

Maps HTTPError exceptions and unexpected failures to Response objects
so every request gets an answer.
"""

import logging

from urlshort.errors import HTTPError
from urlshort.http.request import Request
from urlshort.http.response import Response

logger = logging.getLogger("urlshort.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Turn an HTTPError into a plain-text response with its status and headers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    resp = Response(body=exc.detail or f"Error {exc.status}").with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Log an unexpected exception and answer 500."""
    logger.exception("500 %s %s", request.method, request.path, exc_info=exc)
    return Response(body="Internal Server Error", status=500)
