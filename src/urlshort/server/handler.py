"""ASGI handler — translates ASGI scope/messages to urlshort types.

The only place that touches raw ASGI on the serving side. Builds a
Request from the scope, awaits the handler, and sends the normalized
Response back through ASGI send().
"""

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort._internal.invoke import invoke
from urlshort.errors import HTTPError
from urlshort.http.request import Request
from urlshort.protocol import Handler
from urlshort.server.errors import handle_http_error, handle_internal_error
from urlshort.server.negotiation import negotiate
from urlshort.server.sender import send_response


async def handle_request(scope: Scope, receive: Receive, send: Send, *, handler: Handler) -> None:
    """Process a single HTTP request through *handler*."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = negotiate(await invoke(handler, request))
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send)
