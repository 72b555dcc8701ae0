"""Handler and Middleware shapes.

A handler is any callable matching one of::

    def handler(request: Request) -> Response: ...
    async def handler(request: Request) -> Response: ...

No base class required. Fallbacks are checked by shape, not lineage,
so a handler from any framework works as long as it takes a
``Request`` and returns a ``Response`` (or something ``negotiate``
understands). The handlers urlshort builds are always ``async``.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from urlshort.http.request import Request
from urlshort.http.response import Redirect, Response

# What a handler may hand back; the ASGI adapter normalizes it
HandlerResult: TypeAlias = Response | Redirect | str | bytes

# Anything that answers a request, sync or async
Handler: TypeAlias = Callable[[Request], HandlerResult | Awaitable[HandlerResult]]

# The async handler next in a middleware chain
Next: TypeAlias = Callable[[Request], Awaitable[HandlerResult]]


class Middleware(Protocol):
    """Protocol for middleware wrapped around a handler::

        async def timing(request: Request, next: Next) -> HandlerResult:
            start = time.monotonic()
            response = await next(request)
            ...
            return response
    """

    async def __call__(self, request: Request, next: Next) -> HandlerResult: ...
