"""Redirect handlers — exact-path lookup with a fallback on miss.

Build a handler from an in-memory table::

    from urlshort import map_handler, not_found

    handler = map_handler(
        {"/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort"},
        fallback=not_found,
    )

or from a YAML/JSON document::

    handler = yaml_handler(Path("paths.yaml").read_bytes(), fallback=not_found)

Every handler built here is ``async``. A path in the table gets a
302 to its url; any other request is passed to the fallback as-is and
whatever the fallback returns (or raises) goes back to the caller
untouched.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TypeAlias

from urlshort._internal.invoke import invoke
from urlshort.document import RedirectRule, parse_json, parse_yaml
from urlshort.http.request import Request
from urlshort.http.response import Redirect
from urlshort.protocol import Handler, HandlerResult, Next

# Read-only path -> url mapping captured by a handler
RedirectTable: TypeAlias = Mapping[str, str]


def build_table(rules: Iterable[RedirectRule]) -> RedirectTable:
    """Collapse ordered rules into a table; a later rule for a path wins."""
    table: dict[str, str] = {}
    for rule in rules:
        table[rule.path] = rule.url
    return MappingProxyType(table)


def map_handler(table: Mapping[str, str], fallback: Handler) -> Handler:
    """Redirect paths found in *table*; delegate everything else to *fallback*.

    The table is copied, so later changes to the caller's mapping do
    not leak into the handler.
    """
    paths: RedirectTable = MappingProxyType(dict(table))

    async def handler(request: Request) -> HandlerResult:
        destination = paths.get(request.path)
        if destination is None:
            return await invoke(fallback, request)
        return Redirect(destination).to_response()

    return handler


def yaml_handler(data: bytes | str, fallback: Handler) -> Handler:
    """Parse a YAML redirect document and build a handler from it.

    Raises:
        ParseError: The document is malformed; no handler is built.
    """
    return map_handler(build_table(parse_yaml(data)), fallback)


def json_handler(data: bytes | str, fallback: Handler) -> Handler:
    """Parse a JSON redirect document and build a handler from it.

    Raises:
        ParseError: The document is malformed; no handler is built.
    """
    return map_handler(build_table(parse_json(data)), fallback)


class RedirectMiddleware:
    """The redirect lookup in middleware shape.

    Useful when the fallback is only known per call, e.g. inside a
    larger middleware chain::

        redirects = RedirectMiddleware({"/docs": "https://example.com/docs"})
        response = await redirects(request, next)
    """

    __slots__ = ("_paths",)

    def __init__(self, table: Mapping[str, str]) -> None:
        self._paths: RedirectTable = MappingProxyType(dict(table))

    @property
    def table(self) -> RedirectTable:
        return self._paths

    async def __call__(self, request: Request, next: Next) -> HandlerResult:
        destination = self._paths.get(request.path)
        if destination is None:
            return await next(request)
        return Redirect(destination).to_response()
