"""urlshort exception hierarchy.

Document parsing, configuration, and the ASGI adapter all raise and
catch these types.
"""

from dataclasses import dataclass


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Raised when server configuration or a document format is invalid."""


class ParseError(UrlshortError):
    """A redirect document could not be turned into rules.

    Raised for malformed YAML/JSON, a top level that is not a list,
    and records with a missing or non-string ``path`` or ``url``.
    ``index`` is the position of the offending record, or ``None``
    when the document as a whole is at fault.
    """

    def __init__(self, detail: str, *, index: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.index = index

    def __str__(self) -> str:
        if self.index is None:
            return self.detail
        return f"record {self.index}: {self.detail}"


@dataclass(frozen=True, slots=True)
class HTTPError(UrlshortError):
    """An error that maps directly to an HTTP status code.

    Raised by fallback handlers. The ASGI adapter catches these and
    turns them into a plain-text response with the same status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: nothing answers the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
