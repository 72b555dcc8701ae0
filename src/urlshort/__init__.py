"""urlshort — redirect mapped URL paths, fall back for everything else.

From an in-memory table::

    from urlshort import App, map_handler, text_fallback

    handler = map_handler(
        {
            "/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort",
            "/yaml-godoc": "https://godoc.org/gopkg.in/yaml.v2",
        },
        fallback=text_fallback("Hello, world!"),
    )
    app = App(handler)  # any ASGI server

From a YAML document::

    from urlshort import ParseError, yaml_handler

    try:
        handler = yaml_handler(Path("paths.yaml").read_bytes(), fallback=handler)
    except ParseError as exc:
        ...
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "ConfigurationError",
    "HTTPError",
    "Handler",
    "Middleware",
    "NotFound",
    "ParseError",
    "Redirect",
    "RedirectMiddleware",
    "RedirectRule",
    "Request",
    "Response",
    "ServerConfig",
    "UrlshortError",
    "asgi_fallback",
    "build_table",
    "json_handler",
    "load_rules",
    "map_handler",
    "not_found",
    "parse_document",
    "parse_json",
    "parse_yaml",
    "text_fallback",
    "yaml_handler",
]

# Public name -> defining module. Resolved on first access so
# ``import urlshort`` does not pull in PyYAML.
_LAZY_IMPORTS: dict[str, str] = {
    "App": "urlshort.app",
    "ConfigurationError": "urlshort.errors",
    "HTTPError": "urlshort.errors",
    "Handler": "urlshort.protocol",
    "Middleware": "urlshort.protocol",
    "NotFound": "urlshort.errors",
    "ParseError": "urlshort.errors",
    "Redirect": "urlshort.http.response",
    "RedirectMiddleware": "urlshort.handlers",
    "RedirectRule": "urlshort.document",
    "Request": "urlshort.http.request",
    "Response": "urlshort.http.response",
    "ServerConfig": "urlshort.config",
    "UrlshortError": "urlshort.errors",
    "asgi_fallback": "urlshort.server.bridge",
    "build_table": "urlshort.handlers",
    "json_handler": "urlshort.handlers",
    "load_rules": "urlshort.document",
    "map_handler": "urlshort.handlers",
    "not_found": "urlshort.fallbacks",
    "parse_document": "urlshort.document",
    "parse_json": "urlshort.document",
    "parse_yaml": "urlshort.document",
    "text_fallback": "urlshort.fallbacks",
    "yaml_handler": "urlshort.handlers",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API."""
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
