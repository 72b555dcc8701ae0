"""``urlshort serve`` — build a redirect handler from a file and serve it."""

import argparse
import dataclasses
import logging
import sys

from urlshort.app import App
from urlshort.cli._resolve import resolve_handler
from urlshort.config import ServerConfig
from urlshort.document import load_rules
from urlshort.errors import ConfigurationError, ParseError
from urlshort.fallbacks import not_found
from urlshort.handlers import build_table, map_handler

logger = logging.getLogger("urlshort.cli")


def build_config(args: argparse.Namespace) -> ServerConfig:
    """Overlay the CLI flags that were given onto the default config."""
    overrides = {
        name: value
        for name, value in (
            ("host", args.host),
            ("port", args.port),
            ("log_level", args.log_level),
            ("format", args.format),
        )
        if value is not None
    }
    config = dataclasses.replace(ServerConfig(), **overrides)
    config.validate()
    return config


def build_app(args: argparse.Namespace, config: ServerConfig) -> App:
    """Load the paths document and wrap the resulting handler in an App."""
    fallback = resolve_handler(args.fallback) if args.fallback else not_found
    table = build_table(load_rules(args.paths, config.format))
    logger.info("Loaded %d redirects from %s", len(table), args.paths)
    return App(map_handler(table, fallback), config)


def serve(args: argparse.Namespace) -> None:
    """Start serving redirects; exit 1 on a bad document or configuration."""
    try:
        config = build_config(args)
        logging.basicConfig(
            level=config.log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        app = build_app(args, config)
    except (ConfigurationError, ParseError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: cannot load fallback {args.fallback!r}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from urlshort.server.dev import run_server

    run_server(app, config.host, config.port)
