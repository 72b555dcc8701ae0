"""urlshort CLI — serve or check a redirect paths document.

Entry point registered as ``urlshort`` in ``pyproject.toml``::

    [project.scripts]
    urlshort = "urlshort.cli:main"
"""

import argparse
import sys


def _add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default=None,
        help="Document format (default: detect from file suffix)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``urlshort`` command."""
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="urlshort — redirect mapped paths, fall back for everything else.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- urlshort serve -----------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve redirects from a paths document")
    serve_parser.add_argument("paths", help="YAML or JSON file of path/url records")
    _add_format_argument(serve_parser)
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--log-level",
        default=None,
        choices=("critical", "error", "warning", "info", "debug"),
        help="Logging level (default: info)",
    )
    serve_parser.add_argument(
        "--fallback",
        default=None,
        help="Import string of the fallback handler (e.g. myapp:handler); default answers 404",
    )

    # -- urlshort check -----------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a paths document")
    check_parser.add_argument("paths", help="YAML or JSON file of path/url records")
    _add_format_argument(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from urlshort.cli._serve import serve

        serve(args)
    elif args.command == "check":
        from urlshort.cli._check import run_check

        run_check(args)
