"""``urlshort check`` — parse a paths document and print the resulting table."""

import argparse
import sys

from urlshort.document import load_rules
from urlshort.errors import ConfigurationError, ParseError
from urlshort.handlers import build_table


def run_check(args: argparse.Namespace) -> None:
    """Print ``path -> url`` for every entry, or the parse error and exit 1.

    Paths declared more than once are reported, since only the last
    declaration takes effect.
    """
    try:
        rules = load_rules(args.paths, args.format)
    except (ConfigurationError, ParseError, OSError) as exc:
        print(f"Error: {args.paths}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    table = build_table(rules)
    for path, url in table.items():
        print(f"{path} -> {url}")

    overridden = len(rules) - len(table)
    if overridden:
        print(
            f"{overridden} earlier declaration(s) overridden by later ones",
            file=sys.stderr,
        )
    print(f"{len(table)} redirect(s) OK", file=sys.stderr)
