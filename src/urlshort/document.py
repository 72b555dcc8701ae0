"""Redirect documents — YAML or JSON lists of ``path``/``url`` records.

A document looks like::

    - path: /urlshort
      url: https://github.com/gophercises/urlshort
    - path: /urlshort-final
      url: https://github.com/gophercises/urlshort/tree/solution

or the JSON equivalent. Records are returned in document order; keys
other than ``path`` and ``url`` are ignored. Parsing is the only step
that can fail, and it fails with ``ParseError``.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from urlshort.errors import ConfigurationError, ParseError

logger = logging.getLogger("urlshort.document")


@dataclass(frozen=True, slots=True)
class RedirectRule:
    """One ``path`` → ``url`` pair, exactly as it appeared in the document."""

    path: str
    url: str


def _decode(data: bytes | str) -> str:
    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"document is not valid UTF-8: {exc}") from exc


def _field(record: dict[Any, Any], name: str, index: int) -> str:
    if name not in record:
        raise ParseError(f"missing required field {name!r}", index=index)
    value = record[name]
    if not isinstance(value, str):
        raise ParseError(
            f"field {name!r} must be a string, got {type(value).__name__}",
            index=index,
        )
    return value


def rules_from_data(data: Any) -> list[RedirectRule]:
    """Validate already-decoded document data and build rules from it.

    ``None`` (an empty document) yields no rules.
    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise ParseError(f"document must be a list of records, got {type(data).__name__}")

    rules: list[RedirectRule] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ParseError(
                f"record must be a mapping, got {type(record).__name__}",
                index=index,
            )
        rules.append(
            RedirectRule(
                path=_field(record, "path", index),
                url=_field(record, "url", index),
            )
        )
    return rules


def parse_yaml(data: bytes | str) -> list[RedirectRule]:
    """Parse a YAML redirect document.

    Uses the safe loader, so tags that construct arbitrary Python
    objects are rejected as syntax errors.

    Raises:
        ParseError: The YAML is malformed or has the wrong shape.
    """
    text = _decode(data)
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid YAML: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("document nested too deeply") from exc
    rules = rules_from_data(loaded)
    logger.debug("Parsed %d redirect rules from YAML", len(rules))
    return rules


def parse_json(data: bytes | str) -> list[RedirectRule]:
    """Parse a JSON redirect document.

    An empty or whitespace-only document yields no rules, mirroring
    an empty YAML document.

    Raises:
        ParseError: The JSON is malformed or has the wrong shape.
    """
    text = _decode(data)
    if not text.strip():
        return []
    try:
        loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("document nested too deeply") from exc
    rules = rules_from_data(loaded)
    logger.debug("Parsed %d redirect rules from JSON", len(rules))
    return rules


_PARSERS: dict[str, Callable[[bytes | str], list[RedirectRule]]] = {
    "yaml": parse_yaml,
    "json": parse_json,
}


def parse_document(data: bytes | str, format: str = "yaml") -> list[RedirectRule]:
    """Parse *data* with the parser registered for *format*.

    Raises:
        ConfigurationError: *format* is not ``"yaml"`` or ``"json"``.
        ParseError: The document itself is invalid.
    """
    parser = _PARSERS.get(format)
    if parser is None:
        msg = f"Unknown document format {format!r}. Expected one of: {', '.join(sorted(_PARSERS))}"
        raise ConfigurationError(msg)
    return parser(data)


def detect_format(path: str | Path) -> str:
    """``.json`` files are JSON; everything else is read as YAML."""
    return "json" if Path(path).suffix.lower() == ".json" else "yaml"


def load_rules(path: str | Path, format: str | None = None) -> list[RedirectRule]:
    """Read and parse a redirect document from disk.

    Args:
        path: File to read.
        format: ``"yaml"`` or ``"json"``; detected from the suffix when omitted.
    """
    return parse_document(Path(path).read_bytes(), format or detect_format(path))
