"""YAML redirect document parsing.

The document is a top-level sequence of ``path``/``url`` records::

    - path: /some-path
      url: https://www.some-url.com/demo

``parse_yaml`` returns the records as ``PathURLEntry`` objects in
document order. Duplicate paths are kept; collapsing them is the map
builder's job.
"""

import logging
from dataclasses import dataclass
from typing import Any

import yaml

from urlshort.errors import ParseError

logger = logging.getLogger("urlshort.parsing")


@dataclass(frozen=True, slots=True)
class PathURLEntry:
    """One redirect rule as decoded from YAML."""

    path: str
    url: str


def parse_yaml(yml: bytes | str) -> list[PathURLEntry]:
    """Parse a YAML redirect document into entries, preserving order.

    An empty document and an empty list both produce ``[]``.

    Raises:
        ParseError: If the text is not valid YAML, the top level is not a
            list, or an element is not a mapping with string ``path`` and
            ``url`` values.
    """
    try:
        data = yaml.safe_load(yml)
    except yaml.YAMLError as exc:
        raise ParseError(str(exc)) from exc
    except RecursionError as exc:
        # the composer recurses once per nesting level
        raise ParseError("document is nested too deeply") from exc

    if data is None:
        return []
    if not isinstance(data, list):
        msg = f"expected a list of path/url entries, got {type(data).__name__}"
        raise ParseError(msg)

    entries = [_entry_from_item(index, item) for index, item in enumerate(data)]
    logger.debug("Parsed %d redirect entries", len(entries))
    return entries


def _entry_from_item(index: int, item: Any) -> PathURLEntry:
    if not isinstance(item, dict):
        msg = f"expected a mapping with 'path' and 'url', got {type(item).__name__}"
        raise ParseError(msg, index=index)
    for key in ("path", "url"):
        if key not in item:
            raise ParseError(f"missing required key {key!r}", index=index)
        if not isinstance(item[key], str):
            msg = f"{key!r} must be a string, got {type(item[key]).__name__}"
            raise ParseError(msg, index=index)
    return PathURLEntry(path=item["path"], url=item["url"])
