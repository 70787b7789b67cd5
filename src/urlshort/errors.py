"""urlshort exception hierarchy.

Shared across the parser, the config layer, and the builders so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Raised when a ``RedirectConfig`` is invalid.

    Raised at config creation, before any handler exists.
    """


@dataclass(frozen=True, slots=True)
class ParseError(UrlshortError):
    """The redirect document is not well-formed YAML or has the wrong shape.

    ``message`` carries the YAML parser's own message when the document
    failed to parse; ``index`` names the offending list element when the
    problem is a single entry.
    """

    message: str
    index: int | None = None

    def __str__(self) -> str:
        if self.index is not None:
            return f"entry {self.index}: {self.message}"
        return self.message
