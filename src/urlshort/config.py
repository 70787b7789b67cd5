"""Redirect configuration.

RedirectConfig is a frozen dataclass: immutable after creation, validated once,
and shared by every handler built from it.
"""

from dataclasses import dataclass

from urlshort.errors import ConfigurationError

# 301 Moved Permanently, 302 Found, 303 See Other,
# 307 Temporary Redirect, 308 Permanent Redirect
REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


@dataclass(frozen=True, slots=True)
class RedirectConfig:
    """Redirect policy. Immutable after creation.

    ``status`` is sent on every map hit. The default, 307, tells clients
    to repeat the original method and body against the new URL::

        config = RedirectConfig(status=302)
    """

    status: int = 307

    def __post_init__(self) -> None:
        if self.status not in REDIRECT_STATUSES:
            allowed = ", ".join(str(s) for s in sorted(REDIRECT_STATUSES))
            msg = f"Redirect status must be one of {allowed}, got {self.status!r}"
            raise ConfigurationError(msg)
