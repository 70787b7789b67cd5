"""Immutable HTTP request.

Only what the redirect lookup reads is taken from the ASGI scope. The
body is never consumed here: on a miss the untouched ``receive``
callable goes to the fallback.
"""

from __future__ import annotations

from dataclasses import dataclass

from urlshort._internal.asgi import Scope


@dataclass(frozen=True, slots=True)
class Request:
    """Method and path of an incoming HTTP request."""

    method: str
    path: str

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope.

        ``path`` is the decoded path without the query string, so
        ``/dogs?utm=1`` looks up ``/dogs``.
        """
        return cls(method=scope.get("method", "GET").upper(), path=scope["path"])
