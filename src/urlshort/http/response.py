"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

import html
from dataclasses import dataclass, replace
from http import HTTPStatus
from urllib.parse import quote

# Methods whose redirects carry an HTML body and a content type
_BODY_METHODS = frozenset({"GET", "HEAD"})


def _escape_location(url: str) -> str:
    """Percent-encode non-ASCII and control characters; keep printable ASCII as is."""
    return "".join(ch if " " <= ch < "\x7f" else quote(ch, safe="") for ch in url)


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers. Each call returns a new ``Response``.
    ``content_type=None`` sends no ``content-type`` header.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str | None = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> "Response":
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    # -- Accessors --

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or ``None``."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @property
    def location(self) -> str | None:
        """The ``Location`` header, set on redirects."""
        return self.header("location")

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect to *url* with the given status."""

    url: str
    status: int = 307

    def to_response(self, method: str = "GET") -> Response:
        """Render the redirect as a ``Response``.

        ``GET`` and ``HEAD`` get a small HTML body linking to the target
        (the sender drops the bytes for ``HEAD``). Every other method gets
        an empty body and no content type.

        The URL goes into ``Location`` unchanged apart from non-ASCII and
        control characters, which are percent-encoded.
        """
        response = Response(body="", status=self.status, content_type=None).with_header(
            "Location", _escape_location(self.url)
        )
        if method not in _BODY_METHODS:
            return response
        phrase = HTTPStatus(self.status).phrase
        return replace(
            response,
            body=f'<a href="{html.escape(self.url)}">{phrase}</a>.\n',
            content_type="text/html; charset=utf-8",
        )
