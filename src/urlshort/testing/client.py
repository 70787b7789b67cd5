"""Async test client for ASGI apps.

Sends requests straight through the ASGI interface and captures the
reply as the same ``Response`` type the handlers produce. No HTTP
involved, and redirects are never followed.
"""

from typing import Any

from urlshort._internal.asgi import ASGIApp
from urlshort.http.response import Response


class TestClient:
    """Async test client for a redirect handler or any other ASGI app.

    Usage::

        async with TestClient(handler) as client:
            response = await client.get("/dogs")
            assert response.status == 307
            assert response.location == "https://example.com/dogs"
    """

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("app",)

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __aenter__(self) -> "TestClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def get(self, path: str) -> Response:
        """Send a GET request."""
        return await self.request("GET", path)

    async def head(self, path: str) -> Response:
        """Send a HEAD request."""
        return await self.request("HEAD", path)

    async def post(self, path: str, *, body: bytes = b"") -> Response:
        """Send a POST request."""
        return await self.request("POST", path, body=body)

    async def request(self, method: str, path: str, *, body: bytes = b"") -> Response:
        """Send one request through the ASGI app and collect what it sends back."""
        path_part, _, query_string = path.partition("?")
        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": path_part,
            "query_string": query_string.encode("latin-1"),
            "headers": [],
        }

        pending = [{"type": "http.request", "body": body, "more_body": False}]

        async def receive() -> dict[str, Any]:
            return pending.pop() if pending else {"type": "http.disconnect"}

        started: dict[str, Any] = {"status": 200, "headers": []}
        body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                started.update(message)
            elif message["type"] == "http.response.body":
                body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)

        content_type: str | None = None
        headers: list[tuple[str, str]] = []
        for name_b, value_b in started["headers"]:
            name, value = name_b.decode("latin-1"), value_b.decode("latin-1")
            if name == "content-type":
                content_type = value
            else:
                headers.append((name, value))

        return Response(
            body=b"".join(body_parts),
            status=started["status"],
            content_type=content_type,
            headers=tuple(headers),
        )
