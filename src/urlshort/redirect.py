"""Path lookup and redirect: the ASGI app the builders return.

A ``RedirectHandler`` holds a read-only path → URL map and a fallback
ASGI app. Each HTTP request is an exact-match lookup on the request
path: a hit sends a redirect, a miss hands the whole request/response
cycle to the fallback.

The map is never mutated after construction, so one handler can serve
concurrent requests without locking.
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from urlshort._internal.asgi import ASGIApp, Receive, Scope, Send
from urlshort.config import RedirectConfig
from urlshort.http.request import Request
from urlshort.http.response import Redirect
from urlshort.parsing import PathURLEntry
from urlshort.server.sender import send_response

logger = logging.getLogger("urlshort.server")

# Read-only path -> URL mapping
RedirectMap = Mapping[str, str]


def build_redirect_map(entries: Iterable[PathURLEntry]) -> RedirectMap:
    """Collect entries into a read-only map; a later duplicate path wins."""
    paths_to_urls: dict[str, str] = {}
    for entry in entries:
        previous = paths_to_urls.get(entry.path)
        if previous is not None:
            logger.debug("Path %s redefined: %s -> %s", entry.path, previous, entry.url)
        paths_to_urls[entry.path] = entry.url
    return MappingProxyType(paths_to_urls)


class RedirectHandler:
    """ASGI app that redirects mapped paths and delegates everything else.

    Usage::

        handler = RedirectHandler({"/dogs": "https://example.com/dogs"}, fallback)
        # serve `handler` with any ASGI server
    """

    __slots__ = ("_config", "_fallback", "_paths")

    def __init__(
        self,
        paths: RedirectMap,
        fallback: ASGIApp,
        config: RedirectConfig | None = None,
    ) -> None:
        self._paths = paths
        self._fallback = fallback
        self._config = config or RedirectConfig()

    @property
    def paths(self) -> RedirectMap:
        """The path → URL map this handler serves."""
        return self._paths

    @property
    def fallback(self) -> ASGIApp:
        """The app that receives every unmatched request."""
        return self._fallback

    @property
    def config(self) -> RedirectConfig:
        return self._config

    def lookup(self, path: str) -> str | None:
        """Target URL for *path*, or ``None`` when it is not mapped."""
        return self._paths.get(path)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        # lifespan and websocket traffic belongs to the fallback
        if scope["type"] != "http":
            await self._fallback(scope, receive, send)
            return

        request = Request.from_asgi(scope)
        url = self.lookup(request.path)
        if url is None:
            logger.debug(
                "%s %s: no redirect, delegating to fallback", request.method, request.path
            )
            await self._fallback(scope, receive, send)
            return

        logger.debug("%s %s -> %d %s", request.method, request.path, self._config.status, url)
        response = Redirect(url, status=self._config.status).to_response(request.method)
        await send_response(response, send, method=request.method)

    def __repr__(self) -> str:
        return f"RedirectHandler({len(self._paths)} paths, status={self._config.status})"


def redirect_handler(
    paths: RedirectMap,
    fallback: ASGIApp,
    config: RedirectConfig | None = None,
) -> RedirectHandler:
    """Bind *paths* and *fallback* into a ready-to-serve ASGI app."""
    return RedirectHandler(paths, fallback, config)
