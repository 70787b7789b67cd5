"""Public builders: redirect handlers from a mapping or a YAML document.

Both return a ``RedirectHandler``, an ASGI app that redirects mapped
paths and hands every other request to *fallback*::

    from urlshort import map_handler, yaml_handler
    from urlshort.server.fallback import not_found

    app = map_handler({"/dogs": "https://example.com/dogs"}, not_found)

    app = yaml_handler(
        b"- path: /cats\\n  url: https://example.com/cats\\n",
        fallback=app,
    )
"""

import logging
from collections.abc import Mapping

from urlshort._internal.asgi import ASGIApp
from urlshort.config import RedirectConfig
from urlshort.parsing import PathURLEntry, parse_yaml
from urlshort.redirect import RedirectHandler, build_redirect_map, redirect_handler

logger = logging.getLogger("urlshort")


def map_handler(
    paths_to_urls: Mapping[str, str],
    fallback: ASGIApp,
    *,
    config: RedirectConfig | None = None,
) -> RedirectHandler:
    """Build a handler from a path → URL mapping.

    The mapping is copied, so changing *paths_to_urls* afterwards does
    not change the handler.
    """
    paths = build_redirect_map(PathURLEntry(path, url) for path, url in paths_to_urls.items())
    logger.info("Built redirect handler with %d paths", len(paths))
    return redirect_handler(paths, fallback, config)


def yaml_handler(
    yml: bytes | str,
    fallback: ASGIApp,
    *,
    config: RedirectConfig | None = None,
) -> RedirectHandler:
    """Build a handler from a YAML list of ``path``/``url`` records.

    When a path appears more than once, the last record wins.

    Raises:
        ParseError: If *yml* is not valid YAML or not a list of
            ``path``/``url`` records. No handler is built.
    """
    entries = parse_yaml(yml)
    paths = build_redirect_map(entries)
    logger.info(
        "Built redirect handler with %d paths from %d YAML entries", len(paths), len(entries)
    )
    return redirect_handler(paths, fallback, config)
