"""urlshort: path-to-URL redirect handlers for ASGI.

Build an ASGI app that redirects known paths and passes everything else
to a fallback app, from a mapping or a YAML document.

Basic usage::

    from urlshort import map_handler, yaml_handler
    from urlshort.server.fallback import not_found

    app = map_handler({"/dogs": "https://example.com/dogs"}, not_found)

    with open("redirects.yaml", "rb") as f:
        app = yaml_handler(f.read(), fallback=app)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ParseError",
    "PathURLEntry",
    "Redirect",
    "RedirectConfig",
    "RedirectHandler",
    "Request",
    "Response",
    "UrlshortError",
    "build_redirect_map",
    "map_handler",
    "not_found",
    "parse_yaml",
    "redirect_handler",
    "yaml_handler",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import urlshort`` fast while providing a clean top-level API.
    """
    if name in ("map_handler", "yaml_handler"):
        from urlshort import handlers as _handlers

        return getattr(_handlers, name)

    if name in ("RedirectHandler", "build_redirect_map", "redirect_handler"):
        from urlshort import redirect as _redirect

        return getattr(_redirect, name)

    if name in ("PathURLEntry", "parse_yaml"):
        from urlshort import parsing as _parsing

        return getattr(_parsing, name)

    if name == "RedirectConfig":
        from urlshort.config import RedirectConfig

        return RedirectConfig

    if name == "Request":
        from urlshort.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from urlshort.http import response as _resp

        return getattr(_resp, name)

    if name == "not_found":
        from urlshort.server.fallback import not_found

        return not_found

    if name in ("ConfigurationError", "ParseError", "UrlshortError"):
        from urlshort import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
