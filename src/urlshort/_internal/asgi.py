"""ASGI callable shapes shared by the handler, the fallback and the test client."""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]

# Any ASGI 3 application, including the fallback handed to the builders
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]
