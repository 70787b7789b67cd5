"""Ready-made fallback apps for redirect handlers."""

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort.http.request import Request
from urlshort.http.response import Response
from urlshort.server.sender import send_response


async def not_found(scope: Scope, receive: Receive, send: Send) -> None:
    """Answer every HTTP request with ``404 Not Found``.

    Lifespan events are acknowledged so the app can be served on its own.
    """
    if scope["type"] == "lifespan":
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)
    response = Response("Not Found", status=404, content_type="text/plain; charset=utf-8")
    await send_response(response, send, method=request.method)
