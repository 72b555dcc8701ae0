"""App — serves one handler as an ASGI 3.0 application.

Usage::

    from urlshort import App, map_handler, not_found

    app = App(map_handler({"/gh": "https://github.com"}, fallback=not_found))

    # any ASGI server, or:
    app.run()
"""

import logging
from dataclasses import replace

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort.config import ServerConfig
from urlshort.protocol import Handler
from urlshort.server.handler import handle_request

logger = logging.getLogger("urlshort.server")


class App:
    """ASGI wrapper around a single handler.

    HTTP scopes go to the handler, ``lifespan`` is acknowledged, and
    every other scope type (e.g. websocket) is ignored.
    """

    __slots__ = ("config", "handler")

    def __init__(self, handler: Handler, config: ServerConfig | None = None) -> None:
        self.handler = handler
        self.config = config or ServerConfig()

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start a single-worker server (requires ``pip install urlshort[server]``)."""
        from urlshort.server.dev import run_server

        config = replace(
            self.config,
            host=host if host is not None else self.config.host,
            port=port if port is not None else self.config.port,
        )
        config.validate()
        run_server(self, config.host, config.port)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, handler=self.handler)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge startup and shutdown; there is nothing to set up or tear down."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                logger.info("urlshort ready on %s:%d", self.config.host, self.config.port)
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
