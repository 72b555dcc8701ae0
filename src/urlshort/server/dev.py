"""Single-worker server.

Starts a pounce ASGI server with a live urlshort App object.
"""


def run_server(app: object, host: str, port: int) -> None:
    """Start a pounce server for *app*.

    Pounce's ``run()`` takes an import string (e.g. ``"myapp:app"``),
    but the CLI builds the App at runtime from a paths document, so
    ``pounce.Server`` is used directly with the ASGI callable. Reload
    is off: the table is read once at startup.

    Args:
        app: ASGI callable (urlshort App instance).
        host: Bind host address.
        port: Bind port number.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1, reload=False)
    server = Server(config, app)
    server.run()
