"""Serve an App with uvicorn.

uvicorn takes either an import string or a live ASGI callable; the app
object is already built by the caller, so it is passed directly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    import socket

    from demo_api.app import App

logger = logging.getLogger("demo_api.server")


class _PortLoggingServer(uvicorn.Server):
    """uvicorn server that reports the port it actually bound."""

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit:
            return
        logger.info("Server running on port %d", bound_port(self, self.config.port))


def bound_port(server: uvicorn.Server, fallback: int) -> int:
    """First TCP port among the server's listening sockets.

    Falls back to *fallback* when no listener reports one (e.g. a Unix socket).
    """
    for listener in server.servers:
        for sock in listener.sockets:
            address = sock.getsockname()
            if isinstance(address, tuple):
                return address[1]
    return fallback


def run_server(app: App, host: str, port: int, *, log_level: str = "info") -> None:
    """Start uvicorn on *host*:*port* and block until terminated.

    uvicorn's own access log is turned off; ``AccessLogMiddleware`` covers
    it with the app's logger names. The startup line is logged once the
    sockets are bound, so ``port=0`` reports the port the OS picked.
    """
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=log_level,
        access_log=False,
        lifespan="on",
    )
    server = _PortLoggingServer(config)
    server.run()
