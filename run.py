"""Entry point for the Pokedex API server.

Launches the FastAPI application with Uvicorn.  Intended to be run from
the project root, for example under Docker, where you only specify a
single Python file to run.

Host and port come from the ``HOST`` and ``PORT`` (or ``NODE_PORT``)
environment variables; defaults are ``127.0.0.1`` and ``3000``.  See
``pokedex_api/app/core/config.py`` for the other settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from pokedex_api.app.core.config import settings
from pokedex_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
