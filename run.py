"""Entry point for the catalog API server.

Launches the FastAPI application with Uvicorn.  Host, port and the
other options are read from environment variables (see
``catalog_api/app/core/config.py``); a ``.env`` file is not read, so
export them in the shell or the container definition.

The service keeps its write lock in process memory, so it must run as
a single worker process.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from catalog_api.app.core.config import settings
from catalog_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn on ``settings.host``/``settings.port``."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        workers=1,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info("Starting catalog API on %s:%s", settings.host, settings.port)
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
