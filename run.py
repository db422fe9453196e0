"""Entry point for running the UberApp API.

Starts the FastAPI application under Uvicorn.  Host, port and log level
come from the same environment variables as the rest of the settings
(``HOST``, ``PORT``, ``LOG_LEVEL``); MongoDB is configured through
``MONGO_URL`` and ``MONGO_DATABASE``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from uberapp_api.app.core.config import settings
from uberapp_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutting down")


if __name__ == "__main__":
    main()
