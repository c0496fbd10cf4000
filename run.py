"""Entry point for the Campus Events API server.

Runs the FastAPI application with Uvicorn.  Host and port are taken
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``).  Other settings such as ``LOG_LEVEL`` or
``OTP_TTL_SECONDS`` are read by ``campus_events_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from campus_events_api.app.core.config import settings
from campus_events_api.app.main import app


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
    logging.getLogger(__name__).info("Server running on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
