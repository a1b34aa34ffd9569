"""Entry point serving the Flight Booking API with uvicorn.

Host, port and log level are read from the environment through
``flight_booking_api.app.core.config.settings`` (``HOST``, ``PORT`` and
``LOG_LEVEL``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from flight_booking_api.app.core.config import settings
from flight_booking_api.app.main import app


async def main() -> None:
    """Start the API server and run until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
