"""Entry point for the Student Records API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example inside a
Docker container where you only specify a single Python file to run.

Configuration such as the database path, the store backend and the
listening address is read from environment variables (see
``student_records_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from student_records_api.app.core.config import settings
from student_records_api.app.main import app


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
    logging.getLogger(__name__).info("Serving on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
