"""Entry point for the Nursery Directory API.

Serves the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example on a hosting platform
where you only specify a single Python file to run.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``5000``).  See
``nursery_directory/app/core/config.py`` for the other variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from nursery_directory.app.core.config import settings
from nursery_directory.app.main import app


async def main() -> None:
    """Run the API server until interrupted."""
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("🚀 Server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
