"""Entry point for the Hello Todo API.

Starts the FastAPI application under Uvicorn.  Host, port and log
level come from the ``HOST``, ``PORT`` and ``LOG_LEVEL`` environment
variables (see ``hello_todo_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from hello_todo_api.app.core.config import settings
from hello_todo_api.app.core.logging_config import setup_logging


async def main() -> None:
    """Serve the API until interrupted."""
    setup_logging(settings.log_level, settings.log_file or None)
    config = Config(
        app="hello_todo_api.app.main:app",
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
