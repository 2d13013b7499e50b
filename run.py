"""Entry point for the Employee API.

Starts the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Host, port and log level are read from the environment (``HOST``,
``PORT``, ``LOG_LEVEL``); see ``employee_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from employee_api.app.core.config import settings
from employee_api.app.main import app


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
    logging.info("Server is running on http://%s:%s", settings.host, settings.port)
    await server.serve()


def main() -> int:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logging.exception("Server failed to start")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
