"""
Self‑hosted entry point.

Binds a socket with uvicorn, unless the deployment is marked as
production, in which case the ASGI ``app`` from ``main`` is expected
to be driven by an external host and nothing is started here.

On SIGINT uvicorn stops accepting requests and runs the application's
shutdown handler, which closes the MongoDB connection; the process
then exits with status 0.

Usage::

    python -m registration_api.app.server
"""

import asyncio
import logging
import sys
from typing import Optional

from fastapi import FastAPI
from uvicorn import Config, Server

from .core.config import Settings, settings as default_settings
from .core.logging_config import uvicorn_log_level

logger = logging.getLogger(__name__)


async def serve(app: FastAPI, settings: Settings) -> bool:
    """Run ``app`` on ``settings.host:settings.port`` until interrupted.

    Returns ``False`` without binding anything in production mode and
    ``True`` once the server has shut down.
    """
    if settings.is_production:
        logger.warning(
            "APP_ENV is production; not binding a socket. "
            "Serve registration_api.app.main:app from the hosting platform instead."
        )
        return False
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=uvicorn_log_level(settings),
    )
    server = Server(config)
    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    await server.serve()
    logger.info("Server shut down")
    return True


def main(settings: Optional[Settings] = None) -> int:
    from .main import app, create_app

    settings = settings or default_settings
    application = app if settings is default_settings else create_app(settings)
    try:
        asyncio.run(serve(application, settings))
    except (KeyboardInterrupt, SystemExit):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
