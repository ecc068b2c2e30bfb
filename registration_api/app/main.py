"""
Main entrypoint for the Event Registration API.

This module assembles the FastAPI application: logging, CORS, the
``/api`` routes and the shared ``ConnectionManager``.  ``create_app``
builds the handler graph; the module‑level ``app`` is what external
hosts (a serverless platform, or any ASGI server) import, e.g.::

    uvicorn registration_api.app.main:app

To let the package bind a socket itself, use
``registration_api.app.server`` instead.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import ConnectionManager
from .core.logging_config import setup_logging


def create_app(
    settings: Optional[Settings] = None,
    connection_manager: Optional[ConnectionManager] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.
    connection_manager : Optional[ConnectionManager]
        Store gateway shared by all requests.  A new one is built
        from ``settings`` when omitted; it does not connect until the
        first data request arrives.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.connection_manager = connection_manager or ConnectionManager(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        # Closing is idempotent, so a host that fires shutdown twice is fine.
        await app.state.connection_manager.close()

    return app


# Create the application instance at import time so that hosts such as
# uvicorn or a serverless adapter can discover it without calling
# create_app manually.
app = create_app()
