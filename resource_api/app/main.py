"""
Main entrypoint for the Resource API.

This module assembles the FastAPI application, sets up logging, installs
the error handlers and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, so it can be served directly::

    uvicorn resource_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so the setup below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    register_exception_handlers(app)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        # The SQLite tables must exist before the first request; the
        # in-memory backend needs no preparation.
        if settings.storage_backend == "sqlite":
            init_db()
        logging.getLogger(__name__).info(
            "%s %s started with %s storage", settings.project_name, settings.api_version, settings.storage_backend
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can import ``resource_api.app.main:app``.
app = create_app()
