"""
Main entrypoint for the Campus Events API.

This module assembles the FastAPI application, sets up logging, CORS
and the JSON error envelope, and includes the versioned router.  The
app is instantiated at import time as ``app`` so it can be served
directly::

    uvicorn campus_events_api.app.main:app --reload

The demo events are seeded into the in‑memory store on startup.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.errors import install_error_handlers
from .core.logging_config import setup_logging
from .core.store import init_store
from .api.v1.router import router as v1_router


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup messages
    # are formatted consistently.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        init_store()
        logger.info("%s %s ready under %s", settings.project_name, settings.api_version, settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
