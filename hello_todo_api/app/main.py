"""
Main entrypoint for the Hello Todo API.

This module assembles the FastAPI application, sets up logging,
constructs the shared services and includes the versioned router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn hello_todo_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.random_bytes import RandomByteGenerator
from .services.todo_service import TodoService


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    The todo collection and the random byte generator are built here,
    once per application, and stored on ``app.state`` where the
    endpoint dependencies pick them up.  Seeding the generator at this
    point means no request ever races to initialise it.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.todo_service = TodoService()
    app.state.byte_generator = RandomByteGenerator()

    app.include_router(v1_router, prefix=app_settings.api_prefix)

    logging.getLogger(__name__).info(
        "%s %s configured", app_settings.project_name, app_settings.api_version
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
