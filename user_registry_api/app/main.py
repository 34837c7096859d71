"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application, sets up logging,
attaches a freshly seeded ``UserStore`` and includes the versioned
routers.  The app is instantiated at import time as ``app`` so it can
be served directly, e.g.::

    uvicorn user_registry_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import UserStore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds an independent application with its own store, so
    tests can pass their own ``Settings`` and start from a clean list.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Logging first so anything below can log.
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.user_store = UserStore(settings.seed_users)
    logger.info("User store seeded with %d users", len(settings.seed_users))

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


app = create_app()
