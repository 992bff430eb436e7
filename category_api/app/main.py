"""
Main entrypoint for the Category API.

This module assembles the FastAPI application: it sets up logging,
creates the category store, installs the JSON error handlers and
includes the routes.  ``create_app`` builds a new, independent
application (with its own freshly seeded store) on every call; the
module‑level ``app`` is the instance served in production, e.g.::

    uvicorn category_api.app.main:app
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import CategoryStore


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[CategoryStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the ones read from the environment
        at import time.
    store : Optional[CategoryStore]
        Collection to serve.  A new store with the two seed categories
        is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    # No trailing-slash redirects: "/health/" is an unknown path, not "/health".
    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        redirect_slashes=False,
    )
    app.state.category_store = store if store is not None else CategoryStore()

    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()
