"""
Main entrypoint for the Employee API.

This module assembles the FastAPI application, sets up logging,
registers the exception handlers and includes the versioned routers.
``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn employee_api.app.main:app --reload

Each application owns one ``EmployeeStore`` on ``app.state.store``.
Pass a store explicitly to share or inspect it, as the tests do.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.store import EmployeeStore


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[EmployeeStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.
    store : Optional[EmployeeStore]
        Record store backing the employee routes.  A fresh, empty store
        is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.store = store if store is not None else EmployeeStore()

    register_exception_handlers(app)
    app.include_router(v1_router)

    logging.getLogger(__name__).debug("Created %s %s", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
