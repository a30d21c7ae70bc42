"""
Main entrypoint for the Student Records API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``.  This makes it easy to run with uvicorn or another
ASGI server, e.g.::

    uvicorn student_records_api.app.main:app --reload

The application title, version and record store are provided via
``Settings`` from ``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.seed import seed_data
from .repositories import StudentStore, get_store
from .services.student_service import StudentService

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable bodies and query strings as 400 Bad Request."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(store: Optional[StudentStore] = None, seed: Optional[bool] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[StudentStore]
        Record store to serve.  If omitted, the store selected by
        ``settings.store_backend`` is built.
    seed : Optional[bool]
        Whether to insert the demo student.  Defaults to
        ``settings.seed_data``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the store and
    # the seeding step can log.
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = get_store(settings.store_backend, settings.database_url)
    if seed is None:
        seed = settings.seed_data
    if seed:
        seed_data(store)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.student_service = StudentService(store)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(v1_router)

    logger.info("%s %s ready (%s store)", settings.project_name, settings.api_version, type(store).__name__)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
