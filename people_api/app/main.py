"""
Main entrypoint for the People Management API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  ``create_app`` builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served directly::

    uvicorn people_api.app.main:app --reload

Besides the people routes mounted under ``settings.api_prefix`` the
app exposes ``/health`` and redirects ``/`` to the interactive docs.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import init_store
from .api.v1.router import router as v1_router

logger = logging.getLogger(__name__)

DESCRIPTION = "API for managing people records keyed by national identifier."


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies and query values as 400 instead of 422."""
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured first so that everything below can log.
    The record store is (re)seeded on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=DESCRIPTION,
        debug=settings.debug,
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(url=app.docs_url or "/docs")

    @app.get("/health", tags=["health"])
    async def health() -> str:
        return "OK"

    @app.on_event("startup")
    async def startup_event() -> None:
        init_store()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
