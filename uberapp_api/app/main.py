"""
Main entrypoint for the UberApp API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn uberapp_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import close_client
from .core.exceptions import AuthenticationError, QueryError, SerializationError, UberAppError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _error_response(exc: UberAppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
        headers=headers,
    )


def _describe(errors: Sequence[Any]) -> str:
    """Summarise pydantic errors as ``location: message`` pairs."""
    parts = []
    for error in errors:
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Malformed request body"


async def handle_app_error(request: Request, exc: UberAppError) -> JSONResponse:
    if isinstance(exc, QueryError) and settings.legacy_query_errors:
        # Legacy clients read list errors from a 200 response body.
        return JSONResponse(status_code=status.HTTP_200_OK, content=exc.message)
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return _error_response(exc)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = SerializationError(_describe(exc.errors()))
    logger.info("%s %s rejected: %s", request.method, request.url.path, error.message)
    return _error_response(error)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Close the shared client opened by the first request, if any.
    close_client()


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with every v1 route
        mounted under ``settings.api_prefix``.
    """
    # Initialise logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.include_router(v1_router, prefix=settings.api_prefix)

    app.add_exception_handler(UberAppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
