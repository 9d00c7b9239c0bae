"""
Main entrypoint for the Pokedex API.

This module assembles the FastAPI application, sets up logging,
installs the JSON error handlers and includes the versioned router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn pokedex_api.app.main:app --reload

Every error response has the body ``{"message": ..., "id": ...}``
where ``id`` is a short machine-readable code such as ``notFound``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.data import load_seed
from .core.errors import PokedexError
from .core.logging_config import setup_logging
from .services.pokedex_service import PokedexService

logger = logging.getLogger(__name__)

_HTTP_ERROR_IDS = {
    status.HTTP_400_BAD_REQUEST: "badRequest",
    status.HTTP_404_NOT_FOUND: "notFound",
    status.HTTP_405_METHOD_NOT_ALLOWED: "methodNotAllowed",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the seed catalog on startup unless one was injected."""
    if app.state.pokedex is None:
        app.state.pokedex = PokedexService(load_seed())
    logger.info("Serving %d Pokémon under %s", len(app.state.pokedex), settings.api_prefix)
    yield


async def pokedex_error_handler(request: Request, exc: PokedexError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render ``HTTPException`` with the common error body.

    A 404 raised before any route matched means the path itself is
    unknown, which gets its own message.
    """
    message = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and "endpoint" not in request.scope:
        if request.url.path.startswith(settings.api_prefix):
            message = "API endpoint not found"
        else:
            message = "Not found"
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message, "id": _HTTP_ERROR_IDS.get(exc.status_code, "error")},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Bad request", "id": "badRequest"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled server error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error", "id": "internal"},
    )


def create_app(service: Optional[PokedexService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[PokedexService]
        Catalog to serve.  When omitted, the catalog is loaded from the
        seed file (``settings.data_path``) on startup.  Tests pass their
        own instance so that each case starts from a fresh catalog.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup messages
    # are formatted consistently.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.pokedex = service

    app.add_exception_handler(PokedexError, pokedex_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
