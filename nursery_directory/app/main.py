"""
Main entrypoint for the Nursery Directory API.

This module assembles the FastAPI application: logging, the origin
allow-list and body size guards, CORS headers, error rendering and
the read-only API routes.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly::

    uvicorn nursery_directory.app.main:app --port 5000

Errors are rendered as ``{"message": ...}`` bodies, the shape the
front-end reads.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .core.middleware import BodySizeLimitMiddleware, OriginAllowListMiddleware
from .api.router import router as api_router
from .services.listing_service import DocumentNotFoundError, ListingUnavailableError


HEALTH_MESSAGE = "Nursery API is running 🌿"


async def listing_unavailable_handler(request: Request, exc: ListingUnavailableError) -> JSONResponse:
    return JSONResponse({"message": exc.message}, status_code=500)


async def document_not_found_handler(request: Request, exc: DocumentNotFoundError) -> JSONResponse:
    return JSONResponse({"message": exc.message}, status_code=404)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file on first start and applies migrations.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    # Middleware added last runs first: the origin check must reject
    # foreign origins before CORS handling or routing sees them.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(OriginAllowListMiddleware, allowed_origins=settings.allowed_origin_list)

    app.add_exception_handler(ListingUnavailableError, listing_unavailable_handler)
    app.add_exception_handler(DocumentNotFoundError, document_not_found_handler)

    @app.get("/", tags=["health"])
    async def health() -> dict:
        return {"message": HEALTH_MESSAGE}

    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
