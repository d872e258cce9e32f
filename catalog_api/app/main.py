"""
Main entrypoint for the Apparel Catalog API.

This module assembles the FastAPI application: logging, CORS, the
``/api`` routers, the static ``/images`` mount and the error handlers
that turn store failures into generic 500 responses.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn catalog_api.app.main:app
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import Settings, settings
from .core.exceptions import StoreUnavailableError
from .core.logging_config import setup_logging
from .core.storage import JsonFileStore, get_data_path
from .services.item_service import ItemService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Create the data file with seed items and the image directory on
    # first start.
    app.state.item_service.ensure_seeded()
    get_data_path(app.state.settings.images_dir).mkdir(parents=True, exist_ok=True)
    yield


def register_exception_handlers(app: FastAPI) -> None:
    """Map request and store failures to HTTP responses.

    Client bodies never contain file paths or parse errors; the
    details are logged instead.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request data"},
        )

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
        logger.error("Store unavailable during %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error during %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``
        (tests pass one pointing at a temporary data file).

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that setup below can
    # safely log messages.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version, lifespan=lifespan)

    # One store per data file; its lock serializes all writes made
    # through this application.
    store = JsonFileStore(get_data_path(app_settings.data_file))
    app.state.settings = app_settings
    app.state.item_service = ItemService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")
    app.include_router(health.router, tags=["health"])
    app.mount(
        "/images",
        StaticFiles(directory=str(get_data_path(app_settings.images_dir)), check_dir=False),
        name="images",
    )

    register_exception_handlers(app)
    logger.info("Catalog data file: %s", store.path)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
