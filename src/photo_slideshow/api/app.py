"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from photo_slideshow.api.routes import (
    InvalidJsonBodyError,
    OpenApiSpecMissingError,
)
from photo_slideshow.api.routes import router as api_router
from photo_slideshow.app_logging import configure_logging
from photo_slideshow.containers import AppContainer, build_container
from photo_slideshow.services.catalog import PhotoNotFoundError
from photo_slideshow.services.slideshow_settings import SettingsValidationError

API_PREFIX = "/api"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Serving slideshow data from %s", app.state.container.settings.data_file
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(
        title="Photo Slideshow API",
        lifespan=lifespan,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.mount(
        "/assets",
        StaticFiles(directory=str(container.settings.assets_dir), check_dir=False),
        name="assets",
    )

    @app.exception_handler(PhotoNotFoundError)
    async def photo_not_found(request: Request, exc: PhotoNotFoundError) -> JSONResponse:
        return JSONResponse({"error": str(exc)}, status_code=404)

    @app.exception_handler(SettingsValidationError)
    async def settings_invalid(
        request: Request, exc: SettingsValidationError
    ) -> JSONResponse:
        logger.info("Rejected settings: %s", exc)
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(InvalidJsonBodyError)
    async def invalid_json(request: Request, exc: InvalidJsonBodyError) -> JSONResponse:
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(OpenApiSpecMissingError)
    async def openapi_missing(
        request: Request, exc: OpenApiSpecMissingError
    ) -> JSONResponse:
        logger.error(
            "OpenAPI spec file not found: %s",
            request.app.state.container.settings.openapi_file,
        )
        return JSONResponse({"error": str(exc)}, status_code=500)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Plain-text server banner."""
        return "Photo Slideshow API Server"

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    app.include_router(api_router, prefix=API_PREFIX)

    return app


def build_app() -> FastAPI:
    """Build the app from environment settings; used as the uvicorn factory."""
    return create_app(build_container())
