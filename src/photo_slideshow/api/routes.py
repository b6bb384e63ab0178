"""Slideshow data API endpoints."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

from photo_slideshow.domain.models import Photo, SlideshowSettings, Theme
from photo_slideshow.services.catalog import PhotoNotFoundError

if TYPE_CHECKING:
    from photo_slideshow.containers import AppContainer

router = APIRouter(tags=["slideshow"])


class InvalidJsonBodyError(ValueError):
    """Raised when a request body cannot be parsed as JSON."""

    def __init__(self) -> None:
        super().__init__("Invalid JSON format")


class OpenApiSpecMissingError(FileNotFoundError):
    """Raised when the OpenAPI document is not on disk."""

    def __init__(self) -> None:
        super().__init__("OpenAPI spec file not found")


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/photos", response_model=list[Photo])
async def list_photos(request: Request) -> list[Photo]:
    """Return all photos."""
    return _container(request).catalog_service.list_photos()


@router.get("/photos/{photo_id}", response_model=Photo)
async def get_photo(photo_id: str, request: Request) -> Photo:
    """Return a single photo by id."""
    try:
        parsed_id = int(photo_id)
    except ValueError:
        raise PhotoNotFoundError(photo_id) from None
    return _container(request).catalog_service.get_photo(parsed_id)


@router.get("/themes", response_model=list[Theme])
async def list_themes(request: Request) -> list[Theme]:
    """Return the available display themes."""
    return _container(request).catalog_service.list_themes()


@router.get("/settings", response_model=SlideshowSettings)
async def get_settings(request: Request) -> SlideshowSettings:
    """Return the current slideshow settings."""
    return _container(request).catalog_service.get_settings()


@router.post("/settings", response_model=SlideshowSettings)
async def save_settings(request: Request) -> SlideshowSettings:
    """Validate a settings payload and return its normalized form."""
    try:
        payload = await request.json()
    except ValueError:
        raise InvalidJsonBodyError from None
    return _container(request).settings_service.save_settings(payload)


@router.get("/openapi.json")
async def openapi_document(request: Request) -> dict[str, object]:
    """Serve the OpenAPI document from disk."""
    openapi_file = _container(request).settings.openapi_file
    if not openapi_file.exists():
        raise OpenApiSpecMissingError
    return json.loads(openapi_file.read_text(encoding="utf-8"))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def api_reference() -> HTMLResponse:
    """Interactive API reference for the OpenAPI document."""
    return get_swagger_ui_html(
        openapi_url="/api/openapi.json",
        title="Photo Slideshow API",
    )
