"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from photo_slideshow.adapters.json_data_repository import JsonDataRepository
from photo_slideshow.adapters.slideshow_api_client import HttpxSlideshowApiClient
from photo_slideshow.config import Settings
from photo_slideshow.services.catalog import CatalogService
from photo_slideshow.services.scheduling import AsyncioScheduler, Scheduler
from photo_slideshow.services.session import SlideshowSession
from photo_slideshow.services.slideshow_settings import SettingsService


@dataclass
class AppContainer:
    """Holds the data service's dependencies."""

    settings: Settings
    catalog_service: CatalogService
    settings_service: SettingsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the data service container around one JSON data file."""
    resolved_settings = settings or Settings()
    repository = JsonDataRepository(resolved_settings.data_file)
    catalog_service = CatalogService(repository)
    settings_service = SettingsService(
        repository=repository,
        persist=resolved_settings.persist_settings,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        settings_service=settings_service,
        close_resources=close_resources,
    )


def build_slideshow_session(
    settings: Settings | None = None, scheduler: Scheduler | None = None
) -> SlideshowSession:
    """Create a slideshow session talking to the configured backend."""
    resolved_settings = settings or Settings()
    client = HttpxSlideshowApiClient.create(resolved_settings.backend_base_url)
    return SlideshowSession(client=client, scheduler=scheduler or AsyncioScheduler())
