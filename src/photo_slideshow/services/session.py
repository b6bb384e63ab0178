"""Slideshow session wiring the client-side components together."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import httpx

from photo_slideshow.adapters.slideshow_api_client import SlideshowApiClient
from photo_slideshow.domain.models import SlideshowSettings
from photo_slideshow.domain.slideshow import DroppedFile, SlideshowView
from photo_slideshow.services.photo_detail import PhotoDetailView
from photo_slideshow.services.photo_library import PhotoLibrary
from photo_slideshow.services.play_order import PlayOrder
from photo_slideshow.services.scheduling import Scheduler
from photo_slideshow.services.settings_panel import SettingsPanel, SettingsStore
from photo_slideshow.services.slideshow import SlideshowController

logger = logging.getLogger(__name__)


@dataclass
class SlideshowSession:
    """One viewer's slideshow: photos, settings, controller and views."""

    client: SlideshowApiClient
    scheduler: Scheduler
    play_order: PlayOrder = field(default_factory=PlayOrder)
    on_notice: Callable[[str], None] | None = None
    on_change: Callable[[SlideshowView], None] | None = None
    loading: bool = field(default=True, init=False)
    error: Exception | None = field(default=None, init=False)
    library: PhotoLibrary = field(init=False)
    store: SettingsStore = field(init=False)
    controller: SlideshowController = field(init=False)
    panel: SettingsPanel = field(init=False)
    detail: PhotoDetailView = field(init=False)

    def __post_init__(self) -> None:
        self.library = PhotoLibrary()
        self.store = SettingsStore(self.client, on_change=self._settings_changed)
        self.controller = SlideshowController(
            library=self.library,
            settings=self.store.settings,
            scheduler=self.scheduler,
            play_order=self.play_order,
            on_notice=self.on_notice,
            on_change=self.on_change,
        )
        self.panel = SettingsPanel(self.store, reshuffle=self.controller.reshuffle)
        self.detail = PhotoDetailView(self.client)

    async def load(self) -> None:
        """Fetch photos, settings and themes; a failed photo fetch leaves it empty."""
        self.loading = True
        try:
            photos = await self.client.get_photos()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Photos unavailable, starting empty")
            self.error = exc
            photos = []
        self.library.replace(photos)
        self.controller.photos_changed()
        await self.store.load()
        if self.store.error is not None:
            self.error = self.store.error
        self.loading = False

    def start(self) -> None:
        self.controller.start()

    def close(self) -> None:
        self.controller.close()

    async def on_key(self, key: str, target_tag: str | None = None) -> bool:
        """Dispatch a key press to the detail view, controller or theme shortcut."""
        if self.detail.is_open:
            return self.detail.on_key(key)
        if self.controller.on_key(key, target_tag):
            return True
        return await self.panel.on_theme_key(key, target_tag) is not None

    async def click_photo(self) -> bool:
        """Open the detail view for the photo on screen."""
        photo = self.controller.on_photo_click()
        if photo is None:
            return False
        await self.detail.open(photo.id)
        return True

    def drop(self, files: list[DroppedFile]) -> None:
        self.controller.on_drop(files)

    def view(self) -> SlideshowView:
        return self.controller.snapshot()

    def _settings_changed(self, settings: SlideshowSettings) -> None:
        self.controller.update_settings(settings)
        self.panel.sync()
