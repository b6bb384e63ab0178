"""Settings store and the settings/theme panel."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from photo_slideshow.adapters.slideshow_api_client import SlideshowApiClient
from photo_slideshow.domain.models import PlayMode, SlideshowSettings, Theme
from photo_slideshow.services.slideshow import TEXT_ENTRY_TAGS

logger = logging.getLogger(__name__)

INTERVAL_INPUT_ERROR = "Please enter a positive integer"


@dataclass
class SettingsStore:
    """Client-side copy of settings and themes backed by the data API."""

    client: SlideshowApiClient
    settings: SlideshowSettings = field(default_factory=SlideshowSettings)
    themes: list[Theme] = field(default_factory=list)
    error: Exception | None = None
    on_change: Callable[[SlideshowSettings], None] | None = None

    async def load(self) -> None:
        """Fetch settings and themes together; keep defaults on failure."""
        try:
            settings, themes = await asyncio.gather(
                self.client.get_settings(), self.client.get_themes()
            )
        except Exception as exc:
            logger.exception("Failed to load settings")
            self.error = exc
            return
        self.settings = settings
        self.themes = themes
        self.error = None
        self._emit()

    async def update(self, settings: SlideshowSettings) -> SlideshowSettings:
        """Save settings through the API and adopt the normalized result."""
        try:
            saved = await self.client.save_settings(settings)
        except Exception:
            logger.exception("Failed to save settings")
            raise
        self.settings = saved
        self._emit()
        return saved

    def _emit(self) -> None:
        if self.on_change is not None:
            self.on_change(self.settings)


def parse_interval(text: str) -> int | None:
    """Parse a positive integer interval, or return None."""
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if value > 0 else None


@dataclass
class SettingsPanel:
    """Edits theme, slide interval and play mode.

    Theme and play-mode changes are saved immediately. The interval is kept
    as raw text until submitted so invalid input can be reverted.
    """

    store: SettingsStore
    reshuffle: Callable[[], None]
    interval_input: str = ""
    interval_error: str = ""

    def __post_init__(self) -> None:
        if not self.interval_input:
            self.interval_input = str(self.store.settings.slide_interval)

    @property
    def settings(self) -> SlideshowSettings:
        return self.store.settings

    @property
    def themes(self) -> list[Theme]:
        return self.store.themes

    def sync(self) -> None:
        """Refresh the interval text from the confirmed settings."""
        self.interval_input = str(self.settings.slide_interval)
        self.interval_error = ""

    async def select_theme(self, theme_id: str) -> SlideshowSettings:
        return await self.store.update(
            self.settings.model_copy(update={"theme_id": theme_id})
        )

    def edit_interval(self, text: str) -> None:
        self.interval_input = text
        self.interval_error = ""

    async def submit_interval(self) -> SlideshowSettings | None:
        """Validate the interval text and save it; revert on bad input."""
        value = parse_interval(self.interval_input)
        if value is None:
            self.interval_error = INTERVAL_INPUT_ERROR
            self.interval_input = str(self.settings.slide_interval)
            return None
        self.interval_error = ""
        return await self.store.update(
            self.settings.model_copy(update={"slide_interval": value})
        )

    async def on_interval_key(self, key: str) -> SlideshowSettings | None:
        if key != "Enter":
            return None
        return await self.submit_interval()

    async def select_play_mode(self, play_mode: PlayMode) -> SlideshowSettings:
        """Save the play mode, then shuffle the photos in either mode."""
        saved = await self.store.update(
            self.settings.model_copy(update={"play_mode": play_mode})
        )
        self.reshuffle()
        return saved

    async def on_theme_key(
        self, key: str, target_tag: str | None = None
    ) -> SlideshowSettings | None:
        """Switch theme with number keys 1..N."""
        if target_tag and target_tag.lower() in TEXT_ENTRY_TAGS:
            return None
        if len(key) != 1 or key not in "123456789":
            return None
        number = int(key)
        if not 1 <= number <= len(self.themes):
            return None
        theme_id = self.themes[number - 1].id
        if theme_id == self.settings.theme_id:
            return None
        return await self.select_theme(theme_id)
