"""Read-only photo detail view."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

import httpx

from photo_slideshow.adapters.slideshow_api_client import SlideshowApiClient
from photo_slideshow.domain.models import Photo

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Photo not found"


class DetailState(StrEnum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


def file_name(image_url: str) -> str:
    """Return the last path segment of an image URL."""
    return image_url.split("/")[-1]


@dataclass
class PhotoDetailView:
    """Looks up one photo by id and shows it until closed."""

    client: SlideshowApiClient
    on_close: Callable[[], None] | None = None
    photo: Photo | None = None
    state: DetailState = DetailState.LOADING
    is_open: bool = False

    @property
    def file_name(self) -> str | None:
        return file_name(self.photo.image_url) if self.photo else None

    @property
    def message(self) -> str:
        return NOT_FOUND_MESSAGE if self.state is DetailState.FAILED else ""

    async def open(self, photo_id: int) -> DetailState:
        """Fetch the photo; a failed lookup shows the not-found state."""
        self.is_open = True
        self.photo = None
        self.state = DetailState.LOADING
        try:
            self.photo = await self.client.get_photo(photo_id)
        except (httpx.HTTPError, ValueError):
            logger.warning("Photo lookup failed", extra={"photo_id": photo_id})
            self.state = DetailState.FAILED
            return self.state
        self.state = DetailState.LOADED
        return self.state

    def on_key(self, key: str) -> bool:
        if key != "Escape" or not self.is_open:
            return False
        self.close()
        return True

    def on_backdrop_click(self, *, on_backdrop: bool) -> bool:
        """Close when the click landed on the backdrop itself."""
        if not on_backdrop or not self.is_open:
            return False
        self.close()
        return True

    def close(self) -> None:
        self.is_open = False
        if self.on_close is not None:
            self.on_close()
