"""HTTP client for the slideshow data API."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from photo_slideshow.domain.models import Photo, SlideshowSettings, Theme

logger = logging.getLogger(__name__)


class SlideshowApiClient(Protocol):
    """Interface for talking to the slideshow data API."""

    async def get_photos(self) -> list[Photo]:
        """Return all photos with resolved image URLs."""

    async def get_photo(self, photo_id: int) -> Photo:
        """Return one photo with a resolved image URL."""

    async def get_themes(self) -> list[Theme]:
        """Return the available themes."""

    async def get_settings(self) -> SlideshowSettings:
        """Return the stored settings."""

    async def save_settings(self, settings: SlideshowSettings) -> SlideshowSettings:
        """Save settings and return the server's normalized copy."""


def resolve_image_url(image_url: str, base_url: str) -> str:
    """Prefix relative image paths with the backend base URL."""
    if not image_url or image_url.startswith(("http://", "https://", "data:")):
        return image_url
    return f"{base_url.rstrip('/')}{image_url}"


@dataclass
class HttpxSlideshowApiClient(SlideshowApiClient):
    """HTTPX-backed slideshow API client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxSlideshowApiClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    @property
    def api_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/api"

    async def get_photos(self) -> list[Photo]:
        data = await self._request("GET", "/photos")
        return [self._resolve(Photo.model_validate(item)) for item in data]

    async def get_photo(self, photo_id: int) -> Photo:
        data = await self._request("GET", f"/photos/{photo_id}")
        return self._resolve(Photo.model_validate(data))

    async def get_themes(self) -> list[Theme]:
        data = await self._request("GET", "/themes")
        return [Theme.model_validate(item) for item in data]

    async def get_settings(self) -> SlideshowSettings:
        data = await self._request("GET", "/settings")
        return SlideshowSettings.model_validate(data)

    async def save_settings(self, settings: SlideshowSettings) -> SlideshowSettings:
        data = await self._request(
            "POST", "/settings", json=settings.model_dump(by_alias=True)
        )
        return SlideshowSettings.model_validate(data)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self, method: str, endpoint: str, json: dict[str, object] | None = None
    ) -> object:
        try:
            response = await self.http_client.request(
                method, f"{self.api_url}{endpoint}", json=json, timeout=10
            )
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError):
            logger.exception("API call failed", extra={"endpoint": endpoint})
            raise

    def _resolve(self, photo: Photo) -> Photo:
        return photo.model_copy(
            update={"image_url": resolve_image_url(photo.image_url, self.base_url)}
        )
