"""Read-side services for photos, themes and settings."""

from dataclasses import dataclass
from typing import Protocol

from photo_slideshow.domain.models import DataStore, Photo, SlideshowSettings, Theme


class DataRepository(Protocol):
    """Persistence interface for the slideshow data document."""

    def load(self) -> DataStore:
        """Return a freshly loaded copy of the data document."""

    def save_settings(self, settings: SlideshowSettings) -> None:
        """Replace the stored settings."""


class PhotoNotFoundError(LookupError):
    """Raised when a photo id does not resolve."""

    def __init__(self, photo_id: object) -> None:
        super().__init__("Photo not found")
        self.photo_id = photo_id


@dataclass
class CatalogService:
    """Application service exposing the data document read-only."""

    repository: DataRepository

    def list_photos(self) -> list[Photo]:
        """Return every photo in storage order."""
        return self.repository.load().photos

    def get_photo(self, photo_id: int) -> Photo:
        """Return a photo by id or raise PhotoNotFoundError."""
        for photo in self.repository.load().photos:
            if photo.id == photo_id:
                return photo
        raise PhotoNotFoundError(photo_id)

    def list_themes(self) -> list[Theme]:
        """Return the available display themes."""
        return self.repository.load().themes

    def get_settings(self) -> SlideshowSettings:
        """Return the stored slideshow settings."""
        return self.repository.load().settings
