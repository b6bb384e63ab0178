"""Client-side photo collection."""

import base64
import logging
from dataclasses import dataclass, field

from photo_slideshow.domain.models import Photo
from photo_slideshow.domain.slideshow import DroppedFile

logger = logging.getLogger(__name__)


@dataclass
class PhotoIdAllocator:
    """Hands out ids that never collide with ids seen so far."""

    _last_issued: int = 0

    def observe(self, photos: list[Photo]) -> None:
        """Raise the floor above every id in ``photos``."""
        for photo in photos:
            self._last_issued = max(self._last_issued, photo.id)

    def allocate(self) -> int:
        self._last_issued += 1
        return self._last_issued


@dataclass
class PhotoLibrary:
    """Photos held by a slideshow session, including local additions."""

    photos: list[Photo] = field(default_factory=list)
    allocator: PhotoIdAllocator = field(default_factory=PhotoIdAllocator)

    def __post_init__(self) -> None:
        self.allocator.observe(self.photos)

    def __len__(self) -> int:
        return len(self.photos)

    def replace(self, photos: list[Photo]) -> None:
        """Swap in a freshly fetched collection."""
        self.photos = list(photos)
        self.allocator.observe(self.photos)

    def add_dropped(self, dropped: DroppedFile) -> Photo:
        """Append a dropped image as a data-URI photo."""
        photo = Photo(
            id=self.allocator.allocate(),
            image_url=to_data_url(dropped.data, dropped.content_type),
            caption=dropped.name,
        )
        self.photos.append(photo)
        logger.info("Added dropped photo", extra={"photo_id": photo.id})
        return photo


def is_image(content_type: str) -> bool:
    """Return True for image MIME types."""
    return content_type.startswith("image/")


def to_data_url(data: bytes, content_type: str) -> str:
    """Encode bytes as a base64 data URL."""
    encoded = base64.b64encode(data).decode("utf-8")
    return f"data:{content_type};base64,{encoded}"
