"""Shared test fixtures."""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import httpx
import pytest

from photo_slideshow.adapters.slideshow_api_client import SlideshowApiClient
from photo_slideshow.config import Settings
from photo_slideshow.containers import AppContainer, build_container
from photo_slideshow.domain.models import DataStore, Photo, SlideshowSettings, Theme
from photo_slideshow.services.catalog import DataRepository
from photo_slideshow.services.scheduling import Scheduler

SAMPLE_DATA: dict[str, object] = {
    "photos": [
        {
            "id": 1,
            "imageUrl": "/assets/images/one.jpg",
            "caption": "One",
            "fileSize": "1.0 MB",
            "createdAt": "2024-01-01 10:00",
        },
        {
            "id": 2,
            "imageUrl": "/assets/images/two.jpg",
            "caption": "Two",
            "fileSize": "2.0 MB",
            "createdAt": "2024-01-02 10:00",
        },
        {
            "id": 3,
            "imageUrl": "https://cdn.example.com/three.jpg",
            "caption": "Three",
            "fileSize": "3.0 MB",
            "createdAt": "2024-01-03 10:00",
        },
    ],
    "themes": [
        {"id": "A", "name": "Basic", "description": "No animation"},
        {"id": "B", "name": "Fade", "description": "Fade out and in"},
        {"id": "C", "name": "Blur", "description": "Blur out and in"},
    ],
    "settings": {"themeId": "B", "slideInterval": 3000, "playMode": "auto"},
}


def make_photos(count: int) -> list[Photo]:
    return [
        Photo(id=index + 1, image_url=f"/assets/{index + 1}.jpg", caption=f"#{index + 1}")
        for index in range(count)
    ]


@dataclass
class InMemoryDataRepository(DataRepository):
    """In-memory data repository for tests."""

    store: DataStore = field(
        default_factory=lambda: DataStore.model_validate(SAMPLE_DATA)
    )
    saved: list[SlideshowSettings] = field(default_factory=list)

    def load(self) -> DataStore:
        return self.store.model_copy(deep=True)

    def save_settings(self, settings: SlideshowSettings) -> None:
        self.saved.append(settings)
        self.store = self.store.model_copy(update={"settings": settings})


@dataclass
class _FakeHandle:
    due_ms: int
    seq: int
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeScheduler(Scheduler):
    """Manual clock scheduler; time only moves through ``advance``."""

    now_ms: int = 0
    handles: list[_FakeHandle] = field(default_factory=list)
    _seq: int = 0

    def call_later(self, delay: float, callback: Callable[[], None]) -> _FakeHandle:
        self._seq += 1
        handle = _FakeHandle(
            due_ms=self.now_ms + round(delay * 1000), seq=self._seq, callback=callback
        )
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[_FakeHandle]:
        return [handle for handle in self.handles if not handle.cancelled]

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [h for h in self.pending if h.due_ms <= target]
            if not due:
                break
            handle = min(due, key=lambda h: (h.due_ms, h.seq))
            self.handles.remove(handle)
            self.now_ms = handle.due_ms
            handle.callback()
        self.now_ms = target


@dataclass
class FakeSlideshowClient(SlideshowApiClient):
    """Fake API client backed by in-memory data."""

    photos: list[Photo] = field(default_factory=lambda: make_photos(3))
    themes: list[Theme] = field(
        default_factory=lambda: [
            Theme.model_validate(theme) for theme in SAMPLE_DATA["themes"]  # type: ignore[attr-defined]
        ]
    )
    settings: SlideshowSettings = field(
        default_factory=lambda: SlideshowSettings(
            theme_id="B", slide_interval=3000, play_mode="auto"
        )
    )
    saved: list[SlideshowSettings] = field(default_factory=list)
    fail_photos: bool = False
    fail_settings: bool = False
    fail_save: bool = False

    async def get_photos(self) -> list[Photo]:
        if self.fail_photos:
            raise httpx.ConnectError("connection refused")
        return list(self.photos)

    async def get_photo(self, photo_id: int) -> Photo:
        for photo in self.photos:
            if photo.id == photo_id:
                return photo
        request = httpx.Request("GET", f"http://test/api/photos/{photo_id}")
        response = httpx.Response(404, json={"error": "Photo not found"}, request=request)
        raise httpx.HTTPStatusError("404", request=request, response=response)

    async def get_themes(self) -> list[Theme]:
        return list(self.themes)

    async def get_settings(self) -> SlideshowSettings:
        if self.fail_settings:
            raise httpx.ConnectError("connection refused")
        return self.settings

    async def save_settings(self, settings: SlideshowSettings) -> SlideshowSettings:
        if self.fail_save:
            raise httpx.ConnectError("connection refused")
        self.saved.append(settings)
        self.settings = settings
        return settings


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(SAMPLE_DATA), encoding="utf-8")
    return path


@pytest.fixture
def openapi_file(tmp_path: Path) -> Path:
    path = tmp_path / "openapi.json"
    path.write_text(
        json.dumps({"openapi": "3.0.3", "info": {"title": "Test", "version": "1"}}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings(tmp_path: Path, data_file: Path, openapi_file: Path) -> Settings:
    return Settings(
        data_file=data_file,
        openapi_file=openapi_file,
        assets_dir=tmp_path / "assets",
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def api_client() -> FakeSlideshowClient:
    return FakeSlideshowClient()
