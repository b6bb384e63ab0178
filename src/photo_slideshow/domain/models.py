"""Domain models for the photo slideshow."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

THEME_IDS = ("A", "B", "C")
PLAY_MODES = ("auto", "random")

ThemeId = Literal["A", "B", "C"]
PlayMode = Literal["auto", "random"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Photo(_CamelModel):
    """A single photo in the slideshow."""

    id: int
    image_url: str
    caption: str
    file_size: str | None = None
    created_at: str | None = None


class Theme(_CamelModel):
    """A cosmetic display theme."""

    id: str
    name: str
    description: str


class SlideshowSettings(_CamelModel):
    """Global slideshow settings."""

    theme_id: ThemeId = "A"
    slide_interval: int = 500
    play_mode: PlayMode = "auto"


class DataStore(_CamelModel):
    """Contents of the backing JSON document."""

    photos: list[Photo] = []
    themes: list[Theme] = []
    settings: SlideshowSettings = Field(default_factory=SlideshowSettings)
