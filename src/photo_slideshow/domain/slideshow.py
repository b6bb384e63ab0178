"""Domain types for the client-side slideshow."""

from dataclasses import dataclass
from enum import StrEnum

from photo_slideshow.domain.models import Photo


class Direction(StrEnum):
    """Navigation direction."""

    NEXT = "next"
    PREV = "prev"


class AnimationPhase(StrEnum):
    """Transition phase while swapping the displayed photo."""

    NONE = "none"
    EXITING = "exiting"
    ENTERING = "entering"


@dataclass(frozen=True)
class DroppedFile:
    """A file handed to the slideshow via drag-and-drop."""

    name: str
    content_type: str
    data: bytes


@dataclass(frozen=True)
class SlideshowView:
    """Renderable snapshot of the slideshow state."""

    photo: Photo | None
    current_index: int
    total: int
    animation_phase: AnimationPhase
    animation_class: str
    is_drag_over: bool

    @property
    def is_empty(self) -> bool:
        return self.photo is None

    @property
    def caption(self) -> str:
        return self.photo.caption if self.photo else ""

    @property
    def position_label(self) -> str:
        if self.photo is None:
            return "0 / 0"
        return f"{self.current_index + 1} / {self.total}"
