"""Slideshow controller: advance, animate and autoplay state machine."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from photo_slideshow.domain.models import Photo, SlideshowSettings
from photo_slideshow.domain.slideshow import (
    AnimationPhase,
    Direction,
    DroppedFile,
    SlideshowView,
)
from photo_slideshow.services.photo_library import PhotoLibrary, is_image
from photo_slideshow.services.play_order import PlayOrder
from photo_slideshow.services.scheduling import AutoplayTimer, Scheduler, TimerHandle

logger = logging.getLogger(__name__)

# CSS transitions run for 500 ms; phases switch slightly earlier.
EXIT_DELAY_MS = 490
ENTER_DELAY_MS = 490

TEXT_ENTRY_TAGS = frozenset({"input", "textarea", "select"})
DROP_REJECTED_MESSAGE = "Please drop an image file"

_ANIMATION_CLASSES: dict[str, dict[AnimationPhase, str]] = {
    "B": {
        AnimationPhase.EXITING: "animate-fade-out",
        AnimationPhase.ENTERING: "animate-fade-in",
    },
    "C": {
        AnimationPhase.EXITING: "animate-blur-out",
        AnimationPhase.ENTERING: "animate-blur-in",
    },
}


def animation_class(theme_id: str, phase: AnimationPhase) -> str:
    """Return the CSS class for a theme and phase, or an empty string."""
    return _ANIMATION_CLASSES.get(theme_id, {}).get(phase, "")


def step_index(index: int, count: int, direction: Direction) -> int:
    """Move ``index`` one step in ``direction`` around a ring of ``count``."""
    if direction is Direction.NEXT:
        return (index + 1) % count
    return (index - 1 + count) % count


@dataclass
class SlideshowController:
    """Owns the displayed position, the transition phase and the autoplay timer.

    Transitions form a small state machine: ``none -> exiting -> entering ->
    none``. Animated advances are rejected while a transition is in flight;
    manual navigation cancels the transition and jumps straight away.
    """

    library: PhotoLibrary
    settings: SlideshowSettings
    scheduler: Scheduler
    play_order: PlayOrder = field(default_factory=PlayOrder)
    on_show_detail: Callable[[Photo], None] | None = None
    on_notice: Callable[[str], None] | None = None
    on_change: Callable[[SlideshowView], None] | None = None
    current_index: int = field(default=0, init=False)
    animation_phase: AnimationPhase = field(default=AnimationPhase.NONE, init=False)
    is_drag_over: bool = field(default=False, init=False)
    _timer: AutoplayTimer = field(init=False, repr=False)
    _transition: TimerHandle | None = field(default=None, init=False, repr=False)
    _running: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self._timer = AutoplayTimer(self.scheduler)
        self.play_order.rebuild(len(self.library), self.settings.play_mode)

    @property
    def current_photo(self) -> Photo | None:
        if len(self.library) == 0:
            return None
        return self.library.photos[self.play_order[self.current_index]]

    @property
    def autoplay_armed(self) -> bool:
        return self._timer.is_armed

    def start(self) -> None:
        """Begin autoplay."""
        self._running = True
        self.arm()

    def close(self) -> None:
        """Stop autoplay and drop any in-flight transition."""
        self._running = False
        self._timer.close()
        self._cancel_transition()

    def arm(self) -> None:
        """(Re)start the autoplay tick using the current slide interval."""
        self._timer.cancel()
        if not self._running or len(self.library) == 0:
            return
        self._timer.arm(self.settings.slide_interval, self._on_tick)

    def advance(
        self,
        direction: Direction = Direction.NEXT,
        *,
        animate: bool = True,
        reset_timer: bool = False,
    ) -> bool:
        """Move to the neighbouring photo; return False when nothing happened."""
        count = len(self.library)
        if count == 0:
            return False
        if self.animation_phase is not AnimationPhase.NONE:
            if animate:
                logger.debug("Transition in flight, advance rejected")
                return False
            self._cancel_transition()

        if reset_timer:
            self._timer.cancel()

        if not animate:
            self._step(direction)
            return True

        self._set_phase(AnimationPhase.EXITING)
        self._transition = self.scheduler.call_later(
            EXIT_DELAY_MS / 1000, lambda: self._enter(direction)
        )
        return True

    def update_settings(self, settings: SlideshowSettings) -> None:
        """Adopt new settings, re-arming autoplay when timing inputs change."""
        previous = self.settings
        self.settings = settings
        if settings.play_mode != previous.play_mode:
            self.play_order.rebuild(len(self.library), settings.play_mode)
        if (
            settings.slide_interval != previous.slide_interval
            or settings.play_mode != previous.play_mode
        ):
            self.arm()
        self._notify()

    def reshuffle(self) -> None:
        """Shuffle the play order; sequential mode then walks the shuffled order."""
        self.play_order.shuffle(len(self.library))
        self._notify()

    def photos_changed(self) -> None:
        """Resynchronise after the photo collection grew or was replaced."""
        count = len(self.library)
        self.play_order.resize(count, self.settings.play_mode)
        if count == 0:
            self.current_index = 0
        elif self.current_index >= count:
            self.current_index = count - 1
        self.arm()
        self._notify()

    def on_key(self, key: str, target_tag: str | None = None) -> bool:
        """Handle arrow-key navigation; return True when the key was used."""
        if target_tag and target_tag.lower() in TEXT_ENTRY_TAGS:
            return False
        if key == "ArrowLeft":
            self.advance(Direction.PREV, animate=False, reset_timer=True)
            return True
        if key == "ArrowRight":
            self.advance(Direction.NEXT, animate=False, reset_timer=True)
            return True
        return False

    def on_drag_over(self) -> None:
        self.is_drag_over = True
        self._notify()

    def on_drag_leave(self) -> None:
        self.is_drag_over = False
        self._notify()

    def on_drop(self, files: Sequence[DroppedFile]) -> Photo | None:
        """Add the first dropped file when it is an image."""
        self.is_drag_over = False
        if not files:
            self._notify()
            return None
        dropped = files[0]
        if not is_image(dropped.content_type):
            self._notice(DROP_REJECTED_MESSAGE)
            self._notify()
            return None
        photo = self.library.add_dropped(dropped)
        self.photos_changed()
        return photo

    def on_photo_click(self) -> Photo | None:
        """Request the detail view for the current photo."""
        photo = self.current_photo
        if photo is None:
            return None
        if self.on_show_detail is not None:
            self.on_show_detail(photo)
        return photo

    def snapshot(self) -> SlideshowView:
        return SlideshowView(
            photo=self.current_photo,
            current_index=self.current_index,
            total=len(self.library),
            animation_phase=self.animation_phase,
            animation_class=animation_class(
                self.settings.theme_id, self.animation_phase
            ),
            is_drag_over=self.is_drag_over,
        )

    def _on_tick(self) -> None:
        self.advance(Direction.NEXT, animate=True, reset_timer=False)

    def _enter(self, direction: Direction) -> None:
        self._transition = None
        self.animation_phase = AnimationPhase.ENTERING
        self._step(direction)
        self._transition = self.scheduler.call_later(
            ENTER_DELAY_MS / 1000, self._finish
        )

    def _finish(self) -> None:
        self._transition = None
        self._set_phase(AnimationPhase.NONE)

    def _step(self, direction: Direction) -> None:
        # Read the collection at commit time; a drop may land mid-transition.
        count = len(self.library)
        if count == 0:
            return
        wrapped = direction is Direction.NEXT and self.current_index >= count - 1
        if wrapped and self.settings.play_mode == "random":
            self.play_order.rebuild(count, self.settings.play_mode)
        self.current_index = step_index(self.current_index, count, direction)
        self.arm()
        self._notify()

    def _cancel_transition(self) -> None:
        if self._transition is not None:
            self._transition.cancel()
            self._transition = None
        self.animation_phase = AnimationPhase.NONE

    def _set_phase(self, phase: AnimationPhase) -> None:
        self.animation_phase = phase
        self._notify()

    def _notice(self, message: str) -> None:
        if self.on_notice is None:
            logger.warning(message)
            return
        self.on_notice(message)

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.snapshot())
