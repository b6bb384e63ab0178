"""Validation and saving of slideshow settings."""

import logging
import math
from dataclasses import dataclass

from photo_slideshow.domain.models import PLAY_MODES, THEME_IDS, SlideshowSettings
from photo_slideshow.services.catalog import DataRepository

logger = logging.getLogger(__name__)

THEME_ERROR = "Theme must be one of A, B, C"
INTERVAL_TYPE_ERROR = "Slide interval must be a number"
INTERVAL_RANGE_ERROR = "Slide interval must be a positive number"
PLAY_MODE_ERROR = "Play mode must be auto or random"


class SettingsValidationError(ValueError):
    """Raised when a settings candidate fails validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(", ".join(errors))
        self.errors = errors


def validate_settings(candidate: object) -> list[str]:
    """Return every validation message for a raw settings payload.

    Each field is checked independently so the caller sees all problems at
    once. A payload that is not a JSON object fails the required fields.
    """
    data = candidate if isinstance(candidate, dict) else {}
    errors: list[str] = []

    theme_id = data.get("themeId")
    if not theme_id or theme_id not in THEME_IDS:
        errors.append(THEME_ERROR)

    interval = data.get("slideInterval")
    if not _is_number(interval):
        errors.append(INTERVAL_TYPE_ERROR)
    elif int(interval) <= 0:
        errors.append(INTERVAL_RANGE_ERROR)

    play_mode = data.get("playMode")
    if play_mode and play_mode not in PLAY_MODES:
        errors.append(PLAY_MODE_ERROR)

    return errors


def normalize_settings(candidate: dict[str, object]) -> SlideshowSettings:
    """Build settings from an already validated payload."""
    return SlideshowSettings(
        theme_id=candidate["themeId"],
        slide_interval=int(candidate["slideInterval"]),
        play_mode=candidate.get("playMode") or "auto",
    )


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return True


@dataclass
class SettingsService:
    """Service for validating and saving settings."""

    repository: DataRepository
    persist: bool = False

    def save_settings(self, candidate: object) -> SlideshowSettings:
        """Validate a payload and return the normalized settings.

        The backing store is only written when persistence is enabled;
        otherwise the normalized value is echoed back.
        """
        errors = validate_settings(candidate)
        if errors:
            raise SettingsValidationError(errors)
        settings = normalize_settings(candidate)  # type: ignore[arg-type]
        if self.persist:
            self.repository.save_settings(settings)
            logger.info("Saved slideshow settings", extra={"theme_id": settings.theme_id})
        return settings
