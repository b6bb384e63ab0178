"""Tests for settings validation and saving."""

import pytest

from photo_slideshow.services.catalog import CatalogService, PhotoNotFoundError
from photo_slideshow.services.slideshow_settings import (
    INTERVAL_RANGE_ERROR,
    INTERVAL_TYPE_ERROR,
    PLAY_MODE_ERROR,
    THEME_ERROR,
    SettingsService,
    SettingsValidationError,
    validate_settings,
)
from tests.conftest import InMemoryDataRepository


def test_validate_accepts_complete_payload() -> None:
    assert validate_settings(
        {"themeId": "B", "slideInterval": 2000, "playMode": "random"}
    ) == []


def test_validate_rejects_unknown_theme() -> None:
    errors = validate_settings({"themeId": "D", "slideInterval": 10, "playMode": "auto"})

    assert errors == [THEME_ERROR]


def test_validate_rejects_non_positive_interval() -> None:
    assert validate_settings({"themeId": "A", "slideInterval": -5}) == [
        INTERVAL_RANGE_ERROR
    ]
    assert validate_settings({"themeId": "A", "slideInterval": 0}) == [
        INTERVAL_RANGE_ERROR
    ]


def test_validate_rejects_interval_that_truncates_to_zero() -> None:
    assert validate_settings({"themeId": "A", "slideInterval": 0.5}) == [
        INTERVAL_RANGE_ERROR
    ]


@pytest.mark.parametrize("interval", [None, "100", True, float("nan"), [100]])
def test_validate_rejects_non_numeric_interval(interval: object) -> None:
    errors = validate_settings({"themeId": "A", "slideInterval": interval})

    assert errors == [INTERVAL_TYPE_ERROR]


def test_validate_rejects_unknown_play_mode() -> None:
    errors = validate_settings({"themeId": "A", "slideInterval": 10, "playMode": "loop"})

    assert errors == [PLAY_MODE_ERROR]


def test_validate_treats_non_object_as_missing_fields() -> None:
    assert validate_settings(["A", 10]) == [THEME_ERROR, INTERVAL_TYPE_ERROR]


def test_save_defaults_play_mode_and_truncates_interval() -> None:
    service = SettingsService(InMemoryDataRepository())

    saved = service.save_settings({"themeId": "A", "slideInterval": 100.9, "playMode": ""})

    assert saved.theme_id == "A"
    assert saved.slide_interval == 100
    assert saved.play_mode == "auto"


def test_save_is_an_echo_by_default() -> None:
    repository = InMemoryDataRepository()
    service = SettingsService(repository)

    service.save_settings({"themeId": "C", "slideInterval": 700})

    assert repository.saved == []
    assert repository.load().settings.theme_id == "B"


def test_save_persists_when_enabled() -> None:
    repository = InMemoryDataRepository()
    service = SettingsService(repository, persist=True)

    service.save_settings({"themeId": "C", "slideInterval": 700})

    assert repository.load().settings.theme_id == "C"


def test_save_raises_with_all_errors() -> None:
    service = SettingsService(InMemoryDataRepository())

    with pytest.raises(SettingsValidationError) as excinfo:
        service.save_settings({"themeId": "X", "slideInterval": -1, "playMode": "x"})

    assert excinfo.value.errors == [THEME_ERROR, INTERVAL_RANGE_ERROR, PLAY_MODE_ERROR]
    assert str(excinfo.value) == ", ".join(excinfo.value.errors)


def test_catalog_get_photo_raises_for_unknown_id() -> None:
    service = CatalogService(InMemoryDataRepository())

    assert service.get_photo(3).caption == "Three"
    with pytest.raises(PhotoNotFoundError):
        service.get_photo(999)


def test_validate_accepts_integer_too_large_for_float() -> None:
    huge = 10**400

    assert validate_settings({"themeId": "A", "slideInterval": huge}) == []
    assert SettingsService(InMemoryDataRepository()).save_settings(
        {"themeId": "A", "slideInterval": huge}
    ).slide_interval == huge
