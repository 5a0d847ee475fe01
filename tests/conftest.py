"""Shared fixtures for hanabi-canvas tests."""

from collections.abc import Callable

import pytest

from hanabi_canvas.records import (
    ArtworkRecord,
    ConstraintData,
    ConstraintType,
    PixelColor,
    PixelEntry,
    RequestRecord,
)


@pytest.fixture(name="make_artwork")
def make_artwork_fixture() -> Callable[..., ArtworkRecord]:
    """Fixture returning a function that creates an artwork with a small drawing."""

    def _make(artwork_id: str, is_liked: bool = False) -> ArtworkRecord:
        return ArtworkRecord(
            id=artwork_id,
            name=f"Test {artwork_id}",
            pixels=(
                PixelEntry(x=0, y=0, color=PixelColor(r=255, g=0, b=0)),
                PixelEntry(x=3, y=7, color=PixelColor(r=10, g=20, b=30, a=128)),
            ),
            width=32,
            height=32,
            created_timestamp=1000,
            is_liked=is_liked,
        )

    return _make


@pytest.fixture(name="make_request")
def make_request_fixture() -> Callable[..., RequestRecord]:
    """Fixture returning a function that creates a request with constraints."""

    def _make(request_id: str, is_completed: bool = False) -> RequestRecord:
        return RequestRecord(
            id=request_id,
            prompt="Draw a heart",
            constraints=(
                ConstraintData(type=ConstraintType.COLOR_LIMIT, int_value=4),
                ConstraintData(type=ConstraintType.TIME_LIMIT, float_value=30.5),
            ),
            is_completed=is_completed,
        )

    return _make
