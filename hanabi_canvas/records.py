"""Value types for the records held by the record store.

Records are immutable: changing a flag on a stored record means building a
new value with the flag changed and replacing the old value in its slot. The
serialized form uses camelCase field names so that save files stay
compatible with the ones written by earlier versions of the application.
"""

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

from mashumaro import DataClassDictMixin, field_options
from mashumaro.config import BaseConfig

__all__ = [
    "ArtworkRecord",
    "RequestRecord",
    "PixelColor",
    "PixelEntry",
    "ConstraintType",
    "ConstraintData",
    "STRICT_SCALARS",
]


def _strict_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def _strict_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {value!r}")
    return value


def _strict_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value


def _strict_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)


STRICT_SCALARS: dict[Any, dict[str, Any]] = {
    str: {"deserialize": _strict_str},
    bool: {"deserialize": _strict_bool},
    int: {"deserialize": _strict_int},
    float: {"deserialize": _strict_float},
}
"""Deserialization strategy that rejects scalars of the wrong type.

By default mashumaro converts with `str()` and `bool()`, so a null id would be
loaded as "None" and the string "false" as True.
"""


@dataclass(frozen=True)
class BaseRecord(DataClassDictMixin):
    """Base class for all serializable record values."""

    class Config(BaseConfig):
        serialize_by_alias = True
        serialization_strategy = STRICT_SCALARS


@dataclass(frozen=True)
class PixelColor(BaseRecord):
    """An 8-bit RGBA color."""

    r: int
    g: int
    b: int
    a: int = 255


@dataclass(frozen=True)
class PixelEntry(BaseRecord):
    """A single non-empty pixel of a drawing."""

    x: int
    """Column of the pixel on the canvas."""

    y: int
    """Row of the pixel on the canvas."""

    color: PixelColor


class ConstraintType(StrEnum):
    """Types of drawing constraints for challenge requests."""

    COLOR_LIMIT = "ColorLimit"
    """Maximum number of unique colors allowed."""

    TIME_LIMIT = "TimeLimit"
    """Drawing time limit in seconds."""

    SYMMETRY_REQUIRED = "SymmetryRequired"
    """Must use symmetry mode."""

    PIXEL_LIMIT = "PixelLimit"
    """Maximum or minimum number of filled pixels."""

    PALETTE_RESTRICTION = "PaletteRestriction"
    """Only specific palette indices allowed."""


@dataclass(frozen=True)
class ConstraintData(BaseRecord):
    """A single drawing constraint attached to a challenge request."""

    type: ConstraintType

    int_value: int = field(metadata=field_options(alias="intValue"), default=0)
    """Integer parameter for the constraint (e.g. color count, pixel count)."""

    float_value: float = field(metadata=field_options(alias="floatValue"), default=0.0)
    """Float parameter for the constraint (e.g. time limit in seconds)."""

    bool_value: bool = field(metadata=field_options(alias="boolValue"), default=False)
    """Boolean parameter for the constraint (e.g. symmetry required)."""


@dataclass(frozen=True)
class ArtworkRecord(BaseRecord):
    """A saved artwork: a pixel drawing with its metadata."""

    id: str
    """Identifier of the artwork, expected but not required to be unique."""

    name: str = ""
    """Display name of the artwork."""

    pixels: tuple[PixelEntry, ...] = ()
    """The non-empty pixels that make up the drawing."""

    width: int = 0
    """Width of the canvas in pixels."""

    height: int = 0
    """Height of the canvas in pixels."""

    created_timestamp: int = field(
        metadata=field_options(alias="createdTimestamp"), default=0
    )
    """Timestamp when the artwork was created."""

    is_liked: bool = field(metadata=field_options(alias="isLiked"), default=False)
    """Whether the player has liked this artwork."""

    def with_like_toggled(self) -> "ArtworkRecord":
        """Return a copy of this artwork with the liked state flipped."""
        return replace(self, is_liked=not self.is_liked)


@dataclass(frozen=True)
class RequestRecord(BaseRecord):
    """A challenge mode drawing request with its constraints."""

    id: str
    """Identifier of the request, expected but not required to be unique."""

    prompt: str = ""
    """Text describing what the player should draw."""

    constraints: tuple[ConstraintData, ...] = ()
    """Constraints the player must satisfy."""

    is_completed: bool = field(
        metadata=field_options(alias="isCompleted"), default=False
    )
    """Whether the player has completed this request."""

    def with_completed(self) -> "RequestRecord":
        """Return a copy of this request marked as completed."""
        return replace(self, is_completed=True)
