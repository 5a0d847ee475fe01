"""Serialization of the record collections for saving across sessions.

Each collection is stored as its own JSON document. The documents never hold a
bare array at the top level; the records are wrapped in a single field object:

    {"artworks": [{...}, ...]}
    {"requests": [{...}, ...]}

Importing is fail-soft: empty, missing or malformed input is logged and
yields an empty collection rather than an error, so that a corrupt save file
never prevents the application from starting. File helpers follow the same
contract and never raise.
"""

from collections.abc import Iterable
from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any, TypeVar

import aiofiles
import aiofiles.os
from mashumaro import DataClassDictMixin
from mashumaro.config import BaseConfig

from .records import ArtworkRecord, RequestRecord

__all__ = [
    "export_artworks",
    "export_requests",
    "import_artworks",
    "import_requests",
    "save_to_file",
    "load_from_file",
    "async_save_to_file",
    "async_load_from_file",
]

_LOGGER = logging.getLogger(__name__)

INDENT = 4

W = TypeVar("W", bound=DataClassDictMixin)


@dataclass
class ArtworkList(DataClassDictMixin):
    """Wrapper object holding a list of artworks."""

    artworks: list[ArtworkRecord] | None = None

    class Config(BaseConfig):
        serialize_by_alias = True


@dataclass
class RequestList(DataClassDictMixin):
    """Wrapper object holding a list of requests."""

    requests: list[RequestRecord] | None = None

    class Config(BaseConfig):
        serialize_by_alias = True


def _encode(wrapper: DataClassDictMixin) -> str:
    return json.dumps(wrapper.to_dict(), indent=INDENT)


def _decode(content: str | None, cls: type[W], label: str) -> W | None:
    """Decode a wrapper document, returning None when nothing could be loaded."""
    if not content:
        return None
    try:
        doc: Any = json.loads(content)
        if not isinstance(doc, dict):
            raise ValueError(f"expected a JSON object, got {type(doc).__name__}")
        return cls.from_dict(doc)
    except Exception as err:  # pylint: disable=broad-except
        _LOGGER.warning("Failed to import %s: %s", label, err)
        return None


def export_artworks(artworks: Iterable[ArtworkRecord]) -> str:
    """Serialize artworks to a JSON document."""
    return _encode(ArtworkList(artworks=list(artworks)))


def import_artworks(content: str | None) -> list[ArtworkRecord]:
    """Deserialize artworks from a JSON document.

    Returns an empty list if the content is empty, malformed, or has no
    artworks field.
    """
    if (wrapper := _decode(content, ArtworkList, "artworks")) is None:
        return []
    return list(wrapper.artworks or [])


def export_requests(requests: Iterable[RequestRecord]) -> str:
    """Serialize requests to a JSON document."""
    return _encode(RequestList(requests=list(requests)))


def import_requests(content: str | None) -> list[RequestRecord]:
    """Deserialize requests from a JSON document.

    Returns an empty list if the content is empty, malformed, or has no
    requests field.
    """
    if (wrapper := _decode(content, RequestList, "requests")) is None:
        return []
    return list(wrapper.requests or [])


def save_to_file(content: str, path: Path | str) -> None:
    """Write the content to a file, logging any failure."""
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as err:
        _LOGGER.warning("Failed to save file %s: %s", path, err)


def load_from_file(path: Path | str) -> str | None:
    """Return the content of a file, or None if it does not exist or cannot be read."""
    file_path = Path(path)
    try:
        if not file_path.exists():
            _LOGGER.debug("File %s does not exist", file_path)
            return None
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        _LOGGER.warning("Failed to load file %s: %s", path, err)
        return None


async def async_save_to_file(content: str, path: Path | str) -> None:
    """Write the content to a file without blocking the event loop."""
    try:
        async with aiofiles.open(str(path), mode="w", encoding="utf-8") as out_file:
            await out_file.write(content)
    except OSError as err:
        _LOGGER.warning("Failed to save file %s: %s", path, err)


async def async_load_from_file(path: Path | str) -> str | None:
    """Return the content of a file without blocking the event loop.

    Returns None if the file does not exist or cannot be read.
    """
    try:
        if not await aiofiles.os.path.exists(str(path)):
            _LOGGER.debug("File %s does not exist", path)
            return None
        async with aiofiles.open(str(path), encoding="utf-8") as in_file:
            return await in_file.read()
    except (OSError, UnicodeDecodeError) as err:
        _LOGGER.warning("Failed to load file %s: %s", path, err)
        return None
