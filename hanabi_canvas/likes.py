"""Helpers for liking artworks.

These wrap the record store so callers holding an optional store reference
and an optional "artwork liked" callback do not need to guard each call.
"""

from collections.abc import Callable

from .store import RecordStore

__all__ = [
    "toggle_like",
    "has_liked",
]


def toggle_like(
    artwork_id: str,
    store: RecordStore | None,
    on_artwork_liked: Callable[[], None] | None = None,
) -> None:
    """Toggle the like state of an artwork and invoke the liked callback."""
    if store is None or not artwork_id:
        return
    store.toggle_like(artwork_id)
    if on_artwork_liked is not None:
        on_artwork_liked()


def has_liked(artwork_id: str, store: RecordStore | None) -> bool:
    """Return whether the artwork with the given id is liked."""
    if store is None or not artwork_id:
        return False
    return store.has_liked(artwork_id)
