"""Module for in memory record store."""

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar, overload

import logging

from hanabi_canvas.config import ChallengeConfig
from hanabi_canvas.records import ArtworkRecord, RequestRecord

from .sinks import CountSink
from .store import RecordStore


_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class RecordView(Sequence[T]):
    """Read-only view over a live list of records owned by the store."""

    def __init__(self, records: list[T]) -> None:
        """Initialize the RecordView."""
        self._records = records

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        if isinstance(index, slice):
            return tuple(self._records[index])
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordView({self._records!r})"


class InMemoryRecordStore(RecordStore):
    """In-memory implementation of the RecordStore interface.

    Holds artworks and requests in insertion order. The active requests are
    materialized lazily: every mutation marks the cache dirty and the next call
    to get_active_requests rebuilds it once. After every mutation the derived
    counts are pushed to the optional CountSink and the listeners are invoked.
    """

    def __init__(
        self,
        config: ChallengeConfig | None = None,
        sinks: CountSink | None = None,
    ) -> None:
        """Initialize the InMemoryRecordStore and load any predefined requests."""
        self._artworks: list[ArtworkRecord] = []
        self._requests: list[RequestRecord] = []
        self._active_requests: tuple[RequestRecord, ...] = ()
        self._active_requests_dirty = True
        self._sinks = sinks
        self._listeners: list[Callable[[], None]] = []
        self._load_predefined_requests(config)

    @property
    def artwork_count(self) -> int:
        """Total number of stored artworks."""
        return len(self._artworks)

    @property
    def request_count(self) -> int:
        """Total number of stored requests."""
        return len(self._requests)

    def add_artwork(self, artwork: ArtworkRecord) -> None:
        """Append an artwork to the store. Duplicate ids are not rejected."""
        _LOGGER.debug("Adding artwork %s to store", artwork.id)
        self._artworks.append(artwork)
        self._data_changed()

    def remove_artwork(self, artwork_id: str) -> bool:
        """Remove the first artwork with the given id."""
        if (index := self._find_artwork(artwork_id)) is None:
            return False
        _LOGGER.debug("Removing artwork %s from store", artwork_id)
        del self._artworks[index]
        self._data_changed()
        return True

    def get_artwork(self, artwork_id: str) -> ArtworkRecord | None:
        """Return the first artwork with the given id, or None."""
        if (index := self._find_artwork(artwork_id)) is None:
            return None
        return self._artworks[index]

    def get_all_artworks(self) -> Sequence[ArtworkRecord]:
        """Return a read-only view of all artworks."""
        return RecordView(self._artworks)

    def toggle_like(self, artwork_id: str) -> None:
        """Flip the liked state of an artwork. Unknown ids are logged and ignored."""
        if (index := self._find_artwork(artwork_id)) is None:
            _LOGGER.warning("toggle_like: artwork '%s' not found", artwork_id)
            return
        self._artworks[index] = self._artworks[index].with_like_toggled()
        self._data_changed()

    def has_liked(self, artwork_id: str) -> bool:
        """Return whether the artwork is liked, False if it does not exist."""
        if (artwork := self.get_artwork(artwork_id)) is None:
            return False
        return artwork.is_liked

    def complete_request(self, request_id: str) -> bool:
        """Mark the first request with the given id as completed."""
        for index, request in enumerate(self._requests):
            if request.id == request_id:
                _LOGGER.debug("Completing request %s", request_id)
                self._requests[index] = request.with_completed()
                self._data_changed()
                return True
        return False

    def get_all_requests(self) -> Sequence[RequestRecord]:
        """Return a read-only view of all requests."""
        return RecordView(self._requests)

    def get_active_requests(self) -> Sequence[RequestRecord]:
        """Return the requests that are not completed, rebuilding the cache if dirty."""
        if self._active_requests_dirty:
            self._rebuild_active_requests()
        return self._active_requests

    def set_all_artworks(self, artworks: Iterable[ArtworkRecord] | None) -> None:
        """Replace every artwork. None replaces the collection with an empty one."""
        # Materialize first so a failing iterable leaves the store untouched
        new_artworks = list(artworks) if artworks is not None else []
        _LOGGER.debug("Replacing artworks with %d records", len(new_artworks))
        self._artworks[:] = new_artworks
        self._data_changed()

    def set_all_requests(self, requests: Iterable[RequestRecord] | None) -> None:
        """Replace every request. None replaces the collection with an empty one."""
        new_requests = list(requests) if requests is not None else []
        _LOGGER.debug("Replacing requests with %d records", len(new_requests))
        self._requests[:] = new_requests
        self._data_changed()

    def add_listener(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a callback invoked after every change to the stored records."""

        def remove() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        self._listeners.append(callback)
        return remove

    def _find_artwork(self, artwork_id: str) -> int | None:
        for index, artwork in enumerate(self._artworks):
            if artwork.id == artwork_id:
                return index
        return None

    def _load_predefined_requests(self, config: ChallengeConfig | None) -> None:
        if config is None or config.predefined_requests is None:
            return
        _LOGGER.debug(
            "Loading %d predefined requests", len(config.predefined_requests)
        )
        self._requests.extend(config.predefined_requests)
        # Startup load is not a runtime mutation, listeners are not notified
        self._active_requests_dirty = True
        self._update_sinks()

    def _data_changed(self) -> None:
        self._active_requests_dirty = True
        self._update_sinks()
        for cb in list(self._listeners):
            cb()

    def _update_sinks(self) -> None:
        if self._sinks is None:
            return
        self._sinks.set_artwork_count(len(self._artworks))
        self._sinks.set_active_request_count(
            sum(1 for request in self._requests if not request.is_completed)
        )

    def _rebuild_active_requests(self) -> None:
        self._active_requests = tuple(
            request for request in self._requests if not request.is_completed
        )
        self._active_requests_dirty = False
