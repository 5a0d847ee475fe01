"""Store module holding artworks and challenge requests."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence

from hanabi_canvas.records import ArtworkRecord, RequestRecord


class RecordStore(ABC):
    """Abstract base class for the artwork and request record store with listener support.

    Every runtime mutation notifies the registered listeners exactly once. Lookups
    by id return the first match in insertion order.
    """

    @abstractmethod
    def add_artwork(self, artwork: ArtworkRecord) -> None:
        """Append an artwork to the store. Duplicate ids are not rejected."""

    @abstractmethod
    def remove_artwork(self, artwork_id: str) -> bool:
        """Remove the first artwork with the given id.

        Returns:
            bool: True if an artwork was removed, False if none matched.
        """

    @abstractmethod
    def get_artwork(self, artwork_id: str) -> ArtworkRecord | None:
        """Return the first artwork with the given id, or None."""

    @abstractmethod
    def get_all_artworks(self) -> Sequence[ArtworkRecord]:
        """Return a read-only view of all artworks."""

    @abstractmethod
    def toggle_like(self, artwork_id: str) -> None:
        """Flip the liked state of an artwork. Unknown ids are logged and ignored."""

    @abstractmethod
    def has_liked(self, artwork_id: str) -> bool:
        """Return whether the artwork is liked, False if it does not exist."""

    @abstractmethod
    def complete_request(self, request_id: str) -> bool:
        """Mark the first request with the given id as completed.

        Returns:
            bool: True if a request matched, False otherwise.
        """

    @abstractmethod
    def get_all_requests(self) -> Sequence[RequestRecord]:
        """Return a read-only view of all requests."""

    @abstractmethod
    def get_active_requests(self) -> Sequence[RequestRecord]:
        """Return the requests that are not completed, in store order."""

    @abstractmethod
    def set_all_artworks(self, artworks: Iterable[ArtworkRecord] | None) -> None:
        """Replace every artwork. None replaces the collection with an empty one."""

    @abstractmethod
    def set_all_requests(self, requests: Iterable[RequestRecord] | None) -> None:
        """Replace every request. None replaces the collection with an empty one."""

    @abstractmethod
    def add_listener(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a callback invoked after every change to the stored records.

        Returns a callable that can be called to remove the listener.
        """
