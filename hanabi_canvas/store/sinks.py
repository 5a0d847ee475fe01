"""Write targets for the scalar counts derived from the record store."""

from collections.abc import Callable
from typing import Protocol

__all__ = [
    "CountSink",
    "IntVariable",
    "StoreCounters",
]


class CountSink(Protocol):
    """Receives the derived counts after every store mutation."""

    def set_artwork_count(self, count: int) -> None:
        """Record the number of stored artworks."""

    def set_active_request_count(self, count: int) -> None:
        """Record the number of requests that are not completed."""


class IntVariable:
    """A shared integer cell that notifies listeners when its value changes."""

    def __init__(self, initial_value: int = 0) -> None:
        """Initialize the IntVariable."""
        self._initial_value = initial_value
        self._value = initial_value
        self._listeners: list[Callable[[int], None]] = []

    @property
    def value(self) -> int:
        """Return the current value."""
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        if value == self._value:
            return
        self._value = value
        for cb in list(self._listeners):
            cb(value)

    def reset_to_initial(self) -> None:
        """Restore the initial value without notifying listeners."""
        self._value = self._initial_value

    def add_listener(self, callback: Callable[[int], None]) -> Callable[[], None]:
        """Register a callback invoked with the new value on every change.

        Returns a callable that can be called to remove the listener.
        """

        def remove() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        self._listeners.append(callback)
        return remove

    def __repr__(self) -> str:
        return f"IntVariable({self._value})"


class StoreCounters:
    """A CountSink that writes each count into its own IntVariable."""

    def __init__(
        self,
        artwork_count: IntVariable | None = None,
        active_request_count: IntVariable | None = None,
    ) -> None:
        """Initialize StoreCounters, creating any variable not supplied."""
        self.artwork_count = artwork_count or IntVariable()
        self.active_request_count = active_request_count or IntVariable()

    def set_artwork_count(self, count: int) -> None:
        self.artwork_count.value = count

    def set_active_request_count(self, count: int) -> None:
        self.active_request_count.value = count
