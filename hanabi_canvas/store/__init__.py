"""
The store module provides the authoritative in-memory record of artworks and
challenge requests for a hanabi-canvas session.

- Records are immutable values; updates replace a record in its slot.
- Derived counts are pushed to a CountSink after every mutation.
- Listeners are notified once per runtime mutation, never during startup load.

This abstract interface allows for various implementations (in-memory, persistent, etc.).
"""

from .store import RecordStore
from .in_memory import InMemoryRecordStore, RecordView
from .sinks import CountSink, IntVariable, StoreCounters

__all__ = [
    "RecordStore",
    "InMemoryRecordStore",
    "RecordView",
    "CountSink",
    "IntVariable",
    "StoreCounters",
]
