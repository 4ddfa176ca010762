"""RelayState — the single persisted aggregate: event map plus running count."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .event_store import EventStore

if TYPE_CHECKING:
    from .messages import StoredMessage

U64_MAX = 2**64 - 1


def make_key(correlation_id: str, event_id: str) -> str:
    """Combine a correlation id and an event id into the storage key."""
    return f"{correlation_id}-{event_id}"


class RelayState:
    """Aggregate root owning the event map and the ``total_events`` counter.

    Usage::

        state = RelayState.empty(b"events")
        if not state.contains(key):
            state.record(key, StoredMessage(message="hello"))
    """

    def __init__(self, events: EventStore, total_events: int = 0) -> None:
        self.events = events
        self.total_events = total_events

    @classmethod
    def empty(cls, events_prefix: bytes) -> RelayState:
        return cls(EventStore(events_prefix))

    def contains(self, key: str) -> bool:
        return self.events.contains(key)

    def get(self, key: str) -> StoredMessage | None:
        return self.events.get(key)

    def count(self) -> int:
        return self.total_events

    def record(self, key: str, message: StoredMessage) -> None:
        """Insert *message* under *key* and bump the counter by one.

        Callers check ``contains`` first; this does not reject duplicates.
        """
        self.events.insert(key, message)
        self.total_events += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RelayState):
            return NotImplemented
        return self.events == other.events and self.total_events == other.total_events

    def __repr__(self) -> str:
        return f"RelayState(events={self.events!r}, total_events={self.total_events})"
