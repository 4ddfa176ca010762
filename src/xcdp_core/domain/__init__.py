"""Domain: messages, the event store and the relay aggregate."""

from __future__ import annotations

from .aggregate import U64_MAX, RelayState, make_key
from .event_store import EventStore
from .messages import (
    Payload,
    SolidityMessage,
    StoredMessage,
    XTalkMessageInitiated,
    to_stored,
)

__all__ = [
    "EventStore",
    "Payload",
    "RelayState",
    "SolidityMessage",
    "StoredMessage",
    "U64_MAX",
    "XTalkMessageInitiated",
    "make_key",
    "to_stored",
]
