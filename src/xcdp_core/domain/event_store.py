"""EventStore — ordered, namespaced map from composite key to stored message."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .messages import StoredMessage


class EventStore:
    """Thin keyed map of stored messages.

    Uniqueness is not enforced here; ``insert`` overwrites. Entries keep
    their insertion order and are never evicted.
    """

    def __init__(
        self,
        prefix: bytes,
        entries: dict[str, StoredMessage] | None = None,
    ) -> None:
        self._prefix = prefix
        self._entries: dict[str, StoredMessage] = dict(entries or {})

    @property
    def prefix(self) -> bytes:
        """Namespace root of the map."""
        return self._prefix

    def contains(self, key: str) -> bool:
        return key in self._entries

    def insert(self, key: str, message: StoredMessage) -> None:
        self._entries[key] = message

    def get(self, key: str) -> StoredMessage | None:
        return self._entries.get(key)

    def items(self) -> Iterator[tuple[str, StoredMessage]]:
        return iter(self._entries.items())

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventStore):
            return NotImplemented
        return self._prefix == other._prefix and list(self._entries.items()) == list(
            other._entries.items()
        )

    def __repr__(self) -> str:
        return f"EventStore(prefix={self._prefix!r}, entries={len(self._entries)})"
