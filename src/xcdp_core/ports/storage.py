"""IStorage — key-value storage capability supplied by the host."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IStorage(Protocol):
    """Byte-oriented key-value storage.

    The host guarantees calls against one contract instance never interleave,
    so implementations need no locking of their own.
    """

    def read(self, key: bytes) -> bytes | None:
        """Return the value stored under *key*, or ``None`` when absent."""
        ...

    def write(self, key: bytes, value: bytes) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...
