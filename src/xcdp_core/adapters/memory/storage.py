"""InMemoryStorage — dict-backed fake for unit tests."""

from __future__ import annotations

from xcdp_core.ports.storage import IStorage


class InMemoryStorage(IStorage):
    """In-memory implementation of ``IStorage``.

    Keeps values in a plain dict and counts writes so tests can assert on
    side effects.
    """

    def __init__(self, initial: dict[bytes, bytes] | None = None) -> None:
        self._data: dict[bytes, bytes] = dict(initial or {})
        self.write_count = 0

    def read(self, key: bytes) -> bytes | None:
        return self._data.get(key)

    def write(self, key: bytes, value: bytes) -> None:
        self._data[key] = bytes(value)
        self.write_count += 1

    # ── Test helpers ─────────────────────────────────────────────

    def snapshot(self) -> dict[bytes, bytes]:
        return dict(self._data)

    def clear(self) -> None:
        self._data.clear()
        self.write_count = 0

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
