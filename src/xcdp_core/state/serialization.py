"""Length-prefixed little-endian binary codec for ``RelayState``.

Layout::

    u32 len | events prefix bytes
    u32 entry count
    (u32 len | utf-8 key, u32 len | utf-8 message) * count   # insertion order
    u64 total_events

There is no version field; a format change needs an explicit migration.
"""

from __future__ import annotations

import struct

from ..domain.event_store import EventStore
from ..domain.messages import StoredMessage
from ..domain.aggregate import U64_MAX, RelayState
from ..primitives.exceptions import CorruptStateError, SerializationFailureError

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_U32_MAX = 2**32 - 1


class _Writer:
    def __init__(self) -> None:
        self._parts: list[bytes] = []

    def u32(self, value: int) -> None:
        if not 0 <= value <= _U32_MAX:
            raise SerializationFailureError(f"value {value} does not fit in u32")
        self._parts.append(_U32.pack(value))

    def u64(self, value: int) -> None:
        if not 0 <= value <= U64_MAX:
            raise SerializationFailureError(f"value {value} does not fit in u64")
        self._parts.append(_U64.pack(value))

    def raw(self, value: bytes) -> None:
        self.u32(len(value))
        self._parts.append(value)

    def text(self, value: str) -> None:
        try:
            self.raw(value.encode("utf-8"))
        except UnicodeEncodeError as exc:
            raise SerializationFailureError(f"unencodable text: {exc}") from exc

    def getvalue(self) -> bytes:
        return b"".join(self._parts)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def _take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise CorruptStateError(
                f"unexpected end of state at offset {self._pos} "
                f"(need {size} bytes, {len(self._data) - self._pos} left)"
            )
        chunk = self._data[self._pos : end]
        self._pos = end
        return chunk

    def u32(self) -> int:
        return int(_U32.unpack(self._take(_U32.size))[0])

    def u64(self) -> int:
        return int(_U64.unpack(self._take(_U64.size))[0])

    def raw(self) -> bytes:
        return self._take(self.u32())

    def text(self) -> str:
        try:
            return self.raw().decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptStateError(f"invalid utf-8 in state: {exc}") from exc

    def finish(self) -> None:
        if self._pos != len(self._data):
            raise CorruptStateError(
                f"{len(self._data) - self._pos} trailing bytes after state"
            )


def serialize_state(state: RelayState) -> bytes:
    """Encode the full aggregate."""
    writer = _Writer()
    writer.raw(state.events.prefix)
    writer.u32(len(state.events))
    for key, message in state.events.items():
        writer.text(key)
        writer.text(message.message)
    writer.u64(state.total_events)
    return writer.getvalue()


def deserialize_state(data: bytes) -> RelayState:
    """Decode an aggregate previously produced by ``serialize_state``."""
    reader = _Reader(data)
    prefix = reader.raw()
    count = reader.u32()
    entries: dict[str, StoredMessage] = {}
    for _ in range(count):
        key = reader.text()
        if key in entries:
            raise CorruptStateError(f"duplicate key in persisted map: {key!r}")
        entries[key] = StoredMessage(message=reader.text())
    total_events = reader.u64()
    reader.finish()
    return RelayState(EventStore(prefix, entries), total_events)
