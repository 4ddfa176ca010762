"""Tests for InMemoryStorage."""

from __future__ import annotations

from xcdp_core.adapters.memory import InMemoryStorage
from xcdp_core.ports.storage import IStorage


class TestInMemoryStorage:
    def test_is_a_storage(self) -> None:
        assert isinstance(InMemoryStorage(), IStorage)

    def test_read_write(self) -> None:
        storage = InMemoryStorage()
        assert storage.read(b"k") is None

        storage.write(b"k", b"v")

        assert storage.read(b"k") == b"v"
        assert storage.write_count == 1

    def test_initial_contents(self) -> None:
        storage = InMemoryStorage({b"k": b"v"})
        assert b"k" in storage
        assert len(storage) == 1
        assert storage.write_count == 0

    def test_snapshot_is_a_copy(self) -> None:
        storage = InMemoryStorage({b"k": b"v"})
        snap = storage.snapshot()
        storage.write(b"k", b"changed")
        assert snap == {b"k": b"v"}

    def test_clear_resets_data_and_counter(self) -> None:
        storage = InMemoryStorage()
        storage.write(b"a", b"1")
        storage.write(b"b", b"2")

        storage.clear()

        assert len(storage) == 0
        assert storage.read(b"a") is None
        assert storage.write_count == 0
