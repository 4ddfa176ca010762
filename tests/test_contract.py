"""End-to-end tests for the XCDPContract entry points."""

from __future__ import annotations

import pytest
from factories import build_event_data, topic_id

from xcdp_core.adapters.memory import InMemoryStorage
from xcdp_core.contract import XCDPContract
from xcdp_core.domain.messages import StoredMessage
from xcdp_core.primitives.exceptions import (
    AlreadyInitializedError,
    DuplicateKeyError,
    NotInitializedError,
)


def test_save_event_data_scenario(contract: XCDPContract) -> None:
    event_data = build_event_data("hello", topics=["0xabc"])

    result = contract.save_event_data(event_data, "tx-1")

    assert result.key == f"tx-1-{topic_id('0xabc')}"
    assert contract.get_message("tx-1", topic_id("0xabc")) == StoredMessage(
        message="hello"
    )
    assert contract.total_events() == 1


def test_repeated_call_is_rejected(contract: XCDPContract) -> None:
    event_data = build_event_data("hello", topics=["0xabc"])
    contract.save_event_data(event_data, "tx-1")

    with pytest.raises(DuplicateKeyError):
        contract.save_event_data(event_data, "tx-1")

    assert contract.total_events() == 1


def test_new_twice_is_rejected(
    contract: XCDPContract, storage: InMemoryStorage
) -> None:
    contract.save_event_data(build_event_data(), "tx-1")
    before = storage.snapshot()

    with pytest.raises(AlreadyInitializedError):
        contract.new()

    assert storage.snapshot() == before
    assert contract.total_events() == 1


def test_calls_before_new_fail(storage: InMemoryStorage) -> None:
    contract = XCDPContract(storage)

    with pytest.raises(NotInitializedError):
        contract.save_event_data(build_event_data(), "tx-1")
    with pytest.raises(NotInitializedError):
        contract.total_events()
    assert len(storage) == 0


def test_state_survives_new_contract_instance(storage: InMemoryStorage) -> None:
    first = XCDPContract(storage)
    first.new()
    first.save_event_data(build_event_data("persisted"), "tx-9")

    second = XCDPContract(storage)

    assert second.total_events() == 1
    assert second.get_message("tx-9", topic_id("0xabc")) == StoredMessage(
        message="persisted"
    )


def test_unknown_message_is_none(contract: XCDPContract) -> None:
    assert contract.get_message("tx-404", topic_id("0x01")) is None


def test_to_key() -> None:
    assert XCDPContract.to_key("tx-1", "0xabc") == "tx-1-0xabc"
