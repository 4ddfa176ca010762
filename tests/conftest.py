"""Shared fixtures for xcdp-core tests."""

from __future__ import annotations

import pytest

from xcdp_core.adapters.memory import InMemoryStorage
from xcdp_core.config import ContractConfig
from xcdp_core.contract import XCDPContract
from xcdp_core.state.manager import ContractStateManager


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def config() -> ContractConfig:
    return ContractConfig()


@pytest.fixture
def state_manager(
    storage: InMemoryStorage, config: ContractConfig
) -> ContractStateManager:
    return ContractStateManager(storage, config)


@pytest.fixture
def contract(storage: InMemoryStorage, config: ContractConfig) -> XCDPContract:
    """An initialized contract over fresh in-memory storage."""
    instance = XCDPContract(storage, config)
    instance.new()
    return instance
