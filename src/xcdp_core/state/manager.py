"""ContractStateManager — loads and saves the aggregate through ``IStorage``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config import ContractConfig
from ..domain.aggregate import RelayState
from ..primitives.exceptions import (
    AlreadyInitializedError,
    CorruptStateError,
    NotInitializedError,
)
from .serialization import deserialize_state, serialize_state

if TYPE_CHECKING:
    from ..ports.storage import IStorage

logger = logging.getLogger("xcdp.state")


class ContractStateManager:
    """Owns the single persisted slot holding the serialized ``RelayState``.

    State machine: ``Uninitialized -> Initialized`` via :meth:`initialize`;
    every other operation requires ``Initialized``. The aggregate is always
    read and written whole.
    """

    def __init__(self, storage: IStorage, config: ContractConfig | None = None) -> None:
        self._storage = storage
        self._config = config or ContractConfig()

    @property
    def config(self) -> ContractConfig:
        return self._config

    def is_initialized(self) -> bool:
        return self._storage.read(self._config.state_key) is not None

    def initialize(self) -> RelayState:
        """Persist a fresh empty aggregate.

        Raises:
            AlreadyInitializedError: If the slot already holds an aggregate.
        """
        if self.is_initialized():
            raise AlreadyInitializedError(self._config.state_key)
        state = RelayState.empty(self._config.events_prefix)
        self.save(state)
        logger.info("Initialized relay state at slot %r", self._config.state_key)
        return state

    def load(self) -> RelayState:
        """Read and deserialize the aggregate.

        Raises:
            NotInitializedError: If the slot is empty.
            CorruptStateError: If the stored bytes do not deserialize or were
                written for a different events namespace.
        """
        raw = self._storage.read(self._config.state_key)
        if raw is None:
            raise NotInitializedError(self._config.state_key)
        state = deserialize_state(raw)
        if state.events.prefix != self._config.events_prefix:
            raise CorruptStateError(
                f"events namespace {state.events.prefix!r} does not match "
                f"configured {self._config.events_prefix!r}"
            )
        logger.debug(
            "Loaded relay state: %d entries, total_events=%d",
            len(state.events),
            state.total_events,
        )
        return state

    def save(self, state: RelayState) -> None:
        """Serialize the full aggregate and overwrite the slot.

        Serialization happens before the write, so a
        ``SerializationFailureError`` leaves storage untouched.
        """
        encoded = serialize_state(state)
        self._storage.write(self._config.state_key, encoded)
        logger.info("Saved event data successfully (%d bytes)", len(encoded))
