"""XCDPContract — the entry points exposed to the host."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import ContractConfig
from .domain.aggregate import make_key
from .ingestion.handler import IngestionHandler
from .state.manager import ContractStateManager

if TYPE_CHECKING:
    from .domain.messages import StoredMessage
    from .ingestion.handler import IngestionResult
    from .ports.storage import IStorage


class XCDPContract:
    """Cross-chain message ingestion contract bound to one storage instance.

    Usage::

        contract = XCDPContract(InMemoryStorage())
        contract.new()
        contract.save_event_data(event_data, "tx-1")
    """

    def __init__(self, storage: IStorage, config: ContractConfig | None = None) -> None:
        self._state = ContractStateManager(storage, config or ContractConfig())
        self._handler = IngestionHandler(self._state)

    @property
    def config(self) -> ContractConfig:
        return self._state.config

    def new(self) -> None:
        """Initialize the aggregate; fails if it already exists."""
        self._state.initialize()

    def save_event_data(
        self, event_data: bytes | str, global_tx_id: str
    ) -> IngestionResult:
        """Decode *event_data* and store it once under *global_tx_id*."""
        return self._handler.ingest(global_tx_id, event_data)

    def get_message(self, global_tx_id: str, event_id: str) -> StoredMessage | None:
        return self._state.load().get(make_key(global_tx_id, event_id))

    def total_events(self) -> int:
        return self._state.load().count()

    @staticmethod
    def to_key(global_tx_id: str, event_type: str) -> str:
        return make_key(global_tx_id, event_type)
