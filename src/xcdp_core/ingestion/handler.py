"""IngestionHandler — validate, decode, dedupe, insert and persist one event."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..codec.decoder import LogDecoder
from ..correlation import correlation_context
from ..domain.aggregate import make_key
from ..domain.messages import Payload, StoredMessage, to_stored
from ..observability import emit_outcome
from ..primitives.exceptions import (
    DuplicateKeyError,
    EmptyCorrelationIdError,
    EmptyEventDataError,
    XCDPError,
)

if TYPE_CHECKING:
    from ..config import ContractConfig
    from ..state.manager import ContractStateManager

logger = logging.getLogger("xcdp.ingestion")


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of a successful ingestion."""

    key: str
    event_id: str
    message: StoredMessage
    payload: Payload
    total_events: int


class IngestionHandler:
    """Orchestrates one ``save_event_data`` call.

    All invariant enforcement lives here: the event store below is a plain
    map. Any failure aborts before the single ``save`` at the end, so a
    rejected call leaves storage untouched.
    """

    def __init__(
        self,
        state_manager: ContractStateManager,
        decoder: LogDecoder | None = None,
    ) -> None:
        self._state = state_manager
        self._decoder = decoder or LogDecoder(state_manager.config.abi_schema)

    @property
    def config(self) -> ContractConfig:
        return self._state.config

    def ingest(
        self, correlation_id: str, raw_event_bytes: bytes | str
    ) -> IngestionResult:
        with correlation_context(correlation_id or None):
            logger.info("Received event data (global_tx_id=%s)", correlation_id)
            start = time.perf_counter()
            outcome = "success"
            fields: dict[str, Any] = {}
            try:
                result = self._ingest(correlation_id, raw_event_bytes)
                fields.update(key=result.key, total_events=result.total_events)
                return result
            except XCDPError as exc:
                outcome = "error"
                fields["error"] = type(exc).__name__
                logger.warning("Ingestion rejected: %s: %s", type(exc).__name__, exc)
                raise
            except Exception as exc:
                outcome = "error"
                fields["error"] = type(exc).__name__
                logger.exception("Ingestion failed unexpectedly")
                raise
            finally:
                emit_outcome(
                    logger,
                    "ingest",
                    outcome,
                    (time.perf_counter() - start) * 1000,
                    **fields,
                )

    def _ingest(
        self, correlation_id: str, raw_event_bytes: bytes | str
    ) -> IngestionResult:
        if not correlation_id:
            raise EmptyCorrelationIdError()
        if not raw_event_bytes:
            raise EmptyEventDataError()

        state = self._state.load()
        decoded = self._decoder.decode_event(raw_event_bytes)

        key = make_key(correlation_id, decoded.event_id)
        if state.contains(key):
            raise DuplicateKeyError(key)

        message = to_stored(decoded.params)
        state.record(key, message)
        payload = self._build_payload(message)
        self._state.save(state)

        logger.info(
            "Event saved with global_tx_id: %s, event_id: %s, message: %s, "
            "destination_network: %s, destination_smart_contract_address: 0x%s",
            correlation_id,
            decoded.event_id,
            message.message,
            payload.destination_network,
            payload.destination_contract_address.hex(),
        )
        return IngestionResult(
            key=key,
            event_id=decoded.event_id,
            message=message,
            payload=payload,
            total_events=state.count(),
        )

    def _build_payload(self, message: StoredMessage) -> Payload:
        # TODO: take destination routing from the decoded event once the
        # source contract emits XTalkMessageInitiated instead of a bare string.
        return Payload(
            data=message.message.encode("utf-8"),
            destination_network=self.config.destination_network,
            destination_contract_address=self.config.destination_contract_address,
        )
