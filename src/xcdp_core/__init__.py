"""xcdp-core — event ingestion and persistence core of a cross-chain relay.

Only pydantic is required. Redis storage is available via the ``redis`` extra.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryStorage

# ── Codec ───────────────────────────────────────────────────────
from .codec import (
    DEFAULT_SCHEMA,
    DecodedEvent,
    LogDecoder,
    LogEnvelope,
    ParamType,
)

# ── Config & contract ───────────────────────────────────────────
from .config import ContractConfig
from .contract import XCDPContract
from .correlation import correlation_context, get_correlation_id, set_correlation_id

# ── Domain ──────────────────────────────────────────────────────
from .domain import (
    EventStore,
    Payload,
    RelayState,
    SolidityMessage,
    StoredMessage,
    XTalkMessageInitiated,
    make_key,
    to_stored,
)

# ── Ingestion ───────────────────────────────────────────────────
from .ingestion import IngestionHandler, IngestionResult
from .observability import CorrelationIdFilter, emit_outcome

# ── Ports ───────────────────────────────────────────────────────
from .ports import IStorage

# ── Primitives ─────────────────────────────────────────────────
from .primitives import (
    AlreadyInitializedError,
    CorruptStateError,
    DecodeError,
    DuplicateKeyError,
    EmptyCorrelationIdError,
    EmptyEventDataError,
    InfrastructureError,
    InvalidEncodingError,
    MalformedEnvelopeError,
    MissingTopicError,
    NotInitializedError,
    SchemaMismatchError,
    SerializationFailureError,
    StateError,
    StorageError,
    ValidationError,
    XCDPError,
)

# ── State ───────────────────────────────────────────────────────
from .state import ContractStateManager, deserialize_state, serialize_state

__all__: list[str] = [
    # Codec
    "DEFAULT_SCHEMA",
    "DecodedEvent",
    "LogDecoder",
    "LogEnvelope",
    "ParamType",
    # Domain
    "EventStore",
    "Payload",
    "RelayState",
    "SolidityMessage",
    "StoredMessage",
    "XTalkMessageInitiated",
    "make_key",
    "to_stored",
    # State
    "ContractStateManager",
    "deserialize_state",
    "serialize_state",
    # Ingestion
    "IngestionHandler",
    "IngestionResult",
    # Contract
    "ContractConfig",
    "XCDPContract",
    "correlation_context",
    "get_correlation_id",
    "set_correlation_id",
    "CorrelationIdFilter",
    "emit_outcome",
    # Ports
    "IStorage",
    # Adapters
    "InMemoryStorage",
    # Primitives
    "AlreadyInitializedError",
    "CorruptStateError",
    "DecodeError",
    "DuplicateKeyError",
    "EmptyCorrelationIdError",
    "EmptyEventDataError",
    "InfrastructureError",
    "InvalidEncodingError",
    "MalformedEnvelopeError",
    "MissingTopicError",
    "NotInitializedError",
    "SchemaMismatchError",
    "SerializationFailureError",
    "StateError",
    "StorageError",
    "ValidationError",
    "XCDPError",
]
