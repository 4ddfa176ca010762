"""Decode, state, validation and infrastructure exceptions for xcdp-core."""

from __future__ import annotations


class XCDPError(Exception):
    """Root exception for the entire xcdp-core package."""


# ── Decoding ─────────────────────────────────────────────────────────


class DecodeError(XCDPError):
    """Base class for failures turning raw event bytes into a typed event."""


class InvalidEncodingError(DecodeError):
    """Raised when the raw event data is not valid base64."""


class MalformedEnvelopeError(DecodeError):
    """Raised when the decoded bytes are not a structurally valid log record."""


class MissingTopicError(DecodeError):
    """Raised when a log record carries no topics to derive an event id from."""


class SchemaMismatchError(DecodeError):
    """Raised when ABI data does not match the declared parameter schema."""


# ── State ────────────────────────────────────────────────────────────


class StateError(XCDPError):
    """Base class for aggregate load/save failures."""


class NotInitializedError(StateError):
    """Raised when the aggregate slot is read before ``initialize()``."""

    def __init__(self, key: bytes) -> None:
        self.key = key
        super().__init__(f"The contract isn't initialized (slot {key!r} is empty)")


class AlreadyInitializedError(StateError):
    """Raised when ``initialize()`` is called on an existing aggregate."""

    def __init__(self, key: bytes) -> None:
        self.key = key
        super().__init__(f"The contract is already initialized (slot {key!r})")


class CorruptStateError(StateError):
    """Raised when persisted aggregate bytes fail to deserialize."""


class SerializationFailureError(StateError):
    """Raised when the aggregate cannot be serialized for saving."""


# ── Validation ───────────────────────────────────────────────────────


class ValidationError(XCDPError):
    """Raised when an ingestion precondition fails.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class EmptyCorrelationIdError(ValidationError):
    """Raised when ``global_tx_id`` is empty."""

    def __init__(self) -> None:
        super().__init__({"global_tx_id": ["global_tx_id cannot be empty"]})


class EmptyEventDataError(ValidationError):
    """Raised when ``event_data`` is empty."""

    def __init__(self) -> None:
        super().__init__({"event_data": ["event_data cannot be empty"]})


class DuplicateKeyError(ValidationError):
    """Raised when an event is already stored under the composite key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__({"key": [f"event is saved already: {key!r}"]})


# ── Infrastructure ───────────────────────────────────────────────────


class InfrastructureError(XCDPError):
    """Base class for all infrastructure-related errors."""


class StorageError(InfrastructureError):
    """Raised when the underlying key-value storage fails."""
