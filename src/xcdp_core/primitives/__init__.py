"""Primitives: the exception taxonomy."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
