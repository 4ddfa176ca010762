"""Codec: raw log bytes -> envelope -> ABI parameters."""

from __future__ import annotations

from .abi import ParamType, decode, encode
from .decoder import DEFAULT_SCHEMA, DecodedEvent, LogDecoder
from .envelope import LogEnvelope

__all__ = [
    "DEFAULT_SCHEMA",
    "DecodedEvent",
    "LogDecoder",
    "LogEnvelope",
    "ParamType",
    "decode",
    "encode",
]
