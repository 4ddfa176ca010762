"""LogEnvelope — the JSON log record emitted by a source-chain contract."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel

TOPIC_SIZE = 32


def parse_hex(value: Any, *, allow_odd: bool = False) -> bytes:
    """Parse a ``0x``-prefixed (or bare) hex string into bytes."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise ValueError(f"expected hex string, got {type(value).__name__}")
    digits = value[2:] if value[:2] in ("0x", "0X") else value
    if len(digits) % 2:
        if not allow_odd:
            raise ValueError(f"odd-length hex string: {value!r}")
        digits = "0" + digits
    return bytes.fromhex(digits)


def to_hex(value: bytes) -> str:
    return "0x" + value.hex()


class LogEnvelope(BaseModel):
    """A single log record.

    ``topics`` are normalised to 32-byte values (shorter hex is left-padded,
    the way a 256-bit word is); ``data`` is the raw ABI-encoded payload.
    The remaining fields are carried for diagnostics only.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    topics: list[bytes]
    data: bytes
    address: str | None = None
    block_hash: str | None = None
    block_number: str | int | None = None
    transaction_hash: str | None = None
    transaction_index: str | int | None = None
    log_index: str | int | None = None
    removed: bool | None = None

    @field_validator("topics", mode="before")
    @classmethod
    def _parse_topics(cls, value: Any) -> list[bytes]:
        if not isinstance(value, (list, tuple)):
            raise ValueError("topics must be a list of hex strings")
        topics: list[bytes] = []
        for item in value:
            raw = parse_hex(item, allow_odd=True)
            if len(raw) > TOPIC_SIZE:
                raise ValueError(f"topic longer than {TOPIC_SIZE} bytes: {item!r}")
            topics.append(raw.rjust(TOPIC_SIZE, b"\x00"))
        return topics

    @field_validator("data", mode="before")
    @classmethod
    def _parse_data(cls, value: Any) -> bytes:
        return parse_hex(value)

    @field_serializer("topics")
    def _dump_topics(self, topics: list[bytes]) -> list[str]:
        return [to_hex(topic) for topic in topics]

    @field_serializer("data")
    def _dump_data(self, data: bytes) -> str:
        return to_hex(data)
