"""Positional ABI encoding and decoding for flat parameter lists.

Parameters are laid out with the head/tail convention: every parameter owns
one 32-byte head slot; static values live in the slot itself while dynamic
values (``string``, ``bytes``) store an offset into the tail, where a 32-byte
length word is followed by the payload right-padded to a word boundary.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import SchemaMismatchError

if TYPE_CHECKING:
    from collections.abc import Sequence

WORD = 32
_UINT256_MAX = 2**256 - 1


class ParamType(str, Enum):
    """Supported ABI parameter types."""

    STRING = "string"
    BYTES = "bytes"
    UINT256 = "uint256"
    BOOL = "bool"
    ADDRESS = "address"
    BYTES32 = "bytes32"

    @property
    def is_dynamic(self) -> bool:
        return self in (ParamType.STRING, ParamType.BYTES)


def _pad_right(data: bytes) -> bytes:
    remainder = len(data) % WORD
    return data if remainder == 0 else data + b"\x00" * (WORD - remainder)


def _uint_word(value: int) -> bytes:
    return value.to_bytes(WORD, "big")


def _encode_static(param: ParamType, value: Any) -> bytes:
    if param is ParamType.UINT256:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SchemaMismatchError(
                f"uint256 expects int, got {type(value).__name__}"
            )
        if not 0 <= value <= _UINT256_MAX:
            raise SchemaMismatchError(f"uint256 out of range: {value}")
        return _uint_word(value)
    if param is ParamType.BOOL:
        if not isinstance(value, bool):
            raise SchemaMismatchError(f"bool expects bool, got {type(value).__name__}")
        return _uint_word(int(value))
    if param is ParamType.ADDRESS:
        if not isinstance(value, (bytes, bytearray)) or len(value) != 20:
            raise SchemaMismatchError("address expects exactly 20 bytes")
        return b"\x00" * 12 + bytes(value)
    if not isinstance(value, (bytes, bytearray)) or len(value) != WORD:
        raise SchemaMismatchError("bytes32 expects exactly 32 bytes")
    return bytes(value)


def _encode_dynamic(param: ParamType, value: Any) -> bytes:
    if param is ParamType.STRING:
        if not isinstance(value, str):
            raise SchemaMismatchError(f"string expects str, got {type(value).__name__}")
        raw = value.encode("utf-8")
    else:
        if not isinstance(value, (bytes, bytearray)):
            raise SchemaMismatchError(
                f"bytes expects bytes, got {type(value).__name__}"
            )
        raw = bytes(value)
    return _uint_word(len(raw)) + _pad_right(raw)


def encode(schema: Sequence[ParamType], values: Sequence[Any]) -> bytes:
    """ABI-encode *values* as the parameter list described by *schema*."""
    if len(schema) != len(values):
        raise SchemaMismatchError(
            f"schema declares {len(schema)} parameters, got {len(values)} values"
        )

    heads: list[bytes] = []
    tails: list[bytes] = []
    tail_offset = WORD * len(schema)
    for param, value in zip(schema, values):
        if param.is_dynamic:
            tail = _encode_dynamic(param, value)
            heads.append(_uint_word(tail_offset))
            tails.append(tail)
            tail_offset += len(tail)
        else:
            heads.append(_encode_static(param, value))
    return b"".join(heads) + b"".join(tails)


def _read_word(data: bytes, offset: int) -> bytes:
    if offset < 0 or offset + WORD > len(data):
        raise SchemaMismatchError(
            f"expected a 32-byte word at offset {offset}, data is {len(data)} bytes"
        )
    return data[offset : offset + WORD]


def _read_uint(data: bytes, offset: int) -> int:
    return int.from_bytes(_read_word(data, offset), "big")


def _decode_static(param: ParamType, word: bytes) -> Any:
    if param is ParamType.UINT256:
        return int.from_bytes(word, "big")
    if param is ParamType.BOOL:
        value = int.from_bytes(word, "big")
        if value not in (0, 1):
            raise SchemaMismatchError(f"invalid bool word: {word.hex()}")
        return value == 1
    if param is ParamType.ADDRESS:
        if any(word[:12]):
            raise SchemaMismatchError(f"invalid address word: {word.hex()}")
        return word[12:]
    return word


def _decode_dynamic(param: ParamType, data: bytes, offset: int) -> Any:
    length = _read_uint(data, offset)
    start = offset + WORD
    if length > len(data) - start:
        raise SchemaMismatchError(
            f"{param.value} length {length} at offset {offset} exceeds available data"
        )
    raw = data[start : start + length]
    if param is ParamType.BYTES:
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SchemaMismatchError(
            f"string parameter is not valid UTF-8: {exc}"
        ) from exc


def decode(schema: Sequence[ParamType], data: bytes) -> list[Any]:
    """Decode *data* against *schema*.

    Either every declared parameter decodes or ``SchemaMismatchError`` is
    raised; there is no partial result.
    """
    if len(data) < WORD * len(schema):
        raise SchemaMismatchError(
            f"schema needs at least {WORD * len(schema)} bytes, data is {len(data)}"
        )

    values: list[Any] = []
    for index, param in enumerate(schema):
        head = index * WORD
        if param.is_dynamic:
            values.append(_decode_dynamic(param, data, _read_uint(data, head)))
        else:
            values.append(_decode_static(param, _read_word(data, head)))
    return values
