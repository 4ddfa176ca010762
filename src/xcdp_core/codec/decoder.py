"""LogDecoder — base64 -> JSON log envelope -> ABI-decoded parameters."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from ..primitives.exceptions import (
    InvalidEncodingError,
    MalformedEnvelopeError,
    MissingTopicError,
)
from . import abi
from .envelope import LogEnvelope, to_hex

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("xcdp.codec")

DEFAULT_SCHEMA: tuple[abi.ParamType, ...] = (abi.ParamType.STRING,)


def _loc(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(p) for p in loc) or "__root__"


@dataclass(frozen=True)
class DecodedEvent:
    """A fully decoded log: its event id, ABI parameters and source envelope."""

    event_id: str
    params: list[Any]
    envelope: LogEnvelope


class LogDecoder:
    """Decodes raw ``event_data`` into typed events.

    Pure transformation; the only side effect is a DEBUG trace of each
    decoded envelope.
    """

    def __init__(self, schema: Sequence[abi.ParamType] = DEFAULT_SCHEMA) -> None:
        self._schema = tuple(schema)

    @property
    def schema(self) -> tuple[abi.ParamType, ...]:
        return self._schema

    def decode(self, raw: bytes | str) -> LogEnvelope:
        """Base64-decode *raw* and parse it as a JSON log envelope."""
        try:
            payload = base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidEncodingError(
                f"Can't decode base64 event_data: {exc}"
            ) from exc

        try:
            envelope = LogEnvelope.model_validate_json(payload)
        except PydanticValidationError as exc:
            details = "; ".join(
                f"{_loc(err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise MalformedEnvelopeError(
                f"Can't deserialize log object: {details}"
            ) from exc

        logger.debug(
            "Decoded log envelope: topics=%s data=%s address=%s tx=%s",
            [to_hex(t) for t in envelope.topics],
            to_hex(envelope.data),
            envelope.address,
            envelope.transaction_hash,
        )
        return envelope

    @staticmethod
    def event_id(envelope: LogEnvelope) -> str:
        """Return the textual form of the first topic."""
        if not envelope.topics:
            raise MissingTopicError("log record has no topics to derive an event id")
        return to_hex(envelope.topics[0])

    def decode_params(
        self,
        envelope: LogEnvelope,
        schema: Sequence[abi.ParamType] | None = None,
    ) -> list[Any]:
        """ABI-decode the envelope's ``data`` against *schema*."""
        return abi.decode(self._schema if schema is None else schema, envelope.data)

    def decode_event(
        self,
        raw: bytes | str,
        schema: Sequence[abi.ParamType] | None = None,
    ) -> DecodedEvent:
        envelope = self.decode(raw)
        event_id = self.event_id(envelope)
        params = self.decode_params(envelope, schema)
        return DecodedEvent(event_id=event_id, params=params, envelope=envelope)
