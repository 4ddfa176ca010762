"""Tests for LogEnvelope parsing and LogDecoder."""

from __future__ import annotations

import base64
import logging

import pytest
from factories import build_event_data, topic_id, wrap

from xcdp_core.codec import abi
from xcdp_core.codec.decoder import DEFAULT_SCHEMA, LogDecoder
from xcdp_core.codec.envelope import LogEnvelope
from xcdp_core.primitives.exceptions import (
    DecodeError,
    InvalidEncodingError,
    MalformedEnvelopeError,
    MissingTopicError,
    SchemaMismatchError,
)

FULL_TOPIC = "0x" + "ab" * 32


class TestLogEnvelope:
    def test_topics_left_padded_to_32_bytes(self) -> None:
        envelope = LogEnvelope.model_validate({"topics": ["0xabc"], "data": "0x"})
        assert envelope.topics == [b"\x00" * 30 + b"\x0a\xbc"]

    def test_full_topic_preserved(self) -> None:
        envelope = LogEnvelope.model_validate({"topics": [FULL_TOPIC], "data": "0x"})
        assert envelope.topics == [b"\xab" * 32]

    def test_data_accepts_bare_hex(self) -> None:
        envelope = LogEnvelope.model_validate({"topics": [], "data": "dead"})
        assert envelope.data == b"\xde\xad"

    def test_camel_case_log_fields(self) -> None:
        envelope = LogEnvelope.model_validate(
            {
                "topics": [FULL_TOPIC],
                "data": "0x",
                "address": "0x" + "11" * 20,
                "blockNumber": "0x10",
                "transactionHash": "0x" + "22" * 32,
                "logIndex": "0x0",
                "removed": False,
                "somethingElse": 1,
            }
        )
        assert envelope.block_number == "0x10"
        assert envelope.transaction_hash == "0x" + "22" * 32
        assert envelope.removed is False

    def test_dump_back_to_hex(self) -> None:
        envelope = LogEnvelope.model_validate({"topics": ["0x01"], "data": "0xff"})
        dumped = envelope.model_dump()
        assert dumped["topics"] == ["0x" + "00" * 31 + "01"]
        assert dumped["data"] == "0xff"


class TestLogDecoder:
    @pytest.fixture
    def decoder(self) -> LogDecoder:
        return LogDecoder()

    def test_decode_valid_event(self, decoder: LogDecoder) -> None:
        event = decoder.decode_event(build_event_data("hello"))

        assert event.event_id == topic_id("0xabc")
        assert event.params == ["hello"]
        assert event.envelope.topics[0].endswith(b"\x0a\xbc")

    def test_accepts_base64_text(self, decoder: LogDecoder) -> None:
        raw = build_event_data("text input").decode("ascii")
        assert decoder.decode_event(raw).params == ["text input"]

    def test_event_id_uses_first_topic(self, decoder: LogDecoder) -> None:
        raw = build_event_data(topics=[FULL_TOPIC, "0x01"])
        assert decoder.decode_event(raw).event_id == FULL_TOPIC

    def test_emits_debug_trace(
        self, decoder: LogDecoder, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="xcdp.codec"):
            decoder.decode(build_event_data())
        assert any("Decoded log envelope" in r.getMessage() for r in caplog.records)

    @pytest.mark.parametrize("raw", [b"not base64!!", b"abc", "żółw"])
    def test_invalid_base64(self, decoder: LogDecoder, raw: bytes | str) -> None:
        with pytest.raises(InvalidEncodingError):
            decoder.decode(raw)

    def test_not_json(self, decoder: LogDecoder) -> None:
        with pytest.raises(MalformedEnvelopeError):
            decoder.decode(base64.b64encode(b"definitely not json"))

    @pytest.mark.parametrize(
        "document",
        [
            {"data": "0x"},
            {"topics": ["0x01"]},
            {"topics": "0x01", "data": "0x"},
            {"topics": ["0xzz"], "data": "0x"},
            {"topics": ["0x" + "00" * 33], "data": "0x"},
            {"topics": ["0x01"], "data": "0xabc"},
            {"topics": ["0x01"], "data": 5},
            ["not", "an", "object"],
        ],
    )
    def test_structural_mismatch(self, decoder: LogDecoder, document: object) -> None:
        with pytest.raises(MalformedEnvelopeError):
            decoder.decode(wrap(document))

    def test_missing_topic(self, decoder: LogDecoder) -> None:
        with pytest.raises(MissingTopicError):
            decoder.decode_event(build_event_data(topics=[]))

    def test_data_shorter_than_schema(self, decoder: LogDecoder) -> None:
        raw = wrap({"topics": ["0x01"], "data": "0x" + "00" * 16})
        with pytest.raises(SchemaMismatchError):
            decoder.decode_event(raw)

    def test_all_decode_errors_share_a_base(self, decoder: LogDecoder) -> None:
        with pytest.raises(DecodeError):
            decoder.decode(b"@@@@")

    def test_custom_schema(self) -> None:
        schema = (abi.ParamType.STRING, abi.ParamType.UINT256)
        data = abi.encode(schema, ["msg", 42])
        raw = wrap({"topics": ["0x01"], "data": "0x" + data.hex()})

        event = LogDecoder(schema).decode_event(raw)

        assert event.params == ["msg", 42]

    def test_schema_defaults_to_single_string(self, decoder: LogDecoder) -> None:
        assert decoder.schema == DEFAULT_SCHEMA == (abi.ParamType.STRING,)

    def test_schema_is_copied(self) -> None:
        schema = [abi.ParamType.STRING, abi.ParamType.BOOL]
        decoder = LogDecoder(schema)
        schema.append(abi.ParamType.UINT256)

        assert decoder.schema == (abi.ParamType.STRING, abi.ParamType.BOOL)

    def test_schema_override_per_call(self, decoder: LogDecoder) -> None:
        envelope = decoder.decode(build_event_data("x"))
        with pytest.raises(SchemaMismatchError):
            decoder.decode_params(
                envelope, (abi.ParamType.STRING, abi.ParamType.STRING)
            )
