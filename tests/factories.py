"""Builders for raw ``event_data`` payloads."""

from __future__ import annotations

import base64
import json

from xcdp_core.codec import abi

DEFAULT_TOPIC = "0xabc"


def build_event_data(
    message: str = "hello",
    topics: list[str] | None = None,
    **extra: object,
) -> bytes:
    """Build base64 ``event_data`` for a log carrying one ABI string."""
    log: dict[str, object] = {
        "topics": [DEFAULT_TOPIC] if topics is None else topics,
        "data": "0x" + abi.encode([abi.ParamType.STRING], [message]).hex(),
    }
    log.update(extra)
    return wrap(log)


def wrap(document: object) -> bytes:
    """Base64-wrap an arbitrary JSON document."""
    return base64.b64encode(json.dumps(document).encode("utf-8"))


def topic_id(topic: str) -> str:
    """Textual event id of a short hex topic once padded to 32 bytes."""
    return "0x" + topic.removeprefix("0x").rjust(64, "0")
