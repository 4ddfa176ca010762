"""State: aggregate persistence."""

from __future__ import annotations

from .manager import ContractStateManager
from .serialization import deserialize_state, serialize_state

__all__ = [
    "ContractStateManager",
    "deserialize_state",
    "serialize_state",
]
