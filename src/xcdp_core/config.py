"""Contract configuration: storage keys, ABI schema and destination routing."""

from __future__ import annotations

from dataclasses import dataclass

from .codec.abi import ParamType
from .codec.decoder import DEFAULT_SCHEMA

STORAGE_CONTRACT_KEY = b"message"
STORAGE_EVENTS_KEY = b"events"
DEFAULT_DESTINATION_NETWORK = "destination_network_placeholder"
DEFAULT_DESTINATION_ADDRESS = b"\x00" * 32


@dataclass(frozen=True, slots=True)
class ContractConfig:
    """Configuration for one relay contract instance.

    Attributes:
        state_key: Storage slot holding the serialized aggregate.
        events_prefix: Namespace root of the event map.
        abi_schema: Parameter schema the log ``data`` is decoded against.
            The first parameter must be a ``string``; it becomes the stored
            message.
        destination_network: Network the onward payload is addressed to.
        destination_contract_address: 32-byte destination contract address.
    """

    state_key: bytes = STORAGE_CONTRACT_KEY
    events_prefix: bytes = STORAGE_EVENTS_KEY
    abi_schema: tuple[ParamType, ...] = DEFAULT_SCHEMA
    destination_network: str = DEFAULT_DESTINATION_NETWORK
    destination_contract_address: bytes = DEFAULT_DESTINATION_ADDRESS

    def __post_init__(self) -> None:
        if not self.state_key:
            raise ValueError("state_key must not be empty")
        if not self.events_prefix:
            raise ValueError("events_prefix must not be empty")
        if self.state_key == self.events_prefix:
            raise ValueError("state_key and events_prefix must differ")
        if not self.abi_schema or self.abi_schema[0] is not ParamType.STRING:
            raise ValueError("abi_schema must start with a string parameter")
        if len(self.destination_contract_address) != 32:
            raise ValueError(
                "destination_contract_address must be 32 bytes, got "
                f"{len(self.destination_contract_address)}"
            )
