"""Message model: stored, ABI-facing and onward-payload shapes."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict

from ..codec.abi import ParamType
from ..primitives.exceptions import SchemaMismatchError

ADDRESS_SIZE = 32


class StoredMessage(BaseModel):
    """Canonical stored shape of a relayed message.

    Immutable; identity comes from the key it is stored under.
    """

    model_config = ConfigDict(frozen=True)

    message: str


class SolidityMessage(BaseModel):
    """ABI-facing shape of ``StoredMessage`` as emitted by the source contract."""

    model_config = ConfigDict(frozen=True)

    ABI_SCHEMA: ClassVar[tuple[ParamType, ...]] = (ParamType.STRING,)

    message: str

    @classmethod
    def from_params(cls, params: list[Any]) -> SolidityMessage:
        """Build from decoded ABI parameters.

        Parameters beyond the schema are ignored.
        """
        if not params or not isinstance(params[0], str):
            raise SchemaMismatchError("expected a string as the first parameter")
        return cls(message=params[0])

    def to_stored(self) -> StoredMessage:
        return StoredMessage(message=self.message)


def to_stored(params: list[Any]) -> StoredMessage:
    """Project decoded parameters into a ``StoredMessage``."""
    return SolidityMessage.from_params(params).to_stored()


def _check_address(value: bytes) -> bytes:
    if len(value) != ADDRESS_SIZE:
        raise ValueError(
            f"destination address must be {ADDRESS_SIZE} bytes, got {len(value)}"
        )
    return value


Address32 = Annotated[bytes, AfterValidator(_check_address)]


class XTalkMessageInitiated(BaseModel):
    """ABI-facing shape of the onward cross-talk event."""

    model_config = ConfigDict(frozen=True)

    ABI_SCHEMA: ClassVar[tuple[ParamType, ...]] = (
        ParamType.BYTES,
        ParamType.STRING,
        ParamType.BYTES32,
    )

    message: bytes
    destination_network: str
    destination_smart_contract_address: Address32

    @classmethod
    def from_params(cls, params: list[Any]) -> XTalkMessageInitiated:
        if len(params) < len(cls.ABI_SCHEMA):
            raise SchemaMismatchError(
                f"expected {len(cls.ABI_SCHEMA)} parameters, got {len(params)}"
            )
        message, network, address = params[:3]
        return cls(
            message=message,
            destination_network=network,
            destination_smart_contract_address=address,
        )

    def to_payload(self) -> Payload:
        return Payload(
            data=self.message,
            destination_network=self.destination_network,
            destination_contract_address=self.destination_smart_contract_address,
        )


class Payload(BaseModel):
    """Cross-chain envelope for a message sent onward to a destination chain."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    destination_network: str
    destination_contract_address: Address32
