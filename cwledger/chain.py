"""Execution context shared by the contracts: blocks, expirations, responses."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from .errors import ArithmeticOverflow, InvalidAddress

UINT128_MAX = 2**128 - 1
_MIN_ADDR_LEN = 3
_MAX_ADDR_LEN = 54


class ExpirationKind(enum.Enum):
    AT_HEIGHT = "at_height"
    AT_TIME = "at_time"
    NEVER = "never"


@dataclass(frozen=True)
class BlockInfo:
    height: int
    time: int
    chain_id: str = ""


@dataclass(frozen=True)
class Expiration:
    """A moment at which something stops being valid."""

    kind: ExpirationKind = ExpirationKind.NEVER
    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("expiration value must not be negative")

    def is_expired(self, block: BlockInfo) -> bool:
        if self.kind is ExpirationKind.AT_HEIGHT:
            return block.height >= self.value
        if self.kind is ExpirationKind.AT_TIME:
            return block.time >= self.value
        return False

    def to_json(self) -> dict[str, Any]:
        if self.kind is ExpirationKind.AT_HEIGHT:
            return {"at_height": self.value}
        if self.kind is ExpirationKind.AT_TIME:
            return {"at_time": str(self.value)}
        return {"never": {}}


def at_height(height: int) -> Expiration:
    return Expiration(ExpirationKind.AT_HEIGHT, height)


def at_time(nanos: int) -> Expiration:
    return Expiration(ExpirationKind.AT_TIME, nanos)


def never() -> Expiration:
    return Expiration()


@dataclass
class Env:
    block: BlockInfo
    contract_address: str


@dataclass(frozen=True)
class MessageInfo:
    sender: str
    funds: tuple = ()


@dataclass(frozen=True)
class WasmExecuteMsg:
    """A call into another contract, carrying a serialized message."""

    contract_addr: str
    msg: bytes
    funds: tuple = ()


@dataclass
class Response:
    messages: list = field(default_factory=list)
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def add_attribute(self, key: str, value: Any) -> Response:
        self.attributes.append((key, str(value)))
        return self

    def add_message(self, msg: Any) -> Response:
        self.messages.append(msg)
        return self


def validate_addr(address: str) -> str:
    """Return the address if it is well formed, otherwise raise InvalidAddress."""
    if not isinstance(address, str):
        raise InvalidAddress("Invalid input: address must be a string")
    if len(address) < _MIN_ADDR_LEN:
        raise InvalidAddress("Invalid input: human address too short")
    if len(address) > _MAX_ADDR_LEN:
        raise InvalidAddress("Invalid input: human address too long")
    if address != address.lower():
        raise InvalidAddress("Invalid input: address not normalized")
    return address


def _check_range(value: int) -> None:
    if not 0 <= value <= UINT128_MAX:
        raise ValueError(f"{value} is not a valid 128-bit unsigned integer")


def checked_add(a: int, b: int) -> int:
    _check_range(a)
    _check_range(b)
    total = a + b
    if total > UINT128_MAX:
        raise ArithmeticOverflow("Add", a, b)
    return total


def checked_sub(a: int, b: int) -> int:
    _check_range(a)
    _check_range(b)
    if b > a:
        raise ArithmeticOverflow("Sub", a, b)
    return a - b


def mock_env() -> Env:
    """An environment suitable for tests and local runs."""
    return Env(
        block=BlockInfo(
            height=12_345,
            time=1_571_797_419_879_305_533,
            chain_id="cosmos-testnet-14002",
        ),
        contract_address="cosmos2contract",
    )