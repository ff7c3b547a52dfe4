"""Errors raised by the ledger contracts."""

from __future__ import annotations


class ContractError(Exception):
    """Base class for every error a contract reports."""

    default_message = "Contract error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class StdError(ContractError):
    """A generic failure from storage, arithmetic or address handling."""

    default_message = "Generic error"


class ArithmeticOverflow(StdError):
    """A 128-bit unsigned operation left its range."""

    def __init__(self, operation: str, left: int, right: int) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(f"Overflow: Cannot {operation} with {left} and {right}")


class NotFound(StdError):
    """A value that must exist in storage is missing."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"{kind} not found")


class InvalidAddress(StdError):
    """An address failed validation."""

    default_message = "Invalid address"


class Unauthorized(ContractError):
    default_message = "Unauthorized"


class Expired(ContractError):
    default_message = "Expired"


class HashParseError(ContractError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Hash parse error: {detail}")


class InvalidId(ContractError):
    default_message = "Invalid atomic swap id"


class InvalidPreimage(ContractError):
    default_message = "Invalid preimage"


class InvalidHash(ContractError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Invalid hash ({length} chars): must be 64 characters")


class EmptyBalance(ContractError):
    default_message = "Send some coins to create an atomic swap"


class NotExpired(ContractError):
    default_message = "Atomic swap not yet expired"


class SwapExpired(ContractError):
    default_message = "Expired atomic swap"


class AlreadyExists(ContractError):
    default_message = "Atomic swap already exists"