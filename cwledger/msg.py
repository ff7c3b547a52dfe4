"""Messages, queries, responses and events of the multi-token contract."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Any

from .chain import Expiration, Response, WasmExecuteMsg


@dataclass(frozen=True)
class InstantiateMsg:
    """Setup message; the minter is the only one who can create new tokens."""

    minter: str


# Execute messages


@dataclass(frozen=True)
class SendFrom:
    from_: str
    to: str
    token_id: str
    value: int
    msg: bytes | None = None


@dataclass(frozen=True)
class BatchSendFrom:
    from_: str
    to: str
    batch: list[tuple[str, int]]
    msg: bytes | None = None


@dataclass(frozen=True)
class Mint:
    to: str
    token_id: str
    value: int
    msg: bytes | None = None


@dataclass(frozen=True)
class BatchMint:
    to: str
    batch: list[tuple[str, int]]
    msg: bytes | None = None


@dataclass(frozen=True)
class Burn:
    from_: str
    token_id: str
    value: int


@dataclass(frozen=True)
class BatchBurn:
    from_: str
    batch: list[tuple[str, int]]


@dataclass(frozen=True)
class ApproveAll:
    operator: str
    expires: Expiration | None = None


@dataclass(frozen=True)
class RevokeAll:
    operator: str


# Queries


@dataclass(frozen=True)
class BalanceQuery:
    owner: str
    token_id: str


@dataclass(frozen=True)
class BatchBalanceQuery:
    owner: str
    token_ids: list[str]


@dataclass(frozen=True)
class IsApprovedForAllQuery:
    owner: str
    operator: str


@dataclass(frozen=True)
class ApprovedForAllQuery:
    owner: str
    include_expired: bool | None = None
    start_after: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class TokenInfoQuery:
    token_id: str


@dataclass(frozen=True)
class TokensQuery:
    owner: str
    start_after: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class AllTokensQuery:
    start_after: str | None = None
    limit: int | None = None


# Responses


@dataclass(frozen=True)
class BalanceResponse:
    balance: int


@dataclass(frozen=True)
class BatchBalanceResponse:
    balances: list[int]


@dataclass(frozen=True)
class Approval:
    spender: str
    expires: Expiration


@dataclass(frozen=True)
class ApprovedForAllResponse:
    operators: list[Approval]


@dataclass(frozen=True)
class IsApprovedForAllResponse:
    approved: bool


@dataclass(frozen=True)
class TokenInfoResponse:
    url: str


@dataclass(frozen=True)
class TokensResponse:
    tokens: list[str]


# Receiver callbacks


def _encode(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


@dataclass(frozen=True)
class ReceiveMsg:
    """Sent to a receiving contract after a single token transfer."""

    operator: str
    from_: str | None
    amount: int
    token_id: str
    msg: bytes

    def to_json(self) -> bytes:
        return _encode(
            {
                "receive": {
                    "operator": self.operator,
                    "from": self.from_,
                    "token_id": self.token_id,
                    "amount": str(self.amount),
                    "msg": _b64(self.msg),
                }
            }
        )

    def into_cosmos_msg(self, contract_addr: str) -> WasmExecuteMsg:
        return WasmExecuteMsg(contract_addr=contract_addr, msg=self.to_json())


@dataclass(frozen=True)
class BatchReceiveMsg:
    """Sent to a receiving contract after a batch transfer."""

    operator: str
    from_: str | None
    batch: list[tuple[str, int]]
    msg: bytes

    def to_json(self) -> bytes:
        return _encode(
            {
                "batch_receive": {
                    "operator": self.operator,
                    "from": self.from_,
                    "batch": [[token_id, str(amount)] for token_id, amount in self.batch],
                    "msg": _b64(self.msg),
                }
            }
        )

    def into_cosmos_msg(self, contract_addr: str) -> WasmExecuteMsg:
        return WasmExecuteMsg(contract_addr=contract_addr, msg=self.to_json())


# Events


@dataclass(frozen=True)
class TransferEvent:
    """A balance move; no sender means mint, no receiver means burn."""

    from_: str | None
    to: str | None
    token_id: str
    amount: int

    def add_attributes(self, response: Response) -> Response:
        response.add_attribute("action", "transfer")
        response.add_attribute("token_id", self.token_id)
        response.add_attribute("amount", self.amount)
        if self.from_ is not None:
            response.add_attribute("from", self.from_)
        if self.to is not None:
            response.add_attribute("to", self.to)
        return response


@dataclass(frozen=True)
class ApproveAllEvent:
    sender: str
    operator: str
    approved: bool

    def add_attributes(self, response: Response) -> Response:
        response.add_attribute("action", "approve_all")
        response.add_attribute("sender", self.sender)
        response.add_attribute("operator", self.operator)
        response.add_attribute("approved", "true" if self.approved else "false")
        return response