"""Hash-locked atomic swaps: messages, swap records and their storage."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import islice

from .chain import BlockInfo, Expiration, never
from .errors import NotFound

_MIN_NAME_BYTES = 3
_MAX_NAME_BYTES = 20


@dataclass(frozen=True)
class Coin:
    """An amount of a native token."""

    denom: str
    amount: int


@dataclass(frozen=True)
class Cw20Coin:
    """An amount of a cw20 token, by token contract address."""

    address: str
    amount: int


@dataclass(frozen=True)
class NativeBalance:
    """A set of native coins held by a swap."""

    coins: tuple[Coin, ...] = ()


@dataclass(frozen=True)
class Cw20Balance:
    """A cw20 token amount held by a swap, with a validated contract address."""

    address: str
    amount: int


Balance = NativeBalance | Cw20Balance


# Execute messages


@dataclass(frozen=True)
class CreateMsg:
    """Open a swap.

    ``id`` is a human-readable name of 3-20 bytes of utf-8 text; ``hash`` is the
    hex-encoded sha-256 hash of the preimage (64 chars). If released, funds go
    to ``recipient``; after ``expires`` they can be refunded to the funder.
    """

    id: str
    hash: str
    recipient: str
    expires: Expiration


@dataclass(frozen=True)
class Release:
    """Send all tokens to the recipient; ``preimage`` is 32 bytes in hex."""

    id: str
    preimage: str


@dataclass(frozen=True)
class Refund:
    """Return all remaining tokens to the original sender."""

    id: str


# Queries and responses


@dataclass(frozen=True)
class ListQuery:
    """List all open swaps."""

    start_after: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class DetailsQuery:
    """Details of one named swap."""

    id: str


@dataclass(frozen=True)
class ListResponse:
    swaps: list[str]


@dataclass(frozen=True)
class DetailsResponse:
    id: str
    hash: str
    recipient: str
    source: str
    expires: Expiration
    balance: list[Coin] | Cw20Coin


# State


@dataclass
class AtomicSwap:
    """An open swap: the sha-256 hash of the preimage and the locked balance."""

    hash: bytes
    recipient: str
    source: str
    expires: Expiration = field(default_factory=never)
    balance: Balance = field(default_factory=NativeBalance)

    def is_expired(self, block: BlockInfo) -> bool:
        return self.expires.is_expired(block)


@dataclass
class SwapStore:
    """Open swaps keyed by id, iterated in ascending id order."""

    swaps: dict[str, AtomicSwap] = field(default_factory=dict)

    def save(self, swap_id: str, swap: AtomicSwap) -> None:
        self.swaps[swap_id] = swap

    def load(self, swap_id: str) -> AtomicSwap:
        try:
            return self.swaps[swap_id]
        except KeyError:
            raise NotFound("AtomicSwap") from None

    def _ids_after(self, start_after: str | None) -> Iterator[str]:
        for swap_id in sorted(self.swaps):
            if start_after is None or swap_id > start_after:
                yield swap_id

    def all_swap_ids(self, start_after: str | None, limit: int) -> list[str]:
        """Ids of open swaps after ``start_after``, at most ``limit`` of them."""
        return list(islice(self._ids_after(start_after), limit))


def is_valid_name(name: str) -> bool:
    """True if the name is between 3 and 20 bytes of utf-8."""
    return _MIN_NAME_BYTES <= len(name.encode("utf-8")) <= _MAX_NAME_BYTES