"""Storage of the multi-token contract."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .chain import Expiration


@dataclass
class Cw1155State:
    """Minter, balances keyed by (owner, token_id), approvals keyed by
    (owner, operator) and token metadata urls keyed by token_id.

    Iteration is in ascending key order, as ordered storage would yield it.
    A token_id has an entry in ``tokens`` as long as it is in circulation.
    """

    minter: str | None = None
    balances: dict[tuple[str, str], int] = field(default_factory=dict)
    approves: dict[tuple[str, str], Expiration] = field(default_factory=dict)
    tokens: dict[str, str] = field(default_factory=dict)

    def balance(self, owner: str, token_id: str) -> int:
        return self.balances.get((owner, token_id), 0)

    def tokens_of(self, owner: str, start_after: str | None = None) -> Iterator[tuple[str, int]]:
        """Yield (token_id, balance) pairs of an owner after ``start_after``."""
        keys = sorted(token for holder, token in self.balances if holder == owner)
        for token_id in keys:
            if start_after is None or token_id > start_after:
                yield token_id, self.balances[(owner, token_id)]

    def approvals_of(
        self, owner: str, start_after: str | None = None
    ) -> Iterator[tuple[str, Expiration]]:
        """Yield (operator, expiration) pairs granted by an owner after ``start_after``."""
        keys = sorted(operator for holder, operator in self.approves if holder == owner)
        for operator in keys:
            if start_after is None or operator > start_after:
                yield operator, self.approves[(owner, operator)]

    def all_tokens(self, start_after: str | None = None) -> Iterator[tuple[str, str]]:
        """Yield (token_id, url) pairs of every known token after ``start_after``."""
        for token_id in sorted(self.tokens):
            if start_after is None or token_id > start_after:
                yield token_id, self.tokens[token_id]