"""Read-only queries of the multi-token contract."""

from __future__ import annotations

from itertools import islice

from .chain import Env, validate_addr
from .errors import NotFound
from .msg import (
    AllTokensQuery,
    Approval,
    ApprovedForAllQuery,
    ApprovedForAllResponse,
    BalanceQuery,
    BalanceResponse,
    BatchBalanceQuery,
    BatchBalanceResponse,
    IsApprovedForAllQuery,
    IsApprovedForAllResponse,
    TokenInfoQuery,
    TokenInfoResponse,
    TokensQuery,
    TokensResponse,
)
from .state import Cw1155State

DEFAULT_LIMIT = 10
MAX_LIMIT = 30


def _page_size(limit: int | None) -> int:
    return min(DEFAULT_LIMIT if limit is None else limit, MAX_LIMIT)


def check_can_approve(state: Cw1155State, env: Env, owner: str, operator: str) -> bool:
    """True if ``operator`` may act for ``owner``: the owner itself or an unexpired approval."""
    if owner == operator:
        return True
    expires = state.approves.get((owner, operator))
    return expires is not None and not expires.is_expired(env.block)


def query_all_approvals(
    state: Cw1155State,
    env: Env,
    owner: str,
    include_expired: bool,
    start_after: str | None,
    limit: int | None,
) -> ApprovedForAllResponse:
    approvals = (
        Approval(spender=operator, expires=expires)
        for operator, expires in state.approvals_of(owner, start_after)
        if include_expired or not expires.is_expired(env.block)
    )
    return ApprovedForAllResponse(operators=list(islice(approvals, _page_size(limit))))


def query_tokens(
    state: Cw1155State, owner: str, start_after: str | None, limit: int | None
) -> TokensResponse:
    tokens = (token_id for token_id, _ in state.tokens_of(owner, start_after))
    return TokensResponse(tokens=list(islice(tokens, _page_size(limit))))


def query_all_tokens(
    state: Cw1155State, start_after: str | None, limit: int | None
) -> TokensResponse:
    tokens = (token_id for token_id, _ in state.all_tokens(start_after))
    return TokensResponse(tokens=list(islice(tokens, _page_size(limit))))


def query(state: Cw1155State, env: Env, msg: object):
    """Answer a query message with its response object."""
    if isinstance(msg, BalanceQuery):
        owner = validate_addr(msg.owner)
        return BalanceResponse(balance=state.balance(owner, msg.token_id))
    if isinstance(msg, BatchBalanceQuery):
        owner = validate_addr(msg.owner)
        return BatchBalanceResponse(
            balances=[state.balance(owner, token_id) for token_id in msg.token_ids]
        )
    if isinstance(msg, IsApprovedForAllQuery):
        owner = validate_addr(msg.owner)
        operator = validate_addr(msg.operator)
        return IsApprovedForAllResponse(
            approved=check_can_approve(state, env, owner, operator)
        )
    if isinstance(msg, ApprovedForAllQuery):
        owner = validate_addr(msg.owner)
        start = None if msg.start_after is None else validate_addr(msg.start_after)
        return query_all_approvals(
            state, env, owner, bool(msg.include_expired), start, msg.limit
        )
    if isinstance(msg, TokenInfoQuery):
        try:
            url = state.tokens[msg.token_id]
        except KeyError:
            raise NotFound("token info") from None
        return TokenInfoResponse(url=url)
    if isinstance(msg, TokensQuery):
        owner = validate_addr(msg.owner)
        return query_tokens(state, owner, msg.start_after, msg.limit)
    if isinstance(msg, AllTokensQuery):
        return query_all_tokens(state, msg.start_after, msg.limit)
    raise TypeError(f"unknown query message: {type(msg).__name__}")