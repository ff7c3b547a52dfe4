from dataclasses import replace

import pytest

from cwledger.chain import at_height, mock_env, never
from cwledger.errors import InvalidAddress, NotFound
from cwledger.msg import (
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
from cwledger.queries import (
    check_can_approve,
    query,
    query_all_approvals,
    query_all_tokens,
    query_tokens,
)
from cwledger.state import Cw1155State

TOKENS = [f"token{i}" for i in range(10)]
USERS = [f"user{i}" for i in range(10)]


def env_at(height):
    env = mock_env()
    return replace(env, block=replace(env.block, height=height))


@pytest.fixture
def state():
    st = Cw1155State(minter="minter")
    for token in TOKENS:
        st.balances[(USERS[0], token)] = 1
        st.tokens[token] = ""
    for user in USERS[1:]:
        st.approves[(USERS[0], user)] = never()
    return st


def test_tokens_first_page(state):
    result = query(state, mock_env(), TokensQuery(owner=USERS[0], limit=5))
    assert result == TokensResponse(tokens=TOKENS[:5])


def test_tokens_after_start(state):
    result = query(
        state, mock_env(), TokensQuery(owner=USERS[0], start_after="token5", limit=5)
    )
    assert result == TokensResponse(tokens=TOKENS[6:])


def test_all_tokens_after_start(state):
    result = query(state, mock_env(), AllTokensQuery(start_after="token5", limit=5))
    assert result == TokensResponse(tokens=TOKENS[6:])


def test_token_info(state):
    result = query(state, mock_env(), TokenInfoQuery(token_id="token5"))
    assert result == TokenInfoResponse(url="")


def test_token_info_missing(state):
    with pytest.raises(NotFound):
        query(state, mock_env(), TokenInfoQuery(token_id="nope"))


def test_approved_for_all_page(state):
    result = query(
        state,
        mock_env(),
        ApprovedForAllQuery(owner=USERS[0], start_after="user2", limit=1),
    )
    assert result == ApprovedForAllResponse(
        operators=[Approval(spender=USERS[3], expires=never())]
    )


def test_balance_queries(state):
    env = mock_env()
    assert query(state, env, BalanceQuery(owner=USERS[0], token_id="token1")) == (
        BalanceResponse(balance=1)
    )
    assert query(state, env, BalanceQuery(owner=USERS[1], token_id="token1")) == (
        BalanceResponse(balance=0)
    )
    assert query(
        state, env, BatchBalanceQuery(owner=USERS[0], token_ids=["token1", "token2", "x"])
    ) == BatchBalanceResponse(balances=[1, 1, 0])


def test_approval_expires():
    st = Cw1155State(minter="minter")
    st.approves[("user1", "user2")] = at_height(100)
    msg = IsApprovedForAllQuery(owner="user1", operator="user2")
    assert query(st, env_at(10), msg) == IsApprovedForAllResponse(approved=True)
    assert query(st, env_at(100), msg) == IsApprovedForAllResponse(approved=False)


def test_owner_can_always_approve():
    st = Cw1155State()
    assert check_can_approve(st, mock_env(), "user1", "user1") is True
    assert check_can_approve(st, mock_env(), "user1", "user2") is False


def test_expired_approvals_filtered_unless_requested():
    st = Cw1155State()
    st.approves[("owner", "alice")] = at_height(5)
    st.approves[("owner", "bob")] = never()
    env = env_at(10)
    live = query_all_approvals(st, env, "owner", False, None, None)
    assert live.operators == [Approval(spender="bob", expires=never())]
    everything = query_all_approvals(st, env, "owner", True, None, None)
    assert [a.spender for a in everything.operators] == ["alice", "bob"]


def test_default_and_max_limits():
    st = Cw1155State()
    names = sorted(f"tok{i:03d}" for i in range(40))
    for name in names:
        st.tokens[name] = ""
        st.balances[("owner", name)] = 1
    assert query_all_tokens(st, None, None).tokens == names[:10]
    assert query_all_tokens(st, None, 100).tokens == names[:30]
    assert query_tokens(st, "owner", None, 100).tokens == names[:30]
    assert query_tokens(st, "owner", None, None).tokens == names[:10]


def test_invalid_owner_rejected(state):
    with pytest.raises(InvalidAddress):
        query(state, mock_env(), BalanceQuery(owner="User0", token_id="token1"))


def test_unknown_query_rejected(state):
    with pytest.raises(TypeError):
        query(state, mock_env(), object())