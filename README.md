# cwledger

An in-memory multi-token ledger in the style of the CW1155 standard. It also
provides records and storage for hash-locked atomic swaps.

## Installation

```
pip install cwledger
```

To run the tests:

```
pip install "cwledger[test]"
pytest
```

## Multi-token ledger

`cwledger.contract.Cw1155Contract` holds a `cwledger.state.Cw1155State` and has
three entry points:

- `instantiate(env, info, msg)`: takes an `InstantiateMsg(minter=...)` and records the only address that may mint.
- `execute(env, info, msg)`: handles one of the message classes in `cwledger.msg`:
  - `Mint`, `BatchMint`: minter only. The first mint of a token id registers it with an empty url.
  - `SendFrom`, `BatchSendFrom`: allowed for the owner or for an operator whose approval has not expired.
  - `Burn`, `BatchBurn`: the same rule as transfers.
  - `ApproveAll(operator, expires=None)`: approves an operator. With no `expires` the approval never expires. An expiry that has already passed raises `Expired`.
  - `RevokeAll(operator)`: removes an approval.

  `execute` returns a `cwledger.chain.Response`. Each balance move adds the attributes `action`, `token_id`, `amount`, then `from` and/or `to`. When a message carries `msg` bytes, the response holds one `WasmExecuteMsg` addressed to the receiver. That message contains a JSON `ReceiveMsg` or `BatchReceiveMsg`. If `execute` fails, the state is left as it was before the call.
- `query(env, msg)`: answers `BalanceQuery`, `BatchBalanceQuery`, `IsApprovedForAllQuery`, `ApprovedForAllQuery`, `TokenInfoQuery`, `TokensQuery` and `AllTokensQuery`. It returns the matching response dataclass. Lists are in ascending order and start after `start_after`. They return 10 items by default and never more than 30.

The same queries are available as plain functions in `cwledger.queries`, which work on a state object directly.

```python
from cwledger.chain import MessageInfo, mock_env
from cwledger.contract import Cw1155Contract
from cwledger.msg import ApproveAll, BalanceQuery, InstantiateMsg, Mint, SendFrom

contract = Cw1155Contract()
env = mock_env()

contract.instantiate(env, MessageInfo(sender="operator"), InstantiateMsg(minter="minter"))
contract.execute(env, MessageInfo(sender="minter"),
                 Mint(to="user1", token_id="token1", value=1))

# user1 lets the minter move its tokens
contract.execute(env, MessageInfo(sender="user1"), ApproveAll(operator="minter"))

response = contract.execute(
    env, MessageInfo(sender="minter"),
    SendFrom(from_="user1", to="user2", token_id="token1", value=1),
)
print(response.attributes)
# [('action', 'transfer'), ('token_id', 'token1'), ('amount', '1'),
#  ('from', 'user1'), ('to', 'user2')]

print(contract.query(env, BalanceQuery(owner="user2", token_id="token1")))
# BalanceResponse(balance=1)
```

## Chain context

`cwledger.chain` provides the following:

- `BlockInfo`, `Env` and `MessageInfo`. `mock_env()` gives an environment at block height 12345.
- `Expiration`, built with `at_height(h)`, `at_time(nanos)` or `never()`. `is_expired(block)` is true once the block height or time reaches the value.
- `validate_addr`: accepts lower-case strings of 3 to 54 characters.
- `checked_add` and `checked_sub`: work on 128-bit unsigned amounts.

## Atomic swaps

`cwledger.swap` provides the following:

- Message and response dataclasses: `CreateMsg`, `Release`, `Refund`, `ListQuery`, `DetailsQuery`, `ListResponse` and `DetailsResponse`.
- Balances: `Coin`, `Cw20Coin`, `NativeBalance` and `Cw20Balance`.
- `AtomicSwap` with `is_expired(block)`.
- `SwapStore`, with `save`, `load` and `all_swap_ids(start_after, limit)`. `load` raises `NotFound` for an unknown id. `all_swap_ids` returns ids in ascending order.
- `is_valid_name(name)`: true for ids of 3 to 20 UTF-8 bytes.

## Errors

Every failure raises a subclass of `cwledger.errors.ContractError`:

- `Unauthorized`: the caller is not the minter, or is neither the owner nor an approved operator.
- `Expired`: an approval was given with an expiry that has already passed.
- `ArithmeticOverflow`: a balance would go below zero or past the 128-bit limit.
- `NotFound`: a missing token info, minter or swap.
- `InvalidAddress`: an address failed validation.

The swap errors `HashParseError`, `InvalidId`, `InvalidPreimage`, `InvalidHash`, `EmptyBalance`, `NotExpired`, `SwapExpired` and `AlreadyExists` are defined for swap handling.

## What this package does not do

- State lives only in memory. Nothing is persisted.
- No swap-executing contract is included. `CreateMsg`, `Release` and `Refund` are data only. Nothing here checks preimages against hashes, moves swap funds or answers swap queries.
- There is no command-line tool, no network server and no JSON schema export.