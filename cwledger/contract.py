"""The multi-token contract: setup, state-changing messages and queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from . import queries
from .chain import (
    Env,
    MessageInfo,
    Response,
    checked_add,
    checked_sub,
    never,
    validate_addr,
)
from .errors import Expired, NotFound, Unauthorized
from .msg import (
    ApproveAll,
    ApproveAllEvent,
    BatchBurn,
    BatchMint,
    BatchReceiveMsg,
    BatchSendFrom,
    Burn,
    InstantiateMsg,
    Mint,
    ReceiveMsg,
    RevokeAll,
    SendFrom,
    TransferEvent,
)
from .state import Cw1155State

CONTRACT_NAME = "crates.io:cw1155-base"
CONTRACT_VERSION = "0.1.0"


@dataclass(frozen=True)
class ContractVersion:
    contract: str
    version: str


def _copy_state(state: Cw1155State) -> Cw1155State:
    return Cw1155State(
        minter=state.minter,
        balances=dict(state.balances),
        approves=dict(state.approves),
        tokens=dict(state.tokens),
    )


def _load_minter(state: Cw1155State) -> str:
    if state.minter is None:
        raise NotFound("minter")
    return state.minter


def _transfer(
    state: Cw1155State,
    from_: str | None,
    to: str | None,
    token_id: str,
    amount: int,
) -> TransferEvent:
    """Move ``amount`` of ``token_id``; no sender mints, no receiver burns.

    Permissions must be checked by the caller.
    """
    if from_ is not None:
        key = (from_, token_id)
        state.balances[key] = checked_sub(state.balances.get(key, 0), amount)
    if to is not None:
        key = (to, token_id)
        state.balances[key] = checked_add(state.balances.get(key, 0), amount)
    return TransferEvent(from_=from_, to=to, token_id=token_id, amount=amount)


def _guard_can_approve(state: Cw1155State, env: Env, owner: str, operator: str) -> None:
    if not queries.check_can_approve(state, env, owner, operator):
        raise Unauthorized()


def _register_token(state: Cw1155State, token_id: str) -> None:
    state.tokens.setdefault(token_id, "")


class Cw1155Contract:
    """A multi-token ledger with a single minter and operator approvals.

    A failing ``execute`` leaves the state exactly as it was before the call.
    """

    def __init__(self, state: Cw1155State | None = None) -> None:
        self.state = Cw1155State() if state is None else state
        self.contract_version: ContractVersion | None = None
        self._handlers: dict[type, Callable[[Cw1155State, Env, MessageInfo, Any], Response]] = {
            SendFrom: self._send_from,
            BatchSendFrom: self._batch_send_from,
            Mint: self._mint,
            BatchMint: self._batch_mint,
            Burn: self._burn,
            BatchBurn: self._batch_burn,
            ApproveAll: self._approve_all,
            RevokeAll: self._revoke_all,
        }

    def instantiate(self, env: Env, info: MessageInfo, msg: InstantiateMsg) -> Response:
        minter = validate_addr(msg.minter)
        self.contract_version = ContractVersion(CONTRACT_NAME, CONTRACT_VERSION)
        self.state.minter = minter
        return Response()

    def execute(self, env: Env, info: MessageInfo, msg: Any) -> Response:
        handler = self._handlers.get(type(msg))
        if handler is None:
            raise TypeError(f"unknown execute message: {type(msg).__name__}")
        working = _copy_state(self.state)
        response = handler(working, env, info, msg)
        self.state = working
        return response

    def query(self, env: Env, msg: Any) -> Any:
        return queries.query(self.state, env, msg)

    # Handlers

    @staticmethod
    def _send_from(state: Cw1155State, env: Env, info: MessageInfo, msg: SendFrom) -> Response:
        from_addr = validate_addr(msg.from_)
        to_addr = validate_addr(msg.to)
        _guard_can_approve(state, env, from_addr, info.sender)

        response = Response()
        _transfer(state, from_addr, to_addr, msg.token_id, msg.value).add_attributes(response)
        if msg.msg is not None:
            response.messages = [
                ReceiveMsg(
                    operator=info.sender,
                    from_=msg.from_,
                    amount=msg.value,
                    token_id=msg.token_id,
                    msg=msg.msg,
                ).into_cosmos_msg(msg.to)
            ]
        return response

    @staticmethod
    def _mint(state: Cw1155State, env: Env, info: MessageInfo, msg: Mint) -> Response:
        to_addr = validate_addr(msg.to)
        if info.sender != _load_minter(state):
            raise Unauthorized()

        response = Response()
        _transfer(state, None, to_addr, msg.token_id, msg.value).add_attributes(response)
        if msg.msg is not None:
            response.messages = [
                ReceiveMsg(
                    operator=info.sender,
                    from_=None,
                    amount=msg.value,
                    token_id=msg.token_id,
                    msg=msg.msg,
                ).into_cosmos_msg(msg.to)
            ]
        _register_token(state, msg.token_id)
        return response

    @staticmethod
    def _burn(state: Cw1155State, env: Env, info: MessageInfo, msg: Burn) -> Response:
        from_addr = validate_addr(msg.from_)
        # whoever can transfer these tokens can burn them
        _guard_can_approve(state, env, from_addr, info.sender)

        response = Response()
        _transfer(state, from_addr, None, msg.token_id, msg.value).add_attributes(response)
        return response

    @staticmethod
    def _batch_send_from(
        state: Cw1155State, env: Env, info: MessageInfo, msg: BatchSendFrom
    ) -> Response:
        from_addr = validate_addr(msg.from_)
        to_addr = validate_addr(msg.to)
        _guard_can_approve(state, env, from_addr, info.sender)

        response = Response()
        for token_id, amount in msg.batch:
            _transfer(state, from_addr, to_addr, token_id, amount).add_attributes(response)
        if msg.msg is not None:
            response.messages = [
                BatchReceiveMsg(
                    operator=info.sender,
                    from_=msg.from_,
                    batch=list(msg.batch),
                    msg=msg.msg,
                ).into_cosmos_msg(msg.to)
            ]
        return response

    @staticmethod
    def _batch_mint(state: Cw1155State, env: Env, info: MessageInfo, msg: BatchMint) -> Response:
        if info.sender != _load_minter(state):
            raise Unauthorized()
        to_addr = validate_addr(msg.to)

        response = Response()
        for token_id, amount in msg.batch:
            _transfer(state, None, to_addr, token_id, amount).add_attributes(response)
            _register_token(state, token_id)
        if msg.msg is not None:
            response.messages = [
                BatchReceiveMsg(
                    operator=info.sender,
                    from_=None,
                    batch=list(msg.batch),
                    msg=msg.msg,
                ).into_cosmos_msg(msg.to)
            ]
        return response

    @staticmethod
    def _batch_burn(state: Cw1155State, env: Env, info: MessageInfo, msg: BatchBurn) -> Response:
        from_addr = validate_addr(msg.from_)
        _guard_can_approve(state, env, from_addr, info.sender)

        response = Response()
        for token_id, amount in msg.batch:
            _transfer(state, from_addr, None, token_id, amount).add_attributes(response)
        return response

    @staticmethod
    def _approve_all(
        state: Cw1155State, env: Env, info: MessageInfo, msg: ApproveAll
    ) -> Response:
        expires = never() if msg.expires is None else msg.expires
        if expires.is_expired(env.block):
            raise Expired()

        operator = validate_addr(msg.operator)
        state.approves[(info.sender, operator)] = expires

        response = Response()
        ApproveAllEvent(sender=info.sender, operator=msg.operator, approved=True).add_attributes(
            response
        )
        return response

    @staticmethod
    def _revoke_all(state: Cw1155State, env: Env, info: MessageInfo, msg: RevokeAll) -> Response:
        operator = validate_addr(msg.operator)
        state.approves.pop((info.sender, operator), None)

        response = Response()
        ApproveAllEvent(sender=info.sender, operator=msg.operator, approved=False).add_attributes(
            response
        )
        return response