import pytest

from cwledger.errors import (
    AlreadyExists,
    ArithmeticOverflow,
    ContractError,
    EmptyBalance,
    Expired,
    HashParseError,
    InvalidAddress,
    InvalidHash,
    InvalidId,
    InvalidPreimage,
    NotExpired,
    NotFound,
    StdError,
    SwapExpired,
    Unauthorized,
)


@pytest.mark.parametrize(
    "error, message",
    [
        (Unauthorized(), "Unauthorized"),
        (Expired(), "Expired"),
        (InvalidId(), "Invalid atomic swap id"),
        (InvalidPreimage(), "Invalid preimage"),
        (EmptyBalance(), "Send some coins to create an atomic swap"),
        (NotExpired(), "Atomic swap not yet expired"),
        (SwapExpired(), "Expired atomic swap"),
        (AlreadyExists(), "Atomic swap already exists"),
    ],
)
def test_fixed_messages(error, message):
    assert str(error) == message


def test_invalid_hash_message_carries_length():
    err = InvalidHash(10)
    assert str(err) == "Invalid hash (10 chars): must be 64 characters"
    assert err.length == 10


def test_hash_parse_error_message():
    assert str(HashParseError("odd length")) == "Hash parse error: odd length"


def test_std_errors_are_contract_errors():
    with pytest.raises(StdError) as overflow_info:
        raise ArithmeticOverflow("Add", 1, 2)
    assert overflow_info.value.operation == "Add"
    assert (overflow_info.value.left, overflow_info.value.right) == (1, 2)

    with pytest.raises(ContractError) as address_info:
        raise InvalidAddress("bad")
    assert address_info.value == InvalidAddress("bad")
    assert isinstance(address_info.value, StdError)

    with pytest.raises(StdError) as missing_info:
        raise NotFound("token")
    assert missing_info.value.kind == "token"


def test_unauthorized_is_not_std_error():
    err = Unauthorized()
    assert str(err) == "Unauthorized"
    assert isinstance(err, StdError) is False
    assert isinstance(err, ContractError) is True


def test_equality_by_type_and_content():
    assert InvalidHash(3) == InvalidHash(3)
    assert not InvalidHash(3) == InvalidHash(4)
    assert not Expired() == SwapExpired()


def test_overflow_keeps_operands():
    err = ArithmeticOverflow("Sub", 0, 5)
    assert (err.operation, err.left, err.right) == ("Sub", 0, 5)
    assert "0" in str(err) and "5" in str(err)


def test_not_found_names_kind():
    assert NotFound("minter").kind == "minter"
    assert "minter" in str(NotFound("minter"))