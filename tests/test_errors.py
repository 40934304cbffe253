from operator import attrgetter

import pytest

from stakepool.errors import (
    EmptyRewardPool,
    InsufficientStake,
    InvalidOperation,
    StakingError,
    TokenError,
)

_error_code = attrgetter("code")


@pytest.mark.parametrize(
    "error_cls, message",
    [
        (InsufficientStake, "Insufficient stake amount."),
        (EmptyRewardPool, "Reward pool is empty."),
        (InvalidOperation, "Invalid operation."),
    ],
)
def test_default_messages(error_cls, message):
    error = error_cls()
    assert error.message == message
    assert str(error) == message


def test_program_error_codes_follow_declaration_order():
    errors = [InsufficientStake(), EmptyRewardPool(), InvalidOperation()]
    assert [_error_code(error) for error in errors] == [6000, 6001, 6002]


def test_custom_message_replaces_default():
    error = InvalidOperation("Global state is already initialized.")
    assert str(error) == "Global state is already initialized."
    assert _error_code(error) == _error_code(InvalidOperation())


@pytest.mark.parametrize(
    "error_cls", [InsufficientStake, EmptyRewardPool, InvalidOperation, TokenError]
)
def test_all_errors_are_caught_as_staking_error(error_cls):
    error = error_cls("something went wrong")
    assert isinstance(error, StakingError)
    assert error.message == "something went wrong"
    assert str(error) == "something went wrong"

    try:
        raise error
    except StakingError as caught:
        assert caught is error
        assert caught.message == "something went wrong"


def test_token_error_has_no_program_code():
    error = TokenError("insufficient funds")
    assert _error_code(error) is None
    assert error.message == "insufficient funds"