import pytest

from stakepool.state import I64_MAX, U64_MAX, GlobalState, Staker


def test_global_state_counters_start_at_zero():
    state = GlobalState(admin="admin", staking_token_mint="mint", vault="vault")
    assert (
        state.total_staked,
        state.reward_rate,
        state.last_reward_time,
        state.reward_pool,
    ) == (0, 0, 0, 0)
    assert state.vault == "vault"


def test_global_state_accepts_u64_limit():
    state = GlobalState("admin", "mint", "vault", total_staked=U64_MAX)
    assert state.total_staked == U64_MAX


@pytest.mark.parametrize("field", ["total_staked", "reward_rate", "reward_pool"])
@pytest.mark.parametrize("value", [-1, U64_MAX + 1])
def test_global_state_rejects_out_of_range_counters(field, value):
    with pytest.raises(ValueError):
        GlobalState("admin", "mint", "vault", **{field: value})


def test_global_state_rejects_timestamp_beyond_i64():
    with pytest.raises(ValueError):
        GlobalState("admin", "mint", "vault", last_reward_time=I64_MAX + 1)


def test_global_state_allows_negative_timestamp():
    state = GlobalState("admin", "mint", "vault", last_reward_time=-5)
    assert state.last_reward_time == -5


def test_staker_defaults_and_equality():
    staker = Staker("alice")
    assert staker == Staker(address="alice", staked_amount=0, reward_debt=0)
    assert staker != Staker("bob")


def test_staker_rejects_negative_amount():
    with pytest.raises(ValueError):
        Staker("alice", staked_amount=-1)


def test_staker_rejects_non_integer_debt():
    with pytest.raises(ValueError):
        Staker("alice", reward_debt=1.5)