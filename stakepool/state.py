"""Account records kept by the staking program."""

from __future__ import annotations

from dataclasses import dataclass

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def _require_range(name: str, value: int, low: int, high: int) -> None:
    if not isinstance(value, int) or not low <= value <= high:
        raise ValueError(f"{name} must be an integer in [{low}, {high}], got {value!r}")


@dataclass
class GlobalState:
    """Program-wide staking configuration and totals."""

    admin: str
    staking_token_mint: str
    vault: str
    total_staked: int = 0
    reward_rate: int = 0  # rewards per second
    last_reward_time: int = 0  # unix timestamp of the last reward update
    reward_pool: int = 0  # total rewards available for distribution

    def __post_init__(self) -> None:
        for name in ("total_staked", "reward_rate", "reward_pool"):
            _require_range(name, getattr(self, name), 0, U64_MAX)
        _require_range("last_reward_time", self.last_reward_time, I64_MIN, I64_MAX)


@dataclass
class Staker:
    """Stake held by one address."""

    address: str
    staked_amount: int = 0
    reward_debt: int = 0  # rewards already paid out to this staker

    def __post_init__(self) -> None:
        _require_range("staked_amount", self.staked_amount, 0, U64_MAX)
        _require_range("reward_debt", self.reward_debt, 0, U64_MAX)