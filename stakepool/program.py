"""The staking program: deposits, withdrawals and time-based reward payouts."""

from __future__ import annotations

import logging
import time
from typing import Callable

from stakepool.errors import InsufficientStake, InvalidOperation
from stakepool.state import U64_MAX, GlobalState, Staker
from stakepool.token import TokenLedger

logger = logging.getLogger(__name__)

VAULT_ADDRESS = "staking_vault"
REWARD_POOL_ADDRESS = "reward_pool"
VAULT_AUTHORITY = "vault_authority"
REWARD_POOL_AUTHORITY = "reward_pool_authority"


def _check_u64(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} must be an integer in [0, {U64_MAX}], got {value!r}")


def _system_clock() -> int:
    return int(time.time())


class StakingProgram:
    """Staking pool whose vault and reward pool live in a token ledger."""

    def __init__(
        self,
        ledger: TokenLedger | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.ledger = ledger if ledger is not None else TokenLedger()
        self.clock = clock if clock is not None else _system_clock
        self.global_state: GlobalState | None = None
        self._stakers: dict[str, Staker] = {}

    def _state(self) -> GlobalState:
        if self.global_state is None:
            raise InvalidOperation("Global state is not initialized.")
        return self.global_state

    def _check_vault(self, state: GlobalState) -> None:
        if self.ledger.account(state.vault).mint != state.staking_token_mint:
            raise InvalidOperation("Vault mint does not match the staking token mint.")

    def initialize(self, admin: str, mint: str) -> GlobalState:
        """Create the global state, the staking vault and the reward pool."""
        if self.global_state is not None:
            raise InvalidOperation("Global state is already initialized.")
        if VAULT_ADDRESS in self.ledger or REWARD_POOL_ADDRESS in self.ledger:
            raise InvalidOperation("Vault or reward pool account already exists.")
        self.ledger.create_account(VAULT_ADDRESS, mint, VAULT_AUTHORITY)
        self.ledger.create_account(REWARD_POOL_ADDRESS, mint, REWARD_POOL_AUTHORITY)
        self.global_state = GlobalState(
            admin=admin, staking_token_mint=mint, vault=VAULT_ADDRESS
        )
        logger.info("Reward pool initialized")
        logger.info("Staking account initialized")
        return self.global_state

    def stake(self, signer: str, user_token_account: str, amount: int) -> Staker:
        """Deposit tokens into the vault and record them for the signer."""
        _check_u64("amount", amount)
        state = self._state()
        self._check_vault(state)
        if state.total_staked + amount > U64_MAX:
            raise OverflowError("total staked overflows")
        self.ledger.transfer(user_token_account, state.vault, signer, amount)

        staker = self._stakers.setdefault(signer, Staker(signer))
        staker.address = signer
        # Each deposit resets the recorded amount before adding the new one.
        staker.staked_amount = amount
        state.total_staked += amount
        return staker

    def unstake(self, signer: str, user_token_account: str, amount: int) -> Staker:
        """Withdraw staked tokens from the vault back to the signer's account."""
        _check_u64("amount", amount)
        state = self._state()
        staker = self.staker(signer)
        self._check_vault(state)
        if staker.staked_amount < amount:
            raise InsufficientStake()
        if state.total_staked < amount:
            raise OverflowError("total staked underflows")
        self.ledger.transfer(state.vault, user_token_account, VAULT_AUTHORITY, amount)
        staker.staked_amount -= amount
        state.total_staked -= amount
        return staker

    def claim(self, signer: str, destination: str) -> int:
        """Pay the signer's share of rewards accrued since the last reward update."""
        state = self._state()
        staker = self.staker(signer)

        elapsed = (self.clock() - state.last_reward_time) % (U64_MAX + 1)
        to_distribute = elapsed * state.reward_rate
        if to_distribute > U64_MAX:
            raise OverflowError("reward computation overflows")
        rewards = min(to_distribute, state.reward_pool)

        if state.total_staked == 0:
            raise InvalidOperation("Nothing is staked.")
        share = staker.staked_amount * rewards // state.total_staked
        if staker.reward_debt + share > U64_MAX:
            raise OverflowError("reward debt overflows")

        self.ledger.transfer(REWARD_POOL_ADDRESS, destination, REWARD_POOL_AUTHORITY, share)
        staker.reward_debt += share
        logger.info("Rewards distributed: %d", share)
        return share

    def add_rewards(self, admin: str, source: str, amount: int, reward_rate: int) -> None:
        """Fund the reward pool and set a new reward rate starting now."""
        _check_u64("amount", amount)
        _check_u64("reward_rate", reward_rate)
        state = self._state()
        if state.reward_pool + amount > U64_MAX:
            raise OverflowError("reward pool overflows")
        now = self.clock()
        self.ledger.transfer(source, REWARD_POOL_ADDRESS, admin, amount)
        state.reward_pool += amount
        state.reward_rate = reward_rate
        state.last_reward_time = now
        logger.info("Added %d rewards with rate %d", amount, reward_rate)

    def staker(self, address: str) -> Staker:
        """Return the stake record of an address."""
        try:
            return self._stakers[address]
        except KeyError:
            raise InvalidOperation(f"No stake account for {address!r}.") from None