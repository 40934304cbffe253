"""Errors raised by the staking program and the token ledger."""

from __future__ import annotations


class StakingError(Exception):
    """Base class for every error the staking program raises."""

    code: int | None = None
    default_message = "Staking operation failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class InsufficientStake(StakingError):
    """The staker holds less stake than the operation needs."""

    code = 6000
    default_message = "Insufficient stake amount."


class EmptyRewardPool(StakingError):
    """There are no rewards left to distribute."""

    code = 6001
    default_message = "Reward pool is empty."


class InvalidOperation(StakingError):
    """The operation is not valid in the program's current state."""

    code = 6002
    default_message = "Invalid operation."


class TokenError(StakingError):
    """A token account operation was rejected by the ledger."""

    default_message = "Token operation failed."