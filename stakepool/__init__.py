"""In-memory token staking pool: token ledger, pool state, staking operations and errors."""

__version__ = "0.1.0"
__all__ = ["errors", "state", "token", "program"]