"""A minimal in-memory token ledger holding the accounts the program moves funds between."""

from __future__ import annotations

from dataclasses import dataclass

from stakepool.errors import TokenError
from stakepool.state import U64_MAX


def _check_amount(amount: int) -> None:
    if not isinstance(amount, int) or not 0 <= amount <= U64_MAX:
        raise ValueError(f"amount must be an integer in [0, {U64_MAX}], got {amount!r}")


@dataclass
class TokenAccount:
    """A balance of one mint, controlled by its owner."""

    address: str
    mint: str
    owner: str
    amount: int = 0


class TokenLedger:
    """Token accounts indexed by address."""

    def __init__(self) -> None:
        self._accounts: dict[str, TokenAccount] = {}

    def __contains__(self, address: object) -> bool:
        return address in self._accounts

    def __iter__(self):
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)

    def create_account(
        self, address: str, mint: str, owner: str, amount: int = 0
    ) -> TokenAccount:
        """Open a new token account; the address must be unused."""
        _check_amount(amount)
        if address in self._accounts:
            raise TokenError(f"token account {address!r} already exists")
        account = TokenAccount(address=address, mint=mint, owner=owner, amount=amount)
        self._accounts[address] = account
        return account

    def account(self, address: str) -> TokenAccount:
        """Return the account at an address."""
        try:
            return self._accounts[address]
        except KeyError:
            raise TokenError(f"unknown token account {address!r}") from None

    def balance(self, address: str) -> int:
        return self.account(address).amount

    def mint_to(self, address: str, amount: int) -> None:
        """Create new tokens in an account."""
        _check_amount(amount)
        account = self.account(address)
        if account.amount + amount > U64_MAX:
            raise TokenError("balance overflow")
        account.amount += amount

    def transfer(self, source: str, destination: str, authority: str, amount: int) -> None:
        """Move tokens between two accounts of the same mint, signed by the source's owner."""
        _check_amount(amount)
        src = self.account(source)
        dst = self.account(destination)
        if src.mint != dst.mint:
            raise TokenError("account mints do not match")
        if authority != src.owner:
            raise TokenError(f"{authority!r} is not the owner of {source!r}")
        if src.amount < amount:
            raise TokenError("insufficient funds")
        if src is dst:
            return
        if dst.amount + amount > U64_MAX:
            raise TokenError("balance overflow")
        src.amount -= amount
        dst.amount += amount