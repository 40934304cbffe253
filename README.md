# stakepool

An in-memory model of a token staking pool. Users stake tokens into a shared
vault. An administrator funds a reward pool and sets a per-second reward rate.
Stakers then claim their proportional share of the rewards that have accrued
since the last funding.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `stakepool.token`: `TokenLedger` holds `TokenAccount` records. Each record
  has an `address`, a `mint`, an `owner` and an `amount`. The ledger provides
  these methods:
  - `create_account(address, mint, owner, amount)`
  - `account(address)`
  - `balance(address)`
  - `mint_to(address, amount)`
  - `transfer(source, destination, authority, amount)`

  `transfer` moves tokens between two accounts of the same mint. The
  `authority` must be the owner of the source account, and the source must hold
  enough tokens. If any check fails, it raises `TokenError`. Amounts must be
  integers in the unsigned 64-bit range, otherwise `ValueError` is raised. A
  balance that would go past that range raises `TokenError`.
- `stakepool.state`: `GlobalState` records the pool. Its fields are `admin`,
  `staking_token_mint`, `vault`, `total_staked`, `reward_rate`,
  `last_reward_time` and `reward_pool`. `Staker` records one address's
  `staked_amount` and `reward_debt`, which is the rewards already paid out. Both
  dataclasses validate their integer fields against the unsigned or signed
  64-bit range and raise `ValueError` otherwise.
- `stakepool.program`: `StakingProgram(ledger=None, clock=None)` ties these
  together. `clock` is a callable that returns a unix timestamp; it defaults to
  the system time.
- `stakepool.errors`: the exception classes.

## Operations

- `initialize(admin, mint)` creates the vault account (`"staking_vault"`) and
  the reward pool account (`"reward_pool"`) on the ledger, then creates the
  `GlobalState`. Calling it a second time raises `InvalidOperation`.
- `stake(signer, user_token_account, amount)` transfers `amount` from the
  signer's token account into the vault. It then adds `amount` to
  `total_staked`. The signer's `Staker` record is created when needed. Each
  deposit sets the record's `staked_amount` to that deposit's `amount`. It
  replaces the earlier value rather than adding to it.
- `unstake(signer, user_token_account, amount)` transfers `amount` from the
  vault back to the given account. It raises `InsufficientStake` if the signer's
  `staked_amount` is smaller than `amount`.
- `add_rewards(admin, source, amount, reward_rate)` transfers `amount` from
  `source` into the reward pool. `admin` must own `source`. The call adds
  `amount` to `reward_pool`, sets `reward_rate`, and sets `last_reward_time` to
  the current clock value.
- `claim(signer, destination)` pays out from the reward pool account to
  `destination` and returns the amount paid. The amount is
  `staked_amount * min(elapsed_seconds * reward_rate, reward_pool) // total_staked`.
  It is also added to the staker's `reward_debt`. `claim` does not change
  `reward_pool` or `last_reward_time`. It raises `InvalidOperation` when nothing
  is staked.
- `staker(address)` returns an address's `Staker` record. It raises
  `InvalidOperation` if the address has never staked.

Any operation called before `initialize` raises `InvalidOperation`. Arithmetic
that would leave the 64-bit range raises `OverflowError`. Progress messages go
to the `stakepool.program` logger.

## Example

```python
from stakepool.program import StakingProgram
from stakepool.errors import InsufficientStake

now = [1_000]
program = StakingProgram(clock=lambda: now[0])
program.initialize(admin="admin", mint="mint")

program.ledger.create_account("alice-tokens", "mint", "alice", 1_000)
program.ledger.create_account("admin-tokens", "mint", "admin", 10_000)

program.stake("alice", "alice-tokens", 400)
print(program.staker("alice").staked_amount)  # 400

program.add_rewards("admin", "admin-tokens", 5_000, 10)
now[0] = 1_100
print(program.claim("alice", "alice-tokens"))  # 1000
print(program.ledger.balance("alice-tokens"))  # 1600

try:
    program.unstake("alice", "alice-tokens", 10_000)
except InsufficientStake as exc:
    print(exc)  # Insufficient stake amount.
```

## Errors

All program errors derive from `StakingError`. Each has a default message, and
the first three carry a numeric `code`:

| Exception           | Code | Default message             |
|---------------------|------|-----------------------------|
| `InsufficientStake` | 6000 | Insufficient stake amount.  |
| `EmptyRewardPool`   | 6001 | Reward pool is empty.       |
| `InvalidOperation`  | 6002 | Invalid operation.          |
| `TokenError`        |      | Token operation failed.     |

`EmptyRewardPool` is defined but no operation raises it.

## What it does not do

Everything lives in memory in one Python process. There is no storage, no
network or blockchain connection, no command-line tool, and no check that the
`admin` passed to `add_rewards` matches the admin recorded at initialization.