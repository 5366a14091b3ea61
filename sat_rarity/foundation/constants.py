"""Ledger constants shared by every layer.

All values are fixed by the issuance schedule of the ledger and never
change at runtime.
"""

from __future__ import annotations

COIN_VALUE = 100_000_000
SUBSIDY_HALVING_INTERVAL = 210_000
DIFFCHANGE_INTERVAL = 2016
CYCLE_EPOCHS = 6
INITIAL_SUBSIDY = 50 * COIN_VALUE

# Sats issued per block during the first epoch; curated intervals are
# bucketed by this value.
FIRST_EPOCH_SUBSIDY = INITIAL_SUBSIDY


def subsidy(epoch: int) -> int:
    """Block subsidy in sats for *epoch* (zero once fully halved away)."""
    if epoch >= 64:
        return 0
    return INITIAL_SUBSIDY >> epoch


def _starting_sats() -> tuple[int, ...]:
    sats = [0]
    epoch = 0
    while subsidy(epoch) > 0:
        sats.append(sats[-1] + subsidy(epoch) * SUBSIDY_HALVING_INTERVAL)
        epoch += 1
    return tuple(sats)


# EPOCH_STARTING_SATS[e] is the first sat of epoch e; the last entry is SUPPLY.
EPOCH_STARTING_SATS = _starting_sats()
SUPPLY = EPOCH_STARTING_SATS[-1]
LAST_EPOCH = len(EPOCH_STARTING_SATS) - 2
