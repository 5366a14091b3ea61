"""Sat — a single indivisible unit, identified by its issuance index.

All positional metadata (height, epoch, degree, name, named rarity) is
derived from the index alone using the fixed subsidy schedule.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from pydantic import BaseModel

from sat_rarity.domain.enums import NamedRarity
from sat_rarity.foundation.constants import (
    CYCLE_EPOCHS,
    DIFFCHANGE_INTERVAL,
    EPOCH_STARTING_SATS,
    LAST_EPOCH,
    SUBSIDY_HALVING_INTERVAL,
    SUPPLY,
    subsidy,
)

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class Degree:
    """Position of a sat expressed as hour°minute′second″third‴."""

    hour: int
    minute: int
    second: int
    third: int

    def __str__(self) -> str:
        return f"{self.hour}°{self.minute}′{self.second}″{self.third}‴"


@dataclass(frozen=True)
class Sat:
    """Immutable sat index with derived positional metadata."""

    n: int

    def __post_init__(self) -> None:
        if not 0 <= self.n < SUPPLY:
            raise ValueError(f"sat {self.n} is outside of the supply [0, {SUPPLY})")

    # ── Schedule position ───────────────────────────────────────────────

    @property
    def epoch(self) -> int:
        return min(bisect_right(EPOCH_STARTING_SATS, self.n) - 1, LAST_EPOCH)

    @property
    def epoch_position(self) -> int:
        return self.n - EPOCH_STARTING_SATS[self.epoch]

    @property
    def height(self) -> int:
        epoch = self.epoch
        return epoch * SUBSIDY_HALVING_INTERVAL + self.epoch_position // subsidy(epoch)

    @property
    def third(self) -> int:
        """Offset of this sat inside the block that issued it."""
        return self.epoch_position % subsidy(self.epoch)

    @property
    def cycle(self) -> int:
        return self.epoch // CYCLE_EPOCHS

    @property
    def period(self) -> int:
        return self.height // DIFFCHANGE_INTERVAL

    @property
    def degree(self) -> Degree:
        height = self.height
        return Degree(
            hour=height // (CYCLE_EPOCHS * SUBSIDY_HALVING_INTERVAL),
            minute=height % SUBSIDY_HALVING_INTERVAL,
            second=height % DIFFCHANGE_INTERVAL,
            third=self.third,
        )

    # ── Representations ──────────────────────────────────────────────────

    @property
    def decimal(self) -> str:
        return f"{self.height}.{self.third}"

    @property
    def name(self) -> str:
        x = SUPPLY - self.n
        letters: list[str] = []
        while x > 0:
            letters.append(_ALPHABET[(x - 1) % 26])
            x = (x - 1) // 26
        return "".join(reversed(letters))

    @property
    def rarity(self) -> NamedRarity:
        degree = self.degree
        if degree.third != 0:
            return NamedRarity.COMMON
        if degree.minute == 0 and degree.second == 0:
            if degree.hour == 0:
                return NamedRarity.MYTHIC
            return NamedRarity.LEGENDARY
        if degree.minute == 0:
            return NamedRarity.EPIC
        if degree.second == 0:
            return NamedRarity.RARE
        return NamedRarity.UNCOMMON

    def metadata(self) -> SatMetadata:
        return SatMetadata(
            decimal=self.decimal,
            degree=str(self.degree),
            name=self.name,
            height=self.height,
            cycle=self.cycle,
            epoch=self.epoch,
            period=self.period,
            offset=self.third,
            rarity=self.rarity,
        )


class SatMetadata(BaseModel):
    """Serializable view of a sat's derived metadata."""

    decimal: str
    degree: str
    name: str
    height: int
    cycle: int
    epoch: int
    period: int
    offset: int
    rarity: NamedRarity

    model_config = {"frozen": True}
