"""Named-rarity lookup for the sats held by an output.

A NamedRarityResolver decides which sats of an output carry a coarse
named rarity (uncommon and above).  The handler depends on this
protocol, so the rule can change without touching request handling.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from sat_rarity.domain.enums import NamedRarity
from sat_rarity.domain.outpoint import OutPoint
from sat_rarity.domain.report import Chunk
from sat_rarity.domain.sat import Sat, SatMetadata

# (sat index, offset inside the output, rarity)
NamedRarityHit = tuple[int, int, NamedRarity]


class NamedRarityResolver(Protocol):
    """Protocol for locating named-rarity sats inside an output."""

    def named_rarities(self, outpoint: OutPoint, ranges: Sequence[Chunk]) -> list[NamedRarityHit]:
        ...


class FirstSatNamedRarities:
    """Checks the first sat of every range.

    Only the first sat of a block can be uncommon or rarer, and a range
    never spans two blocks, so the range starts are the only candidates.
    Offsets count sats from the start of the output.
    """

    def named_rarities(self, outpoint: OutPoint, ranges: Sequence[Chunk]) -> list[NamedRarityHit]:
        hits: list[NamedRarityHit] = []
        offset = 0
        for start, end in ranges:
            rarity = Sat(start).rarity
            if rarity > NamedRarity.COMMON:
                hits.append((start, offset, rarity))
            offset += end - start
        return hits


def derive_metadata(sat_index: int) -> SatMetadata:
    """Default metadata provider: derive everything from the index."""
    return Sat(sat_index).metadata()
