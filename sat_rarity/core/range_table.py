"""RangeTable — per-kind lookup of curated sat intervals by block height.

The tables are built from embedded literal data on first access and are
read-only afterwards.  Construction happens at most once per process:
concurrent first callers block on a lock until the tables are fully
populated, later callers never touch the lock.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping, Sequence

from sat_rarity.core.data.pizza_ranges import PIZZA_RANGES
from sat_rarity.domain.enums import RarityKind
from sat_rarity.domain.report import Chunk
from sat_rarity.foundation.constants import FIRST_EPOCH_SUBSIDY

logger = logging.getLogger(__name__)

HeightIndex = Mapping[int, tuple[Chunk, ...]]


def bucket_by_height(pairs: Iterable[Chunk], sats_per_block: int = FIRST_EPOCH_SUBSIDY) -> dict[int, tuple[Chunk, ...]]:
    """Group half-open ``(start, end)`` pairs by ``start // sats_per_block``.

    Raises:
        ValueError: If a pair is empty or the pairs of one height are not
            sorted and disjoint.
    """
    buckets: dict[int, list[Chunk]] = {}
    for start, end in pairs:
        if start >= end:
            raise ValueError(f"empty curated interval ({start}, {end})")
        bucket = buckets.setdefault(start // sats_per_block, [])
        if bucket and bucket[-1][1] > start:
            raise ValueError(
                f"curated interval ({start}, {end}) overlaps or precedes {bucket[-1]}"
            )
        bucket.append((start, end))
    return {height: tuple(chunks) for height, chunks in buckets.items()}


class RangeTable:
    """Lazily built, immutable height → intervals index for curated kinds.

    Args:
        sources: Literal interval data per curated rarity kind.
        sats_per_block: Issuance used to bucket intervals by height.
    """

    def __init__(
        self,
        sources: Mapping[RarityKind, Sequence[Chunk]],
        sats_per_block: int = FIRST_EPOCH_SUBSIDY,
    ) -> None:
        self._sources = dict(sources)
        self._sats_per_block = sats_per_block
        self._lock = threading.Lock()
        self._tables: dict[RarityKind, HeightIndex] | None = None

    def _ensure_built(self) -> dict[RarityKind, HeightIndex]:
        tables = self._tables
        if tables is None:
            with self._lock:
                if self._tables is None:
                    self._tables = {
                        kind: bucket_by_height(pairs, self._sats_per_block)
                        for kind, pairs in self._sources.items()
                    }
                    logger.info(
                        "Built curated range tables: %s",
                        ", ".join(f"{k.value}={len(v)} heights" for k, v in self._tables.items()),
                    )
                tables = self._tables
        return tables

    def warm(self) -> None:
        """Build the tables now instead of on first lookup."""
        self._ensure_built()

    @property
    def is_built(self) -> bool:
        return self._tables is not None

    @property
    def kinds(self) -> list[RarityKind]:
        return list(self._sources)

    def ranges_at(self, kind: RarityKind, height: int) -> tuple[Chunk, ...]:
        """Curated intervals of *kind* issued at *height* (empty if none)."""
        tables = self._ensure_built()
        if kind not in tables:
            raise KeyError(f"{kind.value} is not a curated rarity kind")
        return tables[kind].get(height, ())


# Process-wide table shared by every request.
range_table = RangeTable({RarityKind.PIZZA: PIZZA_RANGES})
