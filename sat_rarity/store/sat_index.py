"""Sat index — resolves ownership references to the sat ranges they hold.

The range query handler depends on the SatIndex interface only.  The
in-memory implementation here serves snapshots exported from a full
ledger index; swap in another implementation to query a live index.

Contract:
    1. list_ranges() returns ranges in output order, each single-block.
    2. An unknown reference raises UnknownReferenceError.
    3. block_hash() returns None for heights the index does not know.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from sat_rarity.domain.errors import UnknownReferenceError
from sat_rarity.domain.outpoint import OutPoint
from sat_rarity.domain.report import Chunk

logger = logging.getLogger(__name__)


class SatIndex(ABC):
    """Read-only view of a ledger index with sat tracking."""

    @property
    @abstractmethod
    def has_sat_index(self) -> bool:
        """True if the index tracks which sats each output holds."""
        ...

    @abstractmethod
    async def list_ranges(self, outpoint: OutPoint) -> list[Chunk]:
        """Sat ranges held by *outpoint*, in output order.

        Raises:
            UnknownReferenceError: If the index has no record of *outpoint*.
        """
        ...

    @abstractmethod
    async def block_hash(self, height: int) -> Optional[str]:
        """Hash of the block at *height*, or None if unknown."""
        ...


class IndexSnapshot(BaseModel):
    """On-disk format read by InMemorySatIndex.from_file()."""

    sat_index: bool = True
    outputs: dict[str, list[Chunk]] = Field(default_factory=dict)
    block_hashes: dict[int, str] = Field(default_factory=dict)


class InMemorySatIndex(SatIndex):
    """SatIndex backed by plain dicts.

    Args:
        outputs: Outpoint string → ordered sat ranges.
        block_hashes: Block height → block hash.
        sat_index: Whether sat ranges are tracked at all.
    """

    def __init__(
        self,
        outputs: Mapping[str, Sequence[Chunk]] | None = None,
        block_hashes: Mapping[int, str] | None = None,
        sat_index: bool = True,
    ) -> None:
        self._outputs: dict[OutPoint, list[Chunk]] = {
            OutPoint.parse(ref): [(start, end) for start, end in ranges]
            for ref, ranges in (outputs or {}).items()
        }
        self._block_hashes = dict(block_hashes or {})
        self._sat_index = sat_index

    @classmethod
    def from_file(cls, path: str | Path) -> InMemorySatIndex:
        snapshot = IndexSnapshot.model_validate(json.loads(Path(path).read_text()))
        logger.info(
            "Loaded index snapshot %s: %d outputs, %d block hashes",
            path,
            len(snapshot.outputs),
            len(snapshot.block_hashes),
        )
        return cls(snapshot.outputs, snapshot.block_hashes, snapshot.sat_index)

    @property
    def has_sat_index(self) -> bool:
        return self._sat_index

    @property
    def output_count(self) -> int:
        return len(self._outputs)

    async def list_ranges(self, outpoint: OutPoint) -> list[Chunk]:
        try:
            return list(self._outputs[outpoint])
        except KeyError:
            raise UnknownReferenceError(str(outpoint)) from None

    async def block_hash(self, height: int) -> Optional[str]:
        return self._block_hashes.get(height)
