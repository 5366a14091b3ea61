"""Request and response models for sat range queries.

These are the wire contract of ``getSatRanges``.  Reports are built once
and never mutated, so every model is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from sat_rarity.domain.enums import NamedRarity, RarityKind
from sat_rarity.domain.errors import RangeClassificationError
from sat_rarity.domain.sat import Sat, SatMetadata

# Half-open [start, end) interval of sat indices.
Chunk = tuple[int, int]


@dataclass(frozen=True)
class QueryRange:
    """A validated half-open ``[start, end)`` range issued by one block."""

    start: int
    end: int
    height: int

    @classmethod
    def of(cls, start: int, end: int) -> QueryRange:
        """Validate bounds and resolve the issuing block height.

        Raises:
            RangeClassificationError: If the range is empty, inverted,
                outside the supply, or spans two blocks.
        """
        if start >= end:
            raise RangeClassificationError(
                f"invalid sat range: start {start} >= end {end}"
            )
        try:
            first, last = Sat(start), Sat(end - 1)
        except ValueError as exc:
            raise RangeClassificationError(f"invalid sat range: {exc}") from exc
        if first.height != last.height:
            raise RangeClassificationError(
                f"invalid sat range: start {start} and end {end} are in different blocks"
            )
        return cls(start=start, end=end, height=first.height)

    def whole(self) -> list[Chunk]:
        return [(self.start, self.end)]


class RarityChunks(BaseModel):
    """All chunks of one query range that qualify for a single kind."""

    kind: RarityKind
    chunks: list[Chunk] = Field(..., min_length=1)

    model_config = {"frozen": True}


class SatRangeReport(BaseModel):
    """Rarity report for one owned, single-block sat range."""

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    rarities: list[RarityChunks] = Field(default_factory=list)
    block_height: int = Field(..., ge=0)
    block_hash: Optional[str] = Field(
        default=None,
        description="Hash of the issuing block, if the index knows it",
    )

    model_config = {"frozen": True}


class NamedSat(BaseModel):
    """A sat carrying a coarse named rarity, located inside a reference."""

    offset: int = Field(..., ge=0, description="Position of the sat inside the output")
    rarity: NamedRarity
    sat_index: int = Field(..., ge=0)
    metadata: SatMetadata

    model_config = {"frozen": True}


class ReferenceResult(BaseModel):
    reference: str
    ranges: list[SatRangeReport] = Field(default_factory=list)
    named_sats: list[NamedSat] = Field(default_factory=list)

    model_config = {"frozen": True}


class RangeQueryRequest(BaseModel):
    references: list[str] = Field(..., description="Ownership references (outpoints)")


class RangeQueryResponse(BaseModel):
    results: list[ReferenceResult] = Field(default_factory=list)

    model_config = {"frozen": True}
