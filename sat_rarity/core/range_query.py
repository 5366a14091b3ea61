"""RangeQueryHandler — turns ownership references into rarity reports.

For each reference, in input order:
    1. Parse it as an outpoint.
    2. Resolve its sat ranges through the SatIndex.
    3. Build one rarity report per range, tagged with height and hash.
    4. Locate named-rarity sats and attach their metadata.

The batch is all-or-nothing: the first error aborts the whole request
and no partial results are returned.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Callable

from sat_rarity.core.report_builder import build_rarity_report
from sat_rarity.domain.errors import (
    CollaboratorError,
    SatIndexUnavailableError,
    SatRarityError,
)
from sat_rarity.domain.outpoint import OutPoint
from sat_rarity.domain.report import (
    Chunk,
    NamedSat,
    RangeQueryResponse,
    ReferenceResult,
    SatRangeReport,
)
from sat_rarity.domain.sat import Sat, SatMetadata
from sat_rarity.store.named_sats import (
    FirstSatNamedRarities,
    NamedRarityResolver,
    derive_metadata,
)
from sat_rarity.store.sat_index import SatIndex

logger = logging.getLogger(__name__)


class RangeQueryHandler:
    """Batch rarity lookup over a SatIndex.

    Args:
        index: Resolves references to sat ranges and heights to hashes.
        named_rarities: Locates named-rarity sats inside an output.
        metadata_provider: Derives sat metadata for named-rarity sats.
    """

    def __init__(
        self,
        index: SatIndex,
        named_rarities: NamedRarityResolver | None = None,
        metadata_provider: Callable[[int], SatMetadata] = derive_metadata,
    ) -> None:
        self._index = index
        self._named_rarities = named_rarities or FirstSatNamedRarities()
        self._metadata_provider = metadata_provider

    async def handle(self, references: Sequence[str]) -> RangeQueryResponse:
        """Classify every reference or raise on the first failure.

        Raises:
            SatIndexUnavailableError: If the index does not track sats.
            MalformedReferenceError: If a reference is not an outpoint.
            UnknownReferenceError: If the index does not know a reference.
            RangeClassificationError: If the index returns an invalid range.
            CollaboratorError: If the index itself fails during a lookup.
        """
        if not self._index.has_sat_index:
            raise SatIndexUnavailableError()

        results = [await self._handle_one(reference) for reference in references]
        logger.info("Resolved %d references", len(results))
        return RangeQueryResponse(results=results)

    # ── Index calls ──────────────────────────────────────────────────────
    # Domain errors pass through; anything else the index raises is
    # reported against the reference being resolved.

    async def _list_ranges(self, reference: str, outpoint: OutPoint) -> list[Chunk]:
        try:
            return await self._index.list_ranges(outpoint)
        except SatRarityError:
            raise
        except Exception as exc:
            logger.exception("Index failed listing ranges for %s", reference)
            raise CollaboratorError(reference, str(exc)) from exc

    async def _block_hash(self, reference: str, height: int) -> str | None:
        try:
            return await self._index.block_hash(height)
        except SatRarityError:
            raise
        except Exception as exc:
            logger.exception("Index failed resolving block %d for %s", height, reference)
            raise CollaboratorError(reference, str(exc)) from exc

    async def _handle_one(self, reference: str) -> ReferenceResult:
        outpoint = OutPoint.parse(reference)
        ranges = await self._list_ranges(reference, outpoint)

        reports: list[SatRangeReport] = []
        for start, end in ranges:
            rarities = build_rarity_report(start, end)
            height = Sat(start).height
            reports.append(SatRangeReport(
                start=start,
                end=end,
                rarities=rarities,
                block_height=height,
                block_hash=await self._block_hash(reference, height),
            ))

        named_sats = [
            NamedSat(
                offset=offset,
                rarity=rarity,
                sat_index=sat_index,
                metadata=self._metadata_provider(sat_index),
            )
            for sat_index, offset, rarity in self._named_rarities.named_rarities(outpoint, ranges)
        ]

        logger.debug(
            "Reference %s: %d ranges, %d named sats",
            reference,
            len(reports),
            len(named_sats),
        )
        return ReferenceResult(reference=reference, ranges=reports, named_sats=named_sats)
