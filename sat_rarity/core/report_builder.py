"""RarityReportBuilder — run every evaluator over one single-block range.

Pure: no I/O, no shared mutable state beyond the read-only RangeTable.
A call returns a complete report or raises; it never returns a partial
report.
"""

from __future__ import annotations

import logging

from sat_rarity.core.rarity_table import RARITY_TABLE
from sat_rarity.domain.report import QueryRange, RarityChunks

logger = logging.getLogger(__name__)


def build_rarity_report(start: int, end: int) -> list[RarityChunks]:
    """Rarity kinds with at least one chunk in ``[start, end)``, in fixed order.

    Raises:
        RangeClassificationError: If the range is empty, inverted, or
            spans two blocks.
    """
    query = QueryRange.of(start, end)

    report: list[RarityChunks] = []
    for evaluator in RARITY_TABLE.values():
        for kind, chunks in evaluator(query):
            if chunks:
                report.append(RarityChunks(kind=kind, chunks=chunks))

    logger.debug(
        "Classified [%d, %d) at height %d → %s",
        start,
        end,
        query.height,
        [r.kind.value for r in report] or "no rarities",
    )
    return report
