"""Chunk algebra — intersect a query range with curated intervals."""

from __future__ import annotations

from collections.abc import Iterable

from sat_rarity.domain.report import Chunk


def intersect_chunks(start: int, end: int, curated: Iterable[Chunk]) -> list[Chunk]:
    """Clip each curated ``[lo, hi)`` to the query ``[start, end)``.

    *curated* must be sorted and disjoint; the output keeps that order and
    drops intervals that do not overlap the query.
    """
    chunks: list[Chunk] = []
    for lo, hi in curated:
        if start >= hi or end <= lo:
            continue
        chunks.append((max(lo, start), min(hi, end)))
    return chunks


def single_sat_chunks(sats: Iterable[int]) -> list[Chunk]:
    """One ``[n, n + 1)`` chunk per sat, in the order given."""
    return [(n, n + 1) for n in sats]
