"""RarityTable — the fixed dispatch from rarity kind to its evaluator.

Every evaluator is a pure function of a validated QueryRange and returns
an ordered list of ``(kind, chunks)`` pairs.  Most return a single pair;
the block 9 and palindrome evaluators tag several kinds from one pass.
An empty chunk list means "no match", never an error.

Evaluator shapes:
    - height predicate: vintage, nakamoto, block78, block286, block666
    - height + offset predicate: block9 (+ block9_450), firsttransaction
    - curated table lookup: pizza
    - pure numeric predicate: palindrome (+ refinements), alpha, omega
"""

from __future__ import annotations

from typing import Callable

from sat_rarity.core.chunks import intersect_chunks, single_sat_chunks
from sat_rarity.core.denomination import alphas_in_range, omegas_in_range
from sat_rarity.core.palindrome import (
    is_palindrome,
    is_perfect_palinception,
    is_uniform_palinception,
    palindromes_in_range,
)
from sat_rarity.core.range_table import RangeTable, range_table
from sat_rarity.domain.enums import RarityKind
from sat_rarity.domain.report import Chunk, QueryRange

TaggedChunks = list[tuple[RarityKind, list[Chunk]]]
Evaluator = Callable[[QueryRange], TaggedChunks]

# ── Historic constants ───────────────────────────────────────────────────────

VINTAGE_BLOCK_HEIGHT = 1000
BLOCK9_BLOCK_HEIGHT = 9
BLOCK78_BLOCK_HEIGHT = 78
BLOCK286_BLOCK_HEIGHT = 286
BLOCK666_BLOCK_HEIGHT = 666
NAKAMOTO_BLOCK_HEIGHTS = frozenset({
    9, 286, 688, 877, 1760, 2459, 2485, 3479, 5326, 9443, 9925, 10645,
    14450, 15625, 15817, 19093, 23014, 28593, 29097,
})
# Outputs of the first person-to-person transaction, spent from block 9.
FIRST_TRANSACTION_SAT_RANGE = (45_000_000_000, 46_000_000_000)
# First 450 coins of block 9.
BLOCK9_450_SAT_RANGE = (45_000_000_000, 45_100_000_000)


def _whole_if(matches: bool, kind: RarityKind, query: QueryRange) -> TaggedChunks:
    return [(kind, query.whole() if matches else [])]


def _clipped_prefix(query: QueryRange, limit: int) -> list[Chunk]:
    """The part of *query* below *limit*, as a chunk list."""
    if query.start < limit:
        return [(query.start, min(limit, query.end))]
    return []


# ── Height predicates ────────────────────────────────────────────────────────


def evaluate_vintage(query: QueryRange) -> TaggedChunks:
    return _whole_if(query.height <= VINTAGE_BLOCK_HEIGHT, RarityKind.VINTAGE, query)


def evaluate_nakamoto(query: QueryRange) -> TaggedChunks:
    return _whole_if(query.height in NAKAMOTO_BLOCK_HEIGHTS, RarityKind.NAKAMOTO, query)


def evaluate_block78(query: QueryRange) -> TaggedChunks:
    return _whole_if(query.height == BLOCK78_BLOCK_HEIGHT, RarityKind.BLOCK78, query)


def evaluate_block286(query: QueryRange) -> TaggedChunks:
    return _whole_if(query.height == BLOCK286_BLOCK_HEIGHT, RarityKind.BLOCK286, query)


def evaluate_block666(query: QueryRange) -> TaggedChunks:
    return _whole_if(query.height == BLOCK666_BLOCK_HEIGHT, RarityKind.BLOCK666, query)


# ── Height + offset predicates ───────────────────────────────────────────────


def evaluate_block9(query: QueryRange) -> TaggedChunks:
    if query.height != BLOCK9_BLOCK_HEIGHT:
        return []
    return [
        (RarityKind.BLOCK9, query.whole()),
        (RarityKind.BLOCK9_450, _clipped_prefix(query, BLOCK9_450_SAT_RANGE[1])),
    ]


def evaluate_first_transaction(query: QueryRange) -> TaggedChunks:
    if query.height != BLOCK9_BLOCK_HEIGHT:
        return []
    return [(RarityKind.FIRST_TRANSACTION, _clipped_prefix(query, FIRST_TRANSACTION_SAT_RANGE[1]))]


# ── Curated tables ───────────────────────────────────────────────────────────


def make_curated_evaluator(kind: RarityKind, table: RangeTable = range_table) -> Evaluator:
    """Evaluator that clips the query against *kind*'s curated intervals."""

    def evaluate(query: QueryRange) -> TaggedChunks:
        curated = table.ranges_at(kind, query.height)
        return [(kind, intersect_chunks(query.start, query.end, curated))]

    evaluate.__name__ = f"evaluate_{kind.value}"
    return evaluate


# ── Numeric patterns ─────────────────────────────────────────────────────────


def evaluate_palindromes(query: QueryRange) -> TaggedChunks:
    """Enumerate palindromes once and tag all four palindrome kinds."""
    normal: list[Chunk] = []
    perfect: list[Chunk] = []
    uniform: list[Chunk] = []
    paliblock: list[Chunk] = []
    block_is_palindrome = is_palindrome(query.height)

    # The enumerator takes an inclusive range.
    for palindrome in palindromes_in_range(query.start, query.end - 1):
        chunk = (palindrome, palindrome + 1)
        digits = str(palindrome)
        normal.append(chunk)
        if is_perfect_palinception(digits):
            perfect.append(chunk)
        if is_uniform_palinception(digits):
            uniform.append(chunk)
        if block_is_palindrome:
            paliblock.append(chunk)

    return [
        (RarityKind.PALINDROME, normal),
        (RarityKind.PERFECT_PALINCEPTION, perfect),
        (RarityKind.UNIFORM_PALINCEPTION, uniform),
        (RarityKind.PALIBLOCK_PALINDROME, paliblock),
    ]


def evaluate_alpha(query: QueryRange) -> TaggedChunks:
    return [(RarityKind.ALPHA, single_sat_chunks(alphas_in_range(query.start, query.end)))]


def evaluate_omega(query: QueryRange) -> TaggedChunks:
    return [(RarityKind.OMEGA, single_sat_chunks(omegas_in_range(query.start, query.end)))]


# ── Dispatch ─────────────────────────────────────────────────────────────────

# Evaluation order; dict order is the report order.
RARITY_TABLE: dict[RarityKind, Evaluator] = {
    RarityKind.VINTAGE: evaluate_vintage,
    RarityKind.NAKAMOTO: evaluate_nakamoto,
    RarityKind.BLOCK9: evaluate_block9,
    RarityKind.BLOCK78: evaluate_block78,
    RarityKind.FIRST_TRANSACTION: evaluate_first_transaction,
    RarityKind.PIZZA: make_curated_evaluator(RarityKind.PIZZA),
    RarityKind.PALINDROME: evaluate_palindromes,
    RarityKind.ALPHA: evaluate_alpha,
    RarityKind.OMEGA: evaluate_omega,
    RarityKind.BLOCK286: evaluate_block286,
    RarityKind.BLOCK666: evaluate_block666,
}

# Kinds produced as extra outputs of another kind's evaluator.
DERIVED_KINDS: dict[RarityKind, RarityKind] = {
    RarityKind.BLOCK9_450: RarityKind.BLOCK9,
    RarityKind.PERFECT_PALINCEPTION: RarityKind.PALINDROME,
    RarityKind.UNIFORM_PALINCEPTION: RarityKind.PALINDROME,
    RarityKind.PALIBLOCK_PALINDROME: RarityKind.PALINDROME,
}

_uncovered = set(RarityKind) - set(RARITY_TABLE) - set(DERIVED_KINDS)
if _uncovered:
    raise RuntimeError(f"rarity kinds without an evaluator: {sorted(k.value for k in _uncovered)}")


def evaluate_kind(kind: RarityKind, query: QueryRange) -> list[Chunk]:
    """Chunks of *query* that qualify for *kind* alone."""
    evaluator = RARITY_TABLE[DERIVED_KINDS.get(kind, kind)]
    for tagged, chunks in evaluator(query):
        if tagged is kind:
            return chunks
    return []
