"""Tests for the full rarity report over single-block ranges."""

import pytest

from sat_rarity.core.report_builder import build_rarity_report
from sat_rarity.domain.enums import RarityKind
from sat_rarity.domain.errors import RangeClassificationError
from sat_rarity.domain.report import RarityChunks
from sat_rarity.foundation.constants import COIN_VALUE

BLOCK_SATS = 50 * COIN_VALUE


def _as_pairs(report: list[RarityChunks]) -> list[tuple[RarityKind, list[tuple[int, int]]]]:
    return [(entry.kind, list(entry.chunks)) for entry in report]


class TestScenarios:
    def test_first_sats_are_vintage_palindromes(self) -> None:
        report = dict(_as_pairs(build_rarity_report(1, 2)))
        assert report[RarityKind.VINTAGE] == [(1, 2)]
        assert report[RarityKind.PALINDROME] == [(1, 2)]

    def test_first_transaction_window(self) -> None:
        start, end = 45_500_000_000, 45_500_001_000
        report = dict(_as_pairs(build_rarity_report(start, end)))
        for kind in (
            RarityKind.VINTAGE,
            RarityKind.NAKAMOTO,
            RarityKind.BLOCK9,
            RarityKind.FIRST_TRANSACTION,
        ):
            assert report[kind] == [(start, end)]
        assert RarityKind.BLOCK9_450 not in report

    def test_whole_coin_seam(self) -> None:
        report = dict(_as_pairs(build_rarity_report(460 * COIN_VALUE - 10_000, 460 * COIN_VALUE + 10_000)))
        assert report[RarityKind.ALPHA] == [(460 * COIN_VALUE, 460 * COIN_VALUE + 1)]
        assert report[RarityKind.OMEGA] == [(460 * COIN_VALUE - 1, 460 * COIN_VALUE)]

    def test_range_inside_one_curated_interval(self) -> None:
        start, end = 120486000000000, 120487000000000
        report = dict(_as_pairs(build_rarity_report(start, end)))
        assert report[RarityKind.PIZZA] == [(start, end)]

    def test_cross_block_range_fails(self) -> None:
        with pytest.raises(RangeClassificationError, match="different blocks"):
            build_rarity_report(BLOCK_SATS - 10, BLOCK_SATS + 10)

    def test_inverted_range_fails(self) -> None:
        with pytest.raises(RangeClassificationError):
            build_rarity_report(100, 50)

    def test_range_beyond_supply_fails(self) -> None:
        with pytest.raises(RangeClassificationError):
            build_rarity_report(2_099_999_997_690_000, 2_099_999_997_690_001)

    def test_plain_range_has_no_rarities(self) -> None:
        assert build_rarity_report(31535156000000, 31535157000000) == []


class TestReportVectors:
    def test_block9_around_coin_460(self) -> None:
        start, end = 460 * COIN_VALUE - 10_000, 460 * COIN_VALUE + 10_000
        assert _as_pairs(build_rarity_report(start, end)) == [
            (RarityKind.VINTAGE, [(start, end)]),
            (RarityKind.NAKAMOTO, [(start, end)]),
            (RarityKind.BLOCK9, [(start, end)]),
            (RarityKind.FIRST_TRANSACTION, [(start, 460 * COIN_VALUE)]),
            (RarityKind.PALINDROME, [(45_999_999_954, 45_999_999_955), (46_000_000_064, 46_000_000_065)]),
            (RarityKind.PALIBLOCK_PALINDROME, [(45_999_999_954, 45_999_999_955), (46_000_000_064, 46_000_000_065)]),
            (RarityKind.ALPHA, [(46_000_000_000, 46_000_000_001)]),
            (RarityKind.OMEGA, [(45_999_999_999, 46_000_000_000)]),
        ]

    def test_block9_around_coin_451(self) -> None:
        start, end = 451 * COIN_VALUE - 10_000, 451 * COIN_VALUE + 10_000
        assert _as_pairs(build_rarity_report(start, end)) == [
            (RarityKind.VINTAGE, [(start, end)]),
            (RarityKind.NAKAMOTO, [(start, end)]),
            (RarityKind.BLOCK9, [(start, end)]),
            (RarityKind.BLOCK9_450, [(start, 451 * COIN_VALUE)]),
            (RarityKind.FIRST_TRANSACTION, [(start, end)]),
            (RarityKind.PALINDROME, [(45_099_999_054, 45_099_999_055), (45_100_000_154, 45_100_000_155)]),
            (RarityKind.PALIBLOCK_PALINDROME, [(45_099_999_054, 45_099_999_055), (45_100_000_154, 45_100_000_155)]),
            (RarityKind.ALPHA, [(45_100_000_000, 45_100_000_001)]),
            (RarityKind.OMEGA, [(45_099_999_999, 45_100_000_000)]),
        ]

    @pytest.mark.parametrize(
        ("height", "kinds"),
        [
            (78, [RarityKind.VINTAGE, RarityKind.BLOCK78]),
            (286, [RarityKind.VINTAGE, RarityKind.NAKAMOTO, RarityKind.BLOCK286]),
            (666, [RarityKind.VINTAGE, RarityKind.BLOCK666]),
        ],
    )
    def test_named_blocks(self, height: int, kinds: list[RarityKind]) -> None:
        start, end = height * BLOCK_SATS + 10_000, height * BLOCK_SATS + 20_000
        assert _as_pairs(build_rarity_report(start, end)) == [(kind, [(start, end)]) for kind in kinds]

    def test_lone_palindrome(self) -> None:
        assert _as_pairs(build_rarity_report(31535155000000, 31535156000000)) == [
            (RarityKind.PALINDROME, [(31535155153513, 31535155153514)]),
        ]

    def test_uniform_palinception_in_palindromic_block(self) -> None:
        hit = [(400041111140004, 400041111140005)]
        assert _as_pairs(build_rarity_report(40004_11111_00000, 40004_11112_00000)) == [
            (RarityKind.PALINDROME, hit),
            (RarityKind.UNIFORM_PALINCEPTION, hit),
            (RarityKind.PALIBLOCK_PALINDROME, hit),
        ]

    def test_perfect_palinception(self) -> None:
        hit = [(76858677685867, 76858677685868)]
        assert _as_pairs(build_rarity_report(7685867_0000000, 7685868_0000000)) == [
            (RarityKind.PALINDROME, hit),
            (RarityKind.PERFECT_PALINCEPTION, hit),
            (RarityKind.UNIFORM_PALINCEPTION, hit),
        ]

    def test_pizza_block_with_palindromes(self) -> None:
        report = _as_pairs(build_rarity_report(204589006000000, 204589046000000))
        assert [kind for kind, _ in report] == [RarityKind.PIZZA, RarityKind.PALINDROME]
        assert len(report[0][1]) == 9
        assert report[1][1] == [
            (204589010985402, 204589010985403),
            (204589020985402, 204589020985403),
            (204589030985402, 204589030985403),
            (204589040985402, 204589040985403),
        ]

    def test_chunks_are_never_empty(self) -> None:
        for entry in build_rarity_report(0, 10_000):
            assert entry.chunks
            assert all(lo < hi for lo, hi in entry.chunks)
