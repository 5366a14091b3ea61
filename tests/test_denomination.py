"""Tests for alpha / omega whole-coin boundary enumeration."""

import pytest

from sat_rarity.core.denomination import alphas_in_range, omegas_in_range
from sat_rarity.foundation.constants import COIN_VALUE


class TestAlpha:
    def test_straddling_coin_boundary(self) -> None:
        assert alphas_in_range(460 * COIN_VALUE - 10_000, 460 * COIN_VALUE + 10_000) == [460 * COIN_VALUE]

    def test_range_starting_on_boundary(self) -> None:
        assert alphas_in_range(5 * COIN_VALUE, 5 * COIN_VALUE + 1) == [5 * COIN_VALUE]

    def test_zero_is_alpha(self) -> None:
        assert alphas_in_range(0, 3 * COIN_VALUE) == [0, COIN_VALUE, 2 * COIN_VALUE]

    def test_end_is_exclusive(self) -> None:
        assert alphas_in_range(1, COIN_VALUE) == []

    def test_ascending(self) -> None:
        alphas = alphas_in_range(7, 50 * COIN_VALUE)
        assert alphas == sorted(alphas)
        assert len(alphas) == 49


class TestOmega:
    def test_straddling_coin_boundary(self) -> None:
        assert omegas_in_range(460 * COIN_VALUE - 10_000, 460 * COIN_VALUE + 10_000) == [460 * COIN_VALUE - 1]

    def test_descending_order(self) -> None:
        assert omegas_in_range(0, 3 * COIN_VALUE) == [
            3 * COIN_VALUE - 1,
            2 * COIN_VALUE - 1,
            COIN_VALUE - 1,
        ]

    def test_range_below_first_omega(self) -> None:
        assert omegas_in_range(1, COIN_VALUE - 1) == []

    def test_single_sat_range(self) -> None:
        assert omegas_in_range(COIN_VALUE - 1, COIN_VALUE) == [COIN_VALUE - 1]


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (0, 1),
        (1, 10 * COIN_VALUE),
        (COIN_VALUE - 1, COIN_VALUE + 1),
        (45_000_000_000, 50_000_000_000),
        (123_456_789, 987_654_321),
    ],
)
def test_boundary_properties(start: int, end: int) -> None:
    for alpha in alphas_in_range(start, end):
        assert alpha % COIN_VALUE == 0
        assert start <= alpha < end
    for omega in omegas_in_range(start, end):
        assert (omega + 1) % COIN_VALUE == 0
        assert start <= omega < end
