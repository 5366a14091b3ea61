"""Tests for palindrome enumeration and the palinception refinements."""

import pytest

from sat_rarity.core.palindrome import (
    is_palindrome,
    is_perfect_palinception,
    is_uniform_palinception,
    palindromes_in_range,
)


def _brute_force(lo: int, hi: int) -> list[int]:
    return [n for n in range(lo, hi + 1) if str(n) == str(n)[::-1]]


class TestIsPalindrome:
    def test_long_palindrome(self) -> None:
        assert is_palindrome(164114646411461)

    def test_long_non_palindrome(self) -> None:
        assert not is_palindrome(164114646411462)

    def test_single_digits_and_zero(self) -> None:
        assert all(is_palindrome(n) for n in range(10))

    def test_trailing_zero_is_not_palindrome(self) -> None:
        assert not is_palindrome(10)
        assert not is_palindrome(1210)

    def test_matches_string_reversal(self) -> None:
        for n in range(0, 20_000, 7):
            assert is_palindrome(n) == (str(n) == str(n)[::-1])


class TestPalindromesInRange:
    def test_one_to_three_digits(self) -> None:
        palindromes = palindromes_in_range(1, 999)
        assert palindromes[:10] == [1, 2, 3, 4, 5, 6, 7, 8, 9, 11]
        assert palindromes[-3:] == [979, 989, 999]
        assert len(palindromes) == 9 + 9 + 90

    def test_single_match_inside_fourteen_digits(self) -> None:
        assert palindromes_in_range(31535155000000, 31535156000000) == [31535155153513]

    def test_crossing_digit_length(self) -> None:
        assert palindromes_in_range(19999999999999, 20000000999999) == [20000000000002]

    def test_no_match(self) -> None:
        assert palindromes_in_range(31535156000000, 31535157000000) == []

    def test_single_value_ranges(self) -> None:
        assert palindromes_in_range(0, 0) == [0]
        assert palindromes_in_range(5, 5) == [5]
        assert palindromes_in_range(10, 10) == []

    def test_boundary_prefix_excluded_when_mirror_falls_outside(self) -> None:
        # Prefix 12 mirrors to 1221, which is below 1230.
        assert palindromes_in_range(1230, 1299) == []
        assert palindromes_in_range(1221, 1299) == [1221]

    @pytest.mark.parametrize(
        ("start", "end"),
        [
            (0, 10_000),
            (9_990, 10_100),
            (99_950, 100_050),
            (123_456, 133_456),
            (1_234_567, 1_244_567),
            (9_995_000, 10_000_000),
            (9_999_999, 10_009_999),
        ],
    )
    def test_matches_brute_force(self, start: int, end: int) -> None:
        assert palindromes_in_range(start, end - 1) == _brute_force(start, end - 1)

    def test_output_strictly_ascending_across_lengths(self) -> None:
        palindromes = palindromes_in_range(1, 10**6)
        assert len(palindromes) == 9 + 9 + 90 + 90 + 900 + 900
        assert all(a < b for a, b in zip(palindromes, palindromes[1:]))

    def test_wide_range_is_not_iterated(self) -> None:
        lo, hi = 10**14, 10**14 + 10**12
        palindromes = palindromes_in_range(lo, hi)
        assert len(palindromes) == 100_000
        assert palindromes[0] == 100000000000001
        assert all(lo <= p <= hi for p in palindromes)
        assert all(a < b for a, b in zip(palindromes, palindromes[1:]))

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            palindromes_in_range(10, 9)

    def test_negative_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            palindromes_in_range(-5, 9)


class TestPalinception:
    def test_three_palindromic_segments_are_uniform(self) -> None:
        assert is_uniform_palinception("400041111140004")
        assert not is_perfect_palinception("400041111140004")

    def test_repeated_segment_is_perfect_and_uniform(self) -> None:
        assert is_perfect_palinception("76858677685867")
        assert is_uniform_palinception("76858677685867")

    def test_plain_palindrome_is_neither(self) -> None:
        assert not is_uniform_palinception("31535155153513")
        assert not is_perfect_palinception("31535155153513")

    def test_short_palindromes_are_neither(self) -> None:
        for s in ("1", "11", "121"):
            assert not is_uniform_palinception(s)
            assert not is_perfect_palinception(s)

    def test_repdigit(self) -> None:
        assert is_perfect_palinception("1111")
        assert is_uniform_palinception("1111")

    def test_non_palindrome_rejected(self) -> None:
        # Both halves are palindromes but the whole is not.
        assert not is_uniform_palinception("1122")
        assert not is_perfect_palinception("1122")
