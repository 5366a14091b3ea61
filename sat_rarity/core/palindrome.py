"""Palindrome enumeration without per-value iteration.

A palindrome of ``L`` decimal digits is fully determined by its first
``ceil(L / 2)`` digits: the rest mirrors that prefix, dropping the middle
digit when ``L`` is odd.  Enumerating the palindromes of ``[lo, hi]``
therefore only walks the prefixes, so the cost grows with the number of
digits plus the number of matches, not with ``hi - lo``.

Algorithm:
    1. Split ``[lo, hi]`` into maximal sub-ranges of constant digit length.
    2. For a sub-range ``[a, b]`` let ``A`` and ``B`` be the prefixes of
       ``a`` and ``b``.  Every prefix strictly between them mirrors into a
       palindrome inside ``[a, b]``.  The boundary prefixes ``A`` and ``B``
       are mirrored and kept only when the result lands inside ``[a, b]``.
    3. Sub-ranges are visited in ascending length order, so the
       concatenated output is strictly ascending.
"""

from __future__ import annotations

from collections.abc import Iterator


def is_palindrome(n: int) -> bool:
    """True iff the decimal form of *n* reads the same in both directions."""
    s = str(n)
    return s == s[::-1]


def _is_palindrome_str(s: str) -> bool:
    return s == s[::-1]


def _palindromic_splits(s: str) -> Iterator[list[str]]:
    """Yield every split of *s* into 2+ equal segments of 2+ digits, all palindromes."""
    length = len(s)
    for width in range(2, length // 2 + 1):
        if length % width:
            continue
        segments = [s[i:i + width] for i in range(0, length, width)]
        if all(_is_palindrome_str(segment) for segment in segments):
            yield segments


def is_uniform_palinception(s: str) -> bool:
    """A palindrome built from equal-width palindromic segments.

    ``400041111140004`` qualifies as ``40004 11111 40004``.
    """
    if not _is_palindrome_str(s):
        return False
    return any(True for _ in _palindromic_splits(s))


def is_perfect_palinception(s: str) -> bool:
    """A uniform palinception whose segments are all the same palindrome.

    ``76858677685867`` qualifies as ``7685867 7685867``.
    """
    if not _is_palindrome_str(s):
        return False
    return any(len(set(segments)) == 1 for segments in _palindromic_splits(s))


# ── Enumeration ─────────────────────────────────────────────────────────────


def _equal_length_ranges(lo: int, hi: int) -> list[tuple[int, int]]:
    lo_len, hi_len = len(str(lo)), len(str(hi))
    if lo_len == hi_len:
        return [(lo, hi)]
    ranges = [(lo, 10**lo_len - 1)]
    for length in range(lo_len + 1, hi_len):
        ranges.append((10 ** (length - 1), 10**length - 1))
    ranges.append((10 ** (hi_len - 1), hi))
    return ranges


def _mirror(prefix: int, length: int) -> int:
    digits = str(prefix)
    return int(digits + digits[::-1][length % 2:])


def _palindromes_of_length(a: int, b: int) -> list[int]:
    a_digits, b_digits = str(a), str(b)
    length = len(a_digits)
    half = (length + 1) // 2
    first, last = int(a_digits[:half]), int(b_digits[:half])

    palindromes: list[int] = []
    candidate = _mirror(first, length)
    if a <= candidate <= b:
        palindromes.append(candidate)
    palindromes.extend(_mirror(prefix, length) for prefix in range(first + 1, last))
    if last != first:
        candidate = _mirror(last, length)
        if a <= candidate <= b:
            palindromes.append(candidate)
    return palindromes


def palindromes_in_range(lo: int, hi: int) -> list[int]:
    """All palindromic integers in the inclusive range ``[lo, hi]``, ascending.

    Raises:
        ValueError: If ``lo`` is negative or greater than ``hi``.
    """
    if lo < 0 or lo > hi:
        raise ValueError(f"invalid palindrome range [{lo}, {hi}]")
    palindromes: list[int] = []
    for a, b in _equal_length_ranges(lo, hi):
        palindromes.extend(_palindromes_of_length(a, b))
    return palindromes
