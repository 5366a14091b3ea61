"""Whole-coin boundary sats (alpha and omega).

An alpha sat is the first sat of a whole coin (``n % COIN_VALUE == 0``),
an omega sat the last one (``(n + 1) % COIN_VALUE == 0``).  Both
enumerators take a half-open ``[start, end)`` range.
"""

from __future__ import annotations

from sat_rarity.foundation.constants import COIN_VALUE


def alphas_in_range(start: int, end: int, unit: int = COIN_VALUE) -> list[int]:
    """Alpha sats in ``[start, end)``, ascending."""
    alphas: list[int] = []
    alpha = -(-start // unit) * unit
    while alpha < end:
        alphas.append(alpha)
        alpha += unit
    return alphas


def omegas_in_range(start: int, end: int, unit: int = COIN_VALUE) -> list[int]:
    """Omega sats in ``[start, end)``, descending (walked back from *end*)."""
    omegas: list[int] = []
    omega = end // unit * unit - 1
    while omega >= start:
        omegas.append(omega)
        omega -= unit
    return omegas
