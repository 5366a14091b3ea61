"""Controlled enumerations for the sat-rarity domain.

Every categorical field in the domain MUST reference an enum defined here.
Free-form strings are not acceptable for classification fields.
"""

from __future__ import annotations

from enum import Enum

from sat_rarity.domain.errors import UnknownRarityError


class RarityKind(str, Enum):
    """Positional rarity kinds reported per sat range.

    Declaration order is the fixed report order used by the
    RarityReportBuilder.
    """

    VINTAGE = "vintage"
    NAKAMOTO = "nakamoto"
    BLOCK9 = "block9"
    BLOCK9_450 = "block9_450"
    BLOCK78 = "block78"
    FIRST_TRANSACTION = "firsttransaction"
    PIZZA = "pizza"
    PALINDROME = "palindrome"
    PERFECT_PALINCEPTION = "perfect_palinception"
    UNIFORM_PALINCEPTION = "uniform_palinception"
    PALIBLOCK_PALINDROME = "paliblock_palindrome"
    ALPHA = "alpha"
    OMEGA = "omega"
    BLOCK286 = "block286"
    BLOCK666 = "block666"

    @classmethod
    def parse(cls, token: str) -> RarityKind:
        """Strict token lookup; raises UnknownRarityError for anything else."""
        try:
            return cls(token)
        except ValueError:
            raise UnknownRarityError(token) from None

    def __str__(self) -> str:
        return self.value


_NAMED_RARITY_RANK = {
    "common": 0,
    "uncommon": 1,
    "rare": 2,
    "epic": 3,
    "legendary": 4,
    "mythic": 5,
}


class NamedRarity(str, Enum):
    """Coarse rarity derived from a sat's degree (position in the schedule)."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"

    @property
    def rank(self) -> int:
        return _NAMED_RARITY_RANK[self.value]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NamedRarity):
            return NotImplemented
        return self.rank < other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NamedRarity):
            return NotImplemented
        return self.rank > other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NamedRarity):
            return NotImplemented
        return self.rank <= other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NamedRarity):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value
