from sat_rarity.domain.enums import NamedRarity, RarityKind
from sat_rarity.domain.outpoint import OutPoint
from sat_rarity.domain.report import QueryRange, RangeQueryResponse, RarityChunks
from sat_rarity.domain.sat import Sat, SatMetadata

__all__ = [
    "NamedRarity",
    "RarityKind",
    "OutPoint",
    "QueryRange",
    "RangeQueryResponse",
    "RarityChunks",
    "Sat",
    "SatMetadata",
]
