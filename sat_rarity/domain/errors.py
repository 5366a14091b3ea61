"""Error taxonomy for rarity queries.

Every error here is terminal for the enclosing request.  The RPC layer
reports all of them as a single "invalid params" category.
"""

from __future__ import annotations


class SatRarityError(Exception):
    """Base class for all domain errors surfaced to callers."""


class MalformedReferenceError(SatRarityError):
    """Raised when an ownership reference does not parse as an outpoint."""

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"invalid outpoint '{reference}': {reason}")


class RangeClassificationError(SatRarityError):
    """Raised when a query range is empty, inverted, or spans two blocks."""


class UnknownRarityError(SatRarityError, ValueError):
    """Raised when a rarity token is not part of the fixed set."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid rarity: {token}")


class UnknownReferenceError(SatRarityError):
    """Raised by the index when it has no record of a reference."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"output not found: {reference}")


class SatIndexUnavailableError(SatRarityError):
    """Raised when the index was built without sat ranges."""

    def __init__(self) -> None:
        super().__init__("Sat index is not available")


class CollaboratorError(SatRarityError):
    """Raised when the index fails while resolving a reference."""

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"index lookup failed for {reference}: {reason}")
