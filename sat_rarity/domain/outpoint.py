"""OutPoint — the ownership reference accepted by range queries.

Format: ``<txid>:<vout>`` where txid is 64 hex characters and vout is a
decimal unsigned 32-bit integer.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from sat_rarity.domain.errors import MalformedReferenceError

_TXID_RE = re.compile(r"^[0-9a-fA-F]{64}$")
_MAX_VOUT = 2**32 - 1


class OutPoint(BaseModel):
    """A transaction output: txid plus output index."""

    txid: str
    vout: int

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, reference: str) -> OutPoint:
        """Parse *reference* or raise MalformedReferenceError."""
        txid, sep, vout = reference.partition(":")
        if not sep:
            raise MalformedReferenceError(reference, "missing ':' separator")
        if not _TXID_RE.match(txid):
            raise MalformedReferenceError(reference, "txid must be 64 hex characters")
        if not vout.isdigit() or not vout.isascii():
            raise MalformedReferenceError(reference, "vout must be a decimal integer")
        if len(vout) > 1 and vout.startswith("0"):
            raise MalformedReferenceError(reference, "vout has leading zeros")
        index = int(vout)
        if index > _MAX_VOUT:
            raise MalformedReferenceError(reference, "vout out of range")
        return cls(txid=txid.lower(), vout=index)

    def __str__(self) -> str:
        return f"{self.txid}:{self.vout}"
