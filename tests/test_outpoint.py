"""Tests for ownership-reference (outpoint) parsing."""

import pytest

from sat_rarity.domain.errors import MalformedReferenceError
from sat_rarity.domain.outpoint import OutPoint

TXID = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"


class TestOutPointParse:
    def test_valid(self) -> None:
        outpoint = OutPoint.parse(f"{TXID}:0")
        assert outpoint.txid == TXID
        assert outpoint.vout == 0
        assert str(outpoint) == f"{TXID}:0"

    def test_txid_normalised_to_lowercase(self) -> None:
        assert OutPoint.parse(f"{TXID.upper()}:3") == OutPoint(txid=TXID, vout=3)

    def test_max_vout(self) -> None:
        assert OutPoint.parse(f"{TXID}:4294967295").vout == 4294967295

    @pytest.mark.parametrize(
        ("reference", "reason"),
        [
            (TXID, "missing ':' separator"),
            (f"{TXID[:-1]}:0", "txid must be 64 hex characters"),
            (f"{'z' * 64}:0", "txid must be 64 hex characters"),
            (f"{TXID}:", "vout must be a decimal integer"),
            (f"{TXID}:-1", "vout must be a decimal integer"),
            (f"{TXID}:01", "vout has leading zeros"),
            (f"{TXID}:4294967296", "vout out of range"),
        ],
    )
    def test_malformed(self, reference: str, reason: str) -> None:
        with pytest.raises(MalformedReferenceError) as excinfo:
            OutPoint.parse(reference)
        assert excinfo.value.reason == reason
        assert reference in str(excinfo.value)

    def test_outpoint_is_immutable(self) -> None:
        outpoint = OutPoint.parse(f"{TXID}:0")
        with pytest.raises(Exception):
            outpoint.vout = 1
