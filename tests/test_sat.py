"""Tests for sat metadata derivation and the rarity enumerations."""

import pytest

from sat_rarity.domain.enums import NamedRarity, RarityKind
from sat_rarity.domain.errors import UnknownRarityError
from sat_rarity.domain.sat import Sat
from sat_rarity.foundation.constants import COIN_VALUE, EPOCH_STARTING_SATS, SUPPLY


class TestSchedule:
    def test_supply(self) -> None:
        assert SUPPLY == 2_099_999_997_690_000

    def test_first_sat(self) -> None:
        sat = Sat(0)
        assert sat.height == 0
        assert sat.third == 0
        assert sat.epoch == 0

    def test_block_boundaries(self) -> None:
        assert Sat(50 * COIN_VALUE - 1).height == 0
        assert Sat(50 * COIN_VALUE).height == 1
        assert Sat(50 * COIN_VALUE + 7).third == 7

    def test_second_epoch_halves_subsidy(self) -> None:
        start = EPOCH_STARTING_SATS[1]
        assert Sat(start).height == 210_000
        assert Sat(start + 25 * COIN_VALUE).height == 210_001
        assert Sat(start + 25 * COIN_VALUE - 1).third == 25 * COIN_VALUE - 1

    def test_last_sat(self) -> None:
        sat = Sat(SUPPLY - 1)
        assert sat.epoch == 32
        assert sat.name == "a"

    def test_out_of_supply_rejected(self) -> None:
        with pytest.raises(ValueError):
            Sat(SUPPLY)
        with pytest.raises(ValueError):
            Sat(-1)


class TestMetadata:
    def test_genesis_sat(self) -> None:
        metadata = Sat(0).metadata()
        assert metadata.decimal == "0.0"
        assert metadata.degree == "0°0′0″0‴"
        assert metadata.name == "nvtdijuwxlp"
        assert metadata.rarity == NamedRarity.MYTHIC
        assert metadata.offset == 0

    def test_uncommon(self) -> None:
        sat = Sat(50 * COIN_VALUE)
        assert str(sat.degree) == "0°1′1″0‴"
        assert sat.rarity == NamedRarity.UNCOMMON

    def test_common(self) -> None:
        assert Sat(1).rarity == NamedRarity.COMMON
        assert Sat(1).decimal == "0.1"

    def test_rare_at_difficulty_adjustment(self) -> None:
        sat = Sat(2016 * 50 * COIN_VALUE)
        assert sat.rarity == NamedRarity.RARE
        assert sat.period == 1

    def test_epic_at_halving(self) -> None:
        sat = Sat(EPOCH_STARTING_SATS[1])
        assert sat.rarity == NamedRarity.EPIC
        assert sat.epoch == 1

    def test_legendary_at_cycle_start(self) -> None:
        sat = Sat(EPOCH_STARTING_SATS[6])
        assert sat.height == 1_260_000
        assert sat.cycle == 1
        assert sat.rarity == NamedRarity.LEGENDARY
        assert str(sat.degree) == "1°0′0″0‴"


class TestEnums:
    @pytest.mark.parametrize("kind", list(RarityKind))
    def test_token_round_trip(self, kind: RarityKind) -> None:
        assert RarityKind.parse(str(kind)) is kind

    def test_tokens_are_lowercase(self) -> None:
        assert all(kind.value == kind.value.lower() for kind in RarityKind)
        assert RarityKind.FIRST_TRANSACTION.value == "firsttransaction"

    @pytest.mark.parametrize("token", ["abc", "", "Vintage", "jpeg", "legacy", "hitman", "taproot"])
    def test_unknown_token_rejected(self, token: str) -> None:
        with pytest.raises(UnknownRarityError, match="invalid rarity"):
            RarityKind.parse(token)

    def test_closed_kind_set_in_evaluation_order(self) -> None:
        assert [kind.value for kind in RarityKind] == [
            "vintage", "nakamoto", "block9", "block9_450", "block78",
            "firsttransaction", "pizza", "palindrome", "perfect_palinception",
            "uniform_palinception", "paliblock_palindrome", "alpha", "omega",
            "block286", "block666",
        ]

    def test_unknown_token_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            RarityKind.parse("abc")

    def test_named_rarity_order(self) -> None:
        assert NamedRarity.COMMON < NamedRarity.UNCOMMON < NamedRarity.RARE
        assert NamedRarity.MYTHIC > NamedRarity.LEGENDARY > NamedRarity.EPIC
        assert max(NamedRarity) is NamedRarity.MYTHIC
        assert NamedRarity.RARE <= NamedRarity.RARE <= NamedRarity.EPIC
        assert NamedRarity.EPIC >= NamedRarity.EPIC >= NamedRarity.COMMON
