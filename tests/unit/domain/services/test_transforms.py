"""Unit tests for the named value transforms."""

import pytest

from cd2_transpiler.domain.exceptions import MalformedInputError
from cd2_transpiler.domain.services.transforms import (
    TRANSFORMS,
    complement,
    flatten_bins,
    get_transform,
    resistance_to_multiplier,
)


class TestResistanceToMultiplier:
    def test_no_float_drift(self):
        """1 - 0.7 is 0.30000000000000004 in binary floating point."""
        assert resistance_to_multiplier(0.7, "PST_FireResistance") == 0.3
        assert resistance_to_multiplier(0.1, "PST_FireResistance") == 0.9

    def test_integers_stay_integers(self):
        result = complement(1)
        assert result == 0
        assert isinstance(result, int)

    def test_per_player_count_values(self):
        assert resistance_to_multiplier([0.25, 0.5], "PST_ColdResistance") == [
            0.75,
            0.5,
        ]

    def test_negative_resistance_increases_damage(self):
        assert resistance_to_multiplier(-0.5, "PST_ColdResistance") == 1.5

    def test_string_is_malformed(self):
        with pytest.raises(MalformedInputError, match=r"PST_ColdResistance\[1\]"):
            resistance_to_multiplier([0.5, "x"], "PST_ColdResistance")


class TestFlattenBins:
    def test_range_wrapper_removed(self):
        value = [
            {"weight": 1, "range": {"min": 2, "max": 3}},
            {"weight": 2, "range": {"min": 4.5, "max": 6}},
        ]
        assert flatten_bins(value, "EnemyDiversity") == [
            {"weight": 1, "min": 2, "max": 3},
            {"weight": 2, "min": 4.5, "max": 6},
        ]

    def test_already_flat_bins_kept(self):
        value = [{"weight": 1, "min": 2, "max": 3}]
        assert flatten_bins(value, "EnemyDiversity") == value

    @pytest.mark.parametrize("value", [5, [1, 2, 3], [], "text", None])
    def test_other_shapes_pass_through(self, value):
        assert flatten_bins(value, "MinPoolSize") == value

    def test_range_and_bounds_together_is_ambiguous(self):
        value = [{"weight": 1, "range": {"min": 2, "max": 3}, "min": 1}]
        with pytest.raises(MalformedInputError, match="both a range and min/max"):
            flatten_bins(value, "EnemyDiversity")

    def test_later_bin_without_weight(self):
        value = [{"weight": 1, "min": 2, "max": 3}, {"min": 2, "max": 3}]
        with pytest.raises(MalformedInputError, match=r"EnemyDiversity\[1\]"):
            flatten_bins(value, "EnemyDiversity")

    def test_missing_bound(self):
        value = [{"weight": 1, "range": {"min": 2}}]
        with pytest.raises(MalformedInputError, match="missing max"):
            flatten_bins(value, "EnemyDiversity")


class TestRegistry:
    def test_known_names(self):
        assert set(TRANSFORMS) == {
            "identity",
            "resistance_to_multiplier",
            "flatten_bins",
        }
        assert get_transform("identity")(3, "x") == 3

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown transform"):
            get_transform("square")
