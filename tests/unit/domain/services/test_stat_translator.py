"""Unit tests for PawnStats → stat module translation."""

import pytest

from cd2_transpiler.domain.entities.conversion import ConversionContext
from cd2_transpiler.domain.exceptions import MalformedInputError, UnknownFieldError
from cd2_transpiler.domain.services.stat_translator import StatModuleTranslator


@pytest.fixture
def translator(mapping_table):
    return StatModuleTranslator(mapping_table)


class TestStatModuleTranslator:
    def test_stats_grouped_into_modules(self, translator):
        context = ConversionContext()
        modules = translator.translate(
            {
                "PST_MaxHealth": 2,
                "PST_MovementSpeed": 1.2,
                "PST_FireResistance": 0.7,
                "PST_DamageResistance": 0.5,
            },
            context,
            location="document",
        )
        assert [m.name for m in modules] == ["Movement", "Resistances", "Health"]
        by_name = {m.name: m.stats for m in modules}
        assert by_name["Movement"] == {"MoveSpeed": 1.2}
        assert by_name["Resistances"] == {
            "DamageResistance": 0.5,
            "FireDamageMultiplier": 0.3,
        }
        assert by_name["Health"] == {"MaxHealth": 2}

    def test_every_stat_lands_in_exactly_one_module(self, translator, mapping_table):
        stats = {
            stat.source: 0.5 for stat in mapping_table.pawn_stats if not stat.alias_of
        }
        modules = translator.translate(stats, ConversionContext(), location="document")
        assert sum(len(m) for m in modules) == len(stats)

    def test_newer_alias_accepted(self, translator):
        modules = translator.translate(
            {"MoveSpeed": 1.1}, ConversionContext(), location="document"
        )
        assert modules[0].name == "Movement"
        assert modules[0].stats == {"MoveSpeed": 1.1}

    def test_old_name_and_alias_together_rejected(self, translator):
        with pytest.raises(MalformedInputError, match="both set Movement.MoveSpeed"):
            translator.translate(
                {"PST_MovementSpeed": 1.0, "MoveSpeed": 1.1},
                ConversionContext(),
                location="document",
            )

    def test_conflict_with_pregrouped_module(self, translator):
        with pytest.raises(MalformedInputError, match="Movement.MoveSpeed"):
            translator.translate(
                {"PST_MovementSpeed": 1.0},
                ConversionContext(),
                location="document",
                pregrouped={"Movement": {"MoveSpeed": 2.0}},
            )

    def test_pregrouped_module_merged(self, translator):
        modules = translator.translate(
            {"PST_RotationRate": 3},
            ConversionContext(),
            location="document",
            pregrouped={"Movement": {"MoveSpeed": 2.0}},
        )
        assert modules[0].stats == {"MoveSpeed": 2.0, "RotationRate": 3}

    def test_pregrouped_unknown_stat_warns_in_lenient_mode(self, translator):
        context = ConversionContext()
        modules = translator.translate(
            None,
            context,
            location="document",
            pregrouped={"Movement": {"MoveSpeed": 2.0, "MoveSpeedd": 1.0}},
        )
        assert modules[0].stats == {"MoveSpeed": 2.0}
        assert context.warnings == [
            "Unsupported field: [MoveSpeedd] in document.Movement. Dropping."
        ]

    def test_pregrouped_unknown_stat_fails_in_strict_mode(self, translator):
        with pytest.raises(UnknownFieldError) as excinfo:
            translator.translate(
                None,
                ConversionContext(strict=True),
                location="document",
                pregrouped={"Movement": {"MoveSpeedd": 1.0}},
            )
        assert excinfo.value.field == "MoveSpeedd"

    @pytest.mark.parametrize("value", ["fast", {"x": 1}, [1, "2"], True])
    def test_pregrouped_non_numeric_stat(self, translator, value):
        with pytest.raises(
            MalformedInputError, match="document.Movement.MoveSpeed must be a number"
        ):
            translator.translate(
                None,
                ConversionContext(),
                location="document",
                pregrouped={"Movement": {"MoveSpeed": value}},
            )

    def test_unknown_stat_warns_in_lenient_mode(self, translator):
        context = ConversionContext()
        modules = translator.translate(
            {"PST_Luck": 1, "PST_MaxHealth": 3}, context, location="document"
        )
        assert [m.name for m in modules] == ["Health"]
        assert context.warnings == [
            "Unsupported field: [PST_Luck] in document.PawnStats. Dropping."
        ]

    def test_unknown_stat_fails_in_strict_mode(self, translator):
        with pytest.raises(UnknownFieldError) as excinfo:
            translator.translate(
                {"PST_Luck": 1}, ConversionContext(strict=True), location="document"
            )
        assert excinfo.value.field == "PST_Luck"

    def test_non_numeric_stat(self, translator):
        with pytest.raises(MalformedInputError, match="PST_MaxHealth must be a number"):
            translator.translate(
                {"PST_MaxHealth": "lots"}, ConversionContext(), location="document"
            )

    def test_absent_block(self, translator):
        assert translator.translate(None, ConversionContext(), location="document") == []
