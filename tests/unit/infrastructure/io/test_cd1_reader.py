"""Unit tests for the CD1 JSON reader."""

import pytest

from cd2_transpiler.domain.exceptions import MalformedInputError
from cd2_transpiler.infrastructure.io.cd1_reader import parse_cd1


class TestParseCD1:
    def test_parses_object(self):
        document = parse_cd1('{"Name": "Hazard 6", "StartingNitra": 200}')
        assert document.get("Name") == "Hazard 6"
        assert document.get("StartingNitra") == 200
        assert len(document) == 2

    def test_literal_line_break_in_description(self):
        """The game writes multiline descriptions with raw line breaks."""
        document = parse_cd1('{"Name": "x", "Description": "Line1\nLine2"}')
        assert document.get("Description") == "Line1\nLine2"
        assert document.literal_line_breaks

    def test_escaped_line_break_in_description(self):
        document = parse_cd1('{"Name": "x", "Description": "Line1\\nLine2"}')
        assert document.get("Description") == "Line1\nLine2"
        assert not document.literal_line_breaks

    def test_literal_break_outside_description(self):
        document = parse_cd1('{"Name": "x", "Description": "d", "_note": "a\nb"}')
        assert not document.literal_line_breaks

    def test_byte_order_mark_ignored(self):
        assert parse_cd1('\ufeff{"Name": "x"}').get("Name") == "x"

    def test_invalid_json(self):
        with pytest.raises(MalformedInputError, match="Is it a proper JSON"):
            parse_cd1('{"Name": "x",}')

    def test_duplicate_keys(self):
        with pytest.raises(MalformedInputError, match=r"Duplicate key \[Name\]"):
            parse_cd1('{"Name": "x", "Name": "y"}')

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_numbers(self, constant):
        with pytest.raises(MalformedInputError, match="Non-finite"):
            parse_cd1(f'{{"Name": "x", "StartingNitra": {constant}}}')

    def test_top_level_must_be_object(self):
        with pytest.raises(MalformedInputError, match="must be a JSON object"):
            parse_cd1("[1, 2]")

    def test_document_is_read_only(self):
        document = parse_cd1('{"Name": "x"}')
        with pytest.raises(TypeError):
            document.fields["Name"] = "y"  # type: ignore[index]
