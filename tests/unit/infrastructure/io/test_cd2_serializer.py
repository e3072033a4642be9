"""Unit tests for the CD2 serializer."""

import json

import pytest

from cd2_transpiler.domain.entities.document import CD1Document, CD2Document
from cd2_transpiler.infrastructure.io.cd2_serializer import (
    document_to_payload,
    serialize,
)


@pytest.fixture
def document(converter, hazard6):
    hazard6["_comment"] = "hand written"
    return converter.convert(CD1Document.from_mapping(hazard6)).document


class TestSerialize:
    def test_pretty_uses_four_space_indent(self, document):
        text = serialize(document)
        assert text.startswith('{\n    "DifficultySetting": {\n        "Name": "Hazard 6"')

    def test_compact_has_no_whitespace(self, document):
        text = serialize(document, pretty=False)
        assert "\n" not in text
        assert '"Name":"Hazard 6"' in text

    def test_pretty_and_compact_carry_same_data(self, document):
        assert json.loads(serialize(document)) == json.loads(
            serialize(document, pretty=False)
        )

    def test_custom_indent(self, document):
        assert serialize(document, indent=2).startswith('{\n  "DifficultySetting"')

    def test_mutator_rendered_in_output(self, document):
        payload = json.loads(serialize(document))
        assert payload["Resupply"]["Cost"] == {
            "Mutate": "ByResuppliesCalled",
            "Values": [0, 0, 40, 80],
        }

    def test_numbers_not_reformatted(self):
        document = CD2Document(modules={"Caps": {"A": 1, "B": 1.0, "C": 0.1}})
        assert serialize(document, pretty=False) == '{"Caps":{"A":1,"B":1.0,"C":0.1}}'

    def test_non_ascii_kept(self):
        document = CD2Document(modules={"DifficultySetting": {"Name": "Häzard"}})
        assert "Häzard" in serialize(document)

    def test_extensions_after_modules(self, document):
        assert list(document_to_payload(document))[-1] == "_comment"


class TestRawMultilineDescription:
    def test_escaped_by_default(self, document):
        assert '"Description": "Line1\\nLine2"' in serialize(document)

    def test_raw_line_breaks(self, document):
        text = serialize(document, raw_multiline_description=True)
        assert '"Description": "Line1\nLine2"' in text
        assert json.loads(text, strict=False) == json.loads(serialize(document))

    def test_raw_line_breaks_compact(self, document):
        text = serialize(document, pretty=False, raw_multiline_description=True)
        assert '"Description":"Line1\nLine2"' in text

    def test_escaped_backslash_before_n_untouched(self):
        document = CD2Document(
            modules={"DifficultySetting": {"Description": "C:\\new\nline"}}
        )
        text = serialize(document, raw_multiline_description=True)
        assert '"C:\\\\new\nline"' in text
        assert json.loads(text, strict=False) == {
            "DifficultySetting": {"Description": "C:\\new\nline"}
        }
