"""Unit tests for SummaryPresenter."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from cd2_transpiler.application.models import ConvertResponse
from cd2_transpiler.cli.presenters import SummaryPresenter
from cd2_transpiler.domain.entities.conversion import DroppedField
from cd2_transpiler.domain.entities.document import CD2Document, MutatorEntry


class TestSummaryPresenter:
    @pytest.fixture
    def console(self):
        """Create a console with StringIO for capturing output."""
        return Console(file=StringIO(), width=160)

    @pytest.fixture
    def response(self):
        return ConvertResponse(
            source=Path("Hazard6.json"),
            target=Path("Hazard6.cd2.json"),
            document=CD2Document(
                modules={"DifficultySetting": {"Name": "x"}, "Resupply": {"Cost": 80}},
                mutators=[
                    MutatorEntry("StartingNitra", "StartingNitra", 200, "Resupply", "Cost")
                ],
            ),
            dropped=[DroppedField("SeasonalEvents", "document", "inert")],
        )

    def test_summary_table(self, console, response):
        SummaryPresenter(console).present(response)
        output = console.file.getvalue()
        assert "Conversion Summary" in output
        assert "DifficultySetting, Resupply" in output
        assert "StartingNitra" in output
        assert "Converted successfully" in output
        assert "Dropped Fields" not in output

    def test_dropped_table_when_verbose(self, console, response):
        SummaryPresenter(console).present(response, verbose=1)
        assert "Dropped Fields" in console.file.getvalue()

    def test_warning_status(self, console, response):
        response.warnings = ["w1", "w2"]
        SummaryPresenter(console).present(response)
        assert "Converted with 2 warning(s)" in console.file.getvalue()

    def test_failure_status(self, console):
        SummaryPresenter(console).present(
            ConvertResponse(success=False, source=Path("a.json"), error="boom")
        )
        assert "Conversion failed" in console.file.getvalue()
