"""
Console display tests: rendered into a recording rich Console.
"""
from unittest.mock import patch

import pytest
from rich.console import Console

from legislate_core.citations import Linked, PlainText
from legislate_core.inputs import BillDetails
from legislate_core.models import BillComparisonOutput, DetailedSECBillAnalysisOutput, SummarizeBillOutput
from legislate_core.pipeline import ProcessResult
from legislate_core.reports import display_result
from legislate_core.reports.display import linked_text, spans_to_text


@pytest.fixture
def recording_console():
    console = Console(record=True, width=200)
    with patch("legislate_core.reports.display.console", console):
        yield console


class TestSpansToText:

    def test_links_carry_url(self):
        text = spans_to_text([PlainText("See "), Linked("HB 1", "https://example.test/hb1")])

        assert text.plain == "See HB 1"
        (span,) = text.spans
        assert span.start == 4
        assert span.style.link == "https://example.test/hb1"

    def test_linked_text_list_and_blank(self):
        assert linked_text(["a", "b"]).plain == "• a\n• b"
        assert linked_text("").plain == "N/A"
        assert linked_text([]).plain == "N/A"


class TestDisplayResult:

    def test_detailed_analysis_panels(self, recording_console, detailed_analysis_response):
        result = ProcessResult(
            mode="DETAILED_ANALYSIS",
            bill1=BillDetails(congress="19", number="SBN-1234"),
            bill2=BillDetails(),
            detailed_analysis=DetailedSECBillAnalysisOutput.model_validate(detailed_analysis_response),
        )
        display_result(result)
        output = recording_console.export_text()

        assert "An Act Regulating Digital Asset Service Providers" in output
        assert "Part 7: Recommendations & Further Questions" in output
        assert "Key Questions for SEC Investigation" in output

    def test_summary_panel(self, recording_console):
        result = ProcessResult(
            mode="SUMMARY",
            keyword="tax",
            bill1=BillDetails(title='Bill matching "tax" (Keyword: tax)', text="T"),
            bill2=BillDetails(),
            bill1_summary=SummarizeBillOutput(summary="Raises excise taxes under RA 10963."),
        )
        display_result(result)
        output = recording_console.export_text()

        assert "Raises excise taxes under RA 10963." in output
        assert "Keyword Search Result" in output
        assert "House Version" not in output


class TestBracketedText:

    def test_comment_and_title_with_brackets(self, recording_console, comparison_response):
        result = ProcessResult(
            mode="COMPARISON",
            bill1=BillDetails(title="Senate [Version] of the Act", text="S"),
            bill2=BillDetails(title="House [/b] Version", text="H"),
            bill1_summary=SummarizeBillOutput(summary="Summary one."),
            bill2_summary=SummarizeBillOutput(summary="Summary two."),
            comparison=BillComparisonOutput.model_validate(comparison_response),
            comment_bill1="See section [/] of the Act",
            comment_bill2="Refer to [bold]Section 4[/bold] verbatim",
        )
        display_result(result)
        output = recording_console.export_text()

        assert "See section [/] of the Act" in output
        assert "Refer to [bold]Section 4[/bold] verbatim" in output
        assert "Senate [Version] of the Act" in output
        assert "House [/b] Version" in output
