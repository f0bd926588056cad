"""Tests for results report generation."""

from mixedunits.models.entries import NormalizedEntry
from mixedunits.models.enums import DetectedKind, ReportFormat
from mixedunits.reports.results_report import ResultsReportGenerator


class TestResultsReportGenerator:
    def test_text_report(self, sample_entries: list[NormalizedEntry]):
        content = ResultsReportGenerator().render(sample_entries)
        assert "CONVERTED AMOUNTS (USD)" in content
        assert "example_1" in content
        assert "Decimal (Converted)" in content
        assert "$343.43" in content
        assert "34343 units" in content
        assert "2 entries" in content

    def test_text_report_preserves_order(self, sample_entries: list[NormalizedEntry]):
        content = ResultsReportGenerator().render(sample_entries)
        assert content.index("example_1") < content.index("example_3")

    def test_text_report_empty(self):
        content = ResultsReportGenerator().render([])
        assert "No entries." in content

    def test_html_report(self, sample_entries: list[NormalizedEntry]):
        content = ResultsReportGenerator().render(sample_entries, ReportFormat.HTML)
        assert content.startswith("<!DOCTYPE html>")
        assert "Detected: Smallest Unit (Raw)" in content
        assert "$0.45" in content
        assert "45 units" in content

    def test_html_report_escapes_keys(self):
        entry = NormalizedEntry(
            key="<script>alert(1)</script>",
            detected_kind=DetectedKind.SMALLEST_UNIT,
            units=1,
            formatted="$0.01",
        )
        content = ResultsReportGenerator().render([entry], ReportFormat.HTML)
        assert "<script>" not in content
        assert "&lt;script&gt;" in content
