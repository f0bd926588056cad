"""Report generation for Mixed Units."""

from mixedunits.reports.results_report import ResultsReportGenerator

__all__ = [
    "ResultsReportGenerator",
]
