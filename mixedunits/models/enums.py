"""Enumerations for Mixed Units."""

from enum import StrEnum


class DetectedKind(StrEnum):
    DECIMAL = "DECIMAL"
    SMALLEST_UNIT = "SMALLEST_UNIT"

    @property
    def label(self) -> str:
        """Human-readable label shown next to each converted amount."""
        return _KIND_LABELS[self]


_KIND_LABELS: dict[DetectedKind, str] = {
    DetectedKind.DECIMAL: "Decimal (Converted)",
    DetectedKind.SMALLEST_UNIT: "Smallest Unit (Raw)",
}


class ReportFormat(StrEnum):
    TXT = "txt"
    HTML = "html"
