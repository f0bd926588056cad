"""Data models for Mixed Units."""

from mixedunits.models.entries import NormalizedEntry, RawEntry
from mixedunits.models.enums import DetectedKind, ReportFormat

__all__ = [
    "DetectedKind",
    "NormalizedEntry",
    "RawEntry",
    "ReportFormat",
]
