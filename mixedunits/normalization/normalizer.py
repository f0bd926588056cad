"""Mixed-unit money normalizer.

Each value is classified by the text it is written as: anything containing
a decimal point is a major-unit amount (dollars) and is scaled to minor
units; anything else is already a minor-unit amount (cents) and is taken
as-is.
"""

import logging
import math
from collections.abc import Mapping
from decimal import ROUND_FLOOR, Decimal
from typing import Any

from pydantic import ValidationError

from mixedunits.config import MINOR_UNITS_PER_MAJOR
from mixedunits.exceptions import InvalidValueError
from mixedunits.models.entries import NormalizedEntry, RawEntry
from mixedunits.models.enums import DetectedKind
from mixedunits.normalization.formatting import format_units
from mixedunits.parsing.json_input import OversizedInteger, parse_input
from mixedunits.parsing.numeric import leading_float, leading_int, value_text

logger = logging.getLogger(__name__)

_HALF = Decimal("0.5")


def detect_kind(text: str) -> DetectedKind:
    """Classify a value by the presence of a decimal point in its text."""
    if "." in text:
        return DetectedKind.DECIMAL
    return DetectedKind.SMALLEST_UNIT


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    ``12.5`` rounds to 13 and ``-12.5`` to -12. The float is converted to
    Decimal exactly, so ``0.49999999999999994`` still rounds to 0.
    """
    if value.is_integer():
        return int(value)
    return int((Decimal(value) + _HALF).to_integral_value(rounding=ROUND_FLOOR))


def to_units(text: str, kind: DetectedKind) -> int | None:
    """Convert a value's text to minor units. Returns None if unreadable."""
    if kind == DetectedKind.DECIMAL:
        amount = leading_float(text)
        if amount is None:
            return None
        # Scaling happens in binary floating point: "1.005" yields 100
        scaled = amount * MINOR_UNITS_PER_MAJOR
        if not math.isfinite(scaled):
            return None
        return round_half_up(scaled)
    return leading_int(text)


class MoneyNormalizer:
    """Converts a mapping of mixed-representation amounts to minor units."""

    def convert(self, text: str | bytes) -> list[NormalizedEntry]:
        """Parse a JSON object buffer and normalize every entry.

        Raises MalformedInputError for unparseable input and
        InvalidValueError for the first unreadable value; no partial
        result is returned in either case.
        """
        return self.normalize(parse_input(text))

    def normalize(self, data: Mapping[str, Any]) -> list[NormalizedEntry]:
        """Normalize every entry of *data*, preserving its iteration order."""
        entries = [self.normalize_entry(self._to_raw_entry(key, value)) for key, value in data.items()]
        logger.info("Normalized %d entries", len(entries))
        return entries

    def normalize_entry(self, entry: RawEntry) -> NormalizedEntry:
        """Detect, convert and format a single entry."""
        text = value_text(entry.value)
        kind = detect_kind(text)
        units = to_units(text, kind)
        if units is None:
            raise InvalidValueError(entry.key, entry.value, f"no finite numeric amount in {text!r}")

        logger.debug("%s: %r detected as %s -> %d units", entry.key, text, kind.value, units)
        return NormalizedEntry(
            key=entry.key,
            detected_kind=kind,
            units=units,
            formatted=format_units(units),
        )

    @staticmethod
    def _to_raw_entry(key: str, value: Any) -> RawEntry:
        if isinstance(value, OversizedInteger):
            raise InvalidValueError(
                key, value, f"integer literal with {len(value.literal)} characters is too long"
            )
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidValueError(key, value, "number literal overflows to infinity")
        try:
            return RawEntry(key=key, value=value)
        except ValidationError as exc:
            raise InvalidValueError(
                key, value, f"expected a number or string, got {type(value).__name__}"
            ) from exc
