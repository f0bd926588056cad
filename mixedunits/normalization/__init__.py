"""Detection, conversion and formatting of money amounts."""

from mixedunits.normalization.formatting import format_units
from mixedunits.normalization.normalizer import MoneyNormalizer, detect_kind, to_units

__all__ = [
    "MoneyNormalizer",
    "detect_kind",
    "format_units",
    "to_units",
]
