"""Input parsing for Mixed Units."""

from mixedunits.parsing.json_input import parse_input
from mixedunits.parsing.numeric import leading_float, leading_int, value_text

__all__ = [
    "leading_float",
    "leading_int",
    "parse_input",
    "value_text",
]
