"""Textual forms of amount values and lenient leading-number parsing.

The detection rule looks only at the text of a value, so numbers must be
rendered the same way a browser renders them: ``1.0`` becomes ``"1"`` and
``1e-7`` becomes ``"1e-7"``. Parsing reads the longest numeric prefix and
ignores whatever follows it.
"""

import math
import re
from decimal import Decimal

# Plain notation is used for magnitudes in [1e-6, 1e21); exponent form otherwise
_FIXED_NOTATION_MIN = 1e-6
_FIXED_NOTATION_MAX = 1e21

_LEADING_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_LEADING_HEX = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]+)")
_LEADING_INT = re.compile(r"[+-]?\d+", re.ASCII)


def number_text(value: int | float) -> str:
    """Render a JSON number in canonical shortest form."""
    if isinstance(value, int):
        return str(value)
    if value == 0:
        return "0"

    if _FIXED_NOTATION_MIN <= abs(value) < _FIXED_NOTATION_MAX:
        # repr() is the shortest round-tripping form; drop trailing zeros
        return format(Decimal(repr(value)).normalize(), "f")

    mantissa, exponent = repr(value).split("e")
    return f"{mantissa}e{int(exponent):+d}"


def value_text(value: int | float | str) -> str:
    """Return the textual form the detection rule inspects."""
    if isinstance(value, str):
        return value
    return number_text(value)


def leading_float(text: str) -> float | None:
    """Parse the leading floating-point number of *text*.

    Leading whitespace is skipped and trailing content ignored, so
    ``" 1.25 USD"`` reads as ``1.25``. Returns None when there is no
    numeric prefix or the number overflows.
    """
    match = _LEADING_FLOAT.match(text.lstrip())
    if match is None:
        return None
    number = float(match.group(0))
    if not math.isfinite(number):
        return None
    return number


def leading_int(text: str) -> int | None:
    """Parse the leading integer of *text*, truncating at the first non-digit.

    A ``0x`` prefix reads the digits as hexadecimal. Returns None when
    there is no numeric prefix.
    """
    stripped = text.lstrip()

    hex_match = _LEADING_HEX.match(stripped)
    if hex_match is not None:
        sign, digits = hex_match.groups()
        number = int(digits, 16)
        return -number if sign == "-" else number

    match = _LEADING_INT.match(stripped)
    if match is None:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # Exceeds the interpreter's integer string conversion limit
        return None
