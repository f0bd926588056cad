"""US-dollar display formatting for minor-unit amounts."""

from mixedunits.config import CURRENCY_SYMBOL, MINOR_UNITS_PER_MAJOR


def format_units(units: int) -> str:
    """Format *units* minor units as a currency string.

    >>> format_units(123456)
    '$1,234.56'
    >>> format_units(-5)
    '-$0.05'
    """
    sign = "-" if units < 0 else ""
    major, minor = divmod(abs(units), MINOR_UNITS_PER_MAJOR)
    return f"{sign}{CURRENCY_SYMBOL}{major:,}.{minor:02d}"
