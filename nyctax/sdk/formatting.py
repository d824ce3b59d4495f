"""Display formatting and permissive input parsing.

Rounding is half-up on the exact float value ("$1,235" for 1234.5), not
Python's round-half-even.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d*(?:\.\d*)?")


def _to_fixed(value: float, places: int) -> str:
    """Format with a fixed number of decimals, rounding half-up."""
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def fmt(n: float) -> str:
    """Format as whole dollars: 1234.7 -> '$1,235', -5678 -> '-$5,678'."""
    rounded = math.floor(n + 0.5)
    if n < 0:
        return f"-${abs(rounded):,}"
    return f"${rounded:,}"


def fmtk(n: float) -> str:
    """Compact dollars: '$1.2M' at a million and up, '$150K' at a thousand and up."""
    sign = "-" if n < 0 else ""
    size = abs(n)
    if size >= 1_000_000:
        return f"{sign}${_to_fixed(size / 1_000_000, 1)}M"
    if size >= 1000:
        return f"{sign}${_to_fixed(size / 1000, 0)}K"
    return fmt(n)


def pct(n: float) -> str:
    """Format a decimal rate as a percentage: 0.315 -> '31.5%'."""
    return f"{_to_fixed(n * 100, 1)}%"


def parse_input_value(value: Any) -> float:
    """Parse a user-entered amount, ignoring currency symbols and separators.

    Everything except digits and '.' is dropped, then the leading decimal
    number is parsed. Empty or non-numeric input gives 0.

    Examples:
        parse_input_value("$50,000")  # -> 50000.0
        parse_input_value("abc")      # -> 0
    """
    cleaned = _NON_NUMERIC.sub("", str(value))
    number = _LEADING_NUMBER.match(cleaned).group(0)
    if not any(ch.isdigit() for ch in number):
        return 0
    return float(number)
