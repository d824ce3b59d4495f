"""Progressive bracket calculation."""

from typing import NamedTuple, Sequence


class Bracket(NamedTuple):
    """A slice of income taxed at one marginal rate.

    width is the size of the slice (math.inf for the top bracket).
    """

    width: float
    rate: float


def calc_brackets(income: float, brackets: Sequence[Bracket]) -> dict:
    """Calculate tax on income over a width-based bracket table.

    Widths are consumed left to right until the income is used up.

    Args:
        income: Taxable income
        brackets: Ordered bracket table, last bracket unbounded

    Returns:
        Dict with:
            - tax: Total tax across all brackets reached
            - top_rate: Marginal rate of the highest bracket reached (0 if none)
    """
    tax = 0.0
    remaining = income
    top_rate = 0.0

    for width, rate in brackets:
        if remaining <= 0:
            break
        taxable = min(remaining, width)
        tax += taxable * rate
        top_rate = rate
        remaining -= taxable

    return {"tax": tax, "top_rate": top_rate}
