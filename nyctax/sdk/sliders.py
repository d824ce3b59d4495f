"""Percentage-of-income spending sliders.

Each category has a percentage-of-income range. A 0-100 slider position is
mapped linearly into that range, and the resulting annual amount is shown
at the category's display frequency (e.g. housing per month, food per week).

SLIDER_MAPPING records which spending items belong to each category. Many
items (streaming, transit, taxpro, ...) belong to no category.
"""

from types import MappingProxyType
from typing import Any, Dict, NamedTuple


class SliderCategory(NamedTuple):
    """Percentage-of-income range and display settings for a category."""

    min_pct: float
    max_pct: float
    display_freq: str
    label: str


class SpendingItem(NamedTuple):
    """A (frequency, item key) pair in a spending map."""

    freq: str
    key: str


SLIDER_CONFIG = MappingProxyType({
    "housing": SliderCategory(0.05, 0.50, "monthly", "Housing & Home"),
    "food": SliderCategory(0.01, 0.10, "weekly", "Food & Dining"),
    "nightlife": SliderCategory(0.005, 0.10, "weekly", "Going Out & Social"),
    "travel": SliderCategory(0.01, 0.20, "annual", "Travel & Experiences"),
    "health": SliderCategory(0.001, 0.05, "monthly", "Health & Wellness"),
    "shopping": SliderCategory(0.01, 0.15, "monthly", "Style & Shopping"),
})

# Maps display frequency to annual divisor
FREQ_DIVISORS = MappingProxyType({"annual": 1, "monthly": 12, "weekly": 52, "daily": 365})

SLIDER_MAPPING = MappingProxyType({
    "housing": (
        SpendingItem("monthly", "rent"),
        SpendingItem("monthly", "utilities"),
        SpendingItem("monthly", "rentersins"),
        SpendingItem("monthly", "laundry"),
        SpendingItem("monthly", "internet"),
        SpendingItem("monthly", "phone"),
    ),
    "food": (
        SpendingItem("monthly", "groceries"),
        SpendingItem("weekly", "dining"),
        SpendingItem("weekly", "takeout"),
        SpendingItem("daily", "lunch"),
        SpendingItem("daily", "coffee"),
        SpendingItem("daily", "snacks"),
        SpendingItem("daily", "tips"),
    ),
    "nightlife": (
        SpendingItem("weekly", "bars"),
        SpendingItem("weekly", "entertainment"),
        SpendingItem("weekly", "rideshare"),
    ),
    "travel": (
        SpendingItem("annual", "vacations"),
        SpendingItem("annual", "flights"),
    ),
    "health": (
        SpendingItem("monthly", "gym"),
        SpendingItem("monthly", "therapy"),
        SpendingItem("annual", "medical"),
    ),
    "shopping": (
        SpendingItem("annual", "clothing"),
        SpendingItem("annual", "electronics"),
        SpendingItem("annual", "furniture"),
        SpendingItem("annual", "gifts"),
    ),
})


def slider_to_percentage(category: str, value: float) -> float:
    """Convert a 0-100 slider value to a percentage within a category's range.

    Args:
        category: Category name (e.g. 'housing')
        value: Slider position, 0 to 100

    Returns:
        Percentage as decimal (e.g. 0.25 for 25%), 0 for unknown categories
    """
    config = SLIDER_CONFIG.get(category)
    if config is None:
        return 0
    t = value / 100
    return config.min_pct + t * (config.max_pct - config.min_pct)


def percentage_to_slider(category: str, pct: float) -> float:
    """Convert a percentage back to a slider value, clamped to 0-100.

    Unknown categories return the midpoint (50).
    """
    config = SLIDER_CONFIG.get(category)
    if config is None:
        return 50
    t = (pct - config.min_pct) / (config.max_pct - config.min_pct)
    return max(0, min(100, t * 100))


def compute_slider_amount(category: str, value: float, gross_income: float) -> Dict[str, Any]:
    """Compute a category's spending amount from slider position and gross income.

    Returns:
        Dict with percentage, annual_amount, display_amount, display_freq.
        Unknown categories return zeros with display_freq 'annual'.
    """
    config = SLIDER_CONFIG.get(category)
    if config is None:
        return {"percentage": 0, "annual_amount": 0, "display_amount": 0, "display_freq": "annual"}

    pct = slider_to_percentage(category, value)
    annual_amount = gross_income * pct
    divisor = FREQ_DIVISORS.get(config.display_freq, 1)

    return {
        "percentage": pct,
        "annual_amount": annual_amount,
        "display_amount": annual_amount / divisor,
        "display_freq": config.display_freq,
    }
