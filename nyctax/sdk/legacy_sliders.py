"""Multiplier-based slider helpers (legacy).

Kept for compatibility with hosts that still drive spending from a 1-5
slider scaling each item's base value. The percentage-based sliders in
sliders.py replace this; the two are intentionally separate.

Base values are keyed "freq:key", e.g. "monthly:rent".
"""

import math
from typing import Dict, Optional

from .sliders import SLIDER_MAPPING
from .spending import FREQ_TO_ANNUAL

MULTIPLIER_BASE = 1.8
CENTER_POSITION = 3


def slider_to_multiplier(value: float) -> float:
    """Exponential multiplier curve; position 3 is 1.0x."""
    return MULTIPLIER_BASE ** (value - CENTER_POSITION)


def get_slider_for_item(freq: str, key: str) -> Optional[str]:
    """Find the slider category that owns a spending item, or None."""
    for name, items in SLIDER_MAPPING.items():
        for item in items:
            if item.freq == freq and item.key == key:
                return name
    return None


def _round_half_up(amount: float) -> int:
    return math.floor(amount + 0.5)


def apply_slider_multiplier(
    category: str,
    multiplier: float,
    base_values: Dict[str, float],
) -> dict:
    """Scale a category's base spending values by a multiplier.

    Items of the category missing from base_values are skipped, not filled
    with zero.

    Args:
        category: Slider category name
        multiplier: Scale factor (see slider_to_multiplier)
        base_values: Map of "freq:key" -> base amount

    Returns:
        Dict with:
            - scaled_values: "freq:key" -> scaled amount, rounded to a whole unit
            - annual_impact: sum of scaled amounts annualized by frequency
    """
    scaled_values = {}
    annual_impact = 0

    for freq, key in SLIDER_MAPPING.get(category, ()):
        base_key = f"{freq}:{key}"
        base = base_values.get(base_key)
        if base is None:
            continue
        scaled = _round_half_up(base * multiplier)
        scaled_values[base_key] = scaled
        annual_impact += scaled * FREQ_TO_ANNUAL.get(freq, 1)

    return {"scaled_values": scaled_values, "annual_impact": annual_impact}
