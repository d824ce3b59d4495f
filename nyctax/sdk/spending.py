"""Spending aggregation across frequency buckets."""

from types import MappingProxyType
from typing import Any, Dict

# Frequency multipliers to annualize an amount
FREQ_TO_ANNUAL = MappingProxyType({
    "annual": 1,
    "monthly": 12,
    "weekly": 52,
    "daily": 365,
})

FREQUENCIES = tuple(FREQ_TO_ANNUAL)


def _bucket_total(spending: Dict[str, Any], freq: str) -> float:
    bucket = spending.get(freq) or {}
    return sum(amount or 0 for amount in bucket.values())


def compute_spending(spending: Dict[str, Dict[str, float]]) -> Dict[str, float]:
    """Compute annual spending from a spending map.

    Args:
        spending: Map of freq -> {item_key: amount}. Missing buckets count
                  as empty; keys other than the four frequencies are ignored.

    Returns:
        Dict with:
            - annual, monthly, weekly, daily: raw per-bucket sums
            - monthly_annual, weekly_annual, daily_annual: annualized sums
            - total_annual: all buckets annualized and summed
    """
    annual_raw = _bucket_total(spending, "annual")
    monthly_raw = _bucket_total(spending, "monthly")
    weekly_raw = _bucket_total(spending, "weekly")
    daily_raw = _bucket_total(spending, "daily")

    monthly_annual = monthly_raw * FREQ_TO_ANNUAL["monthly"]
    weekly_annual = weekly_raw * FREQ_TO_ANNUAL["weekly"]
    daily_annual = daily_raw * FREQ_TO_ANNUAL["daily"]
    total_annual = annual_raw + monthly_annual + weekly_annual + daily_annual

    return {
        "annual": annual_raw,
        "monthly": monthly_raw,
        "weekly": weekly_raw,
        "daily": daily_raw,
        "monthly_annual": monthly_annual,
        "weekly_annual": weekly_annual,
        "daily_annual": daily_annual,
        "total_annual": total_annual,
    }
