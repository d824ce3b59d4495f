"""Budget: taxes plus spending plus what is left over."""

import logging
from typing import Any, Dict

from .spending import compute_spending
from .taxes import compute_taxes

logger = logging.getLogger(__name__)


def compute_budget(inputs: Dict[str, Any], spending: Dict[str, Dict[str, float]]) -> Dict[str, Any]:
    """Compute full budget: taxes + spending + savings.

    Args:
        inputs: Same as compute_taxes() inputs
        spending: Spending map (freq -> {item_key: amount})

    Returns:
        Dict with:
            - taxes: compute_taxes() result
            - spending: compute_spending() result
            - remainder: take-home minus total annual spending
            - savings_rate: remainder / take-home, 0 when take-home is not positive
    """
    taxes = compute_taxes(inputs)
    spend = compute_spending(spending)

    take_home = taxes["take_home"]
    remainder = take_home - spend["total_annual"]
    # Zero (not signed) when there is no take-home to divide by
    savings_rate = remainder / take_home if take_home > 0 else 0

    logger.debug(f"compute_budget: remainder={remainder:.2f} savings_rate={savings_rate:.4f}")

    return {
        "taxes": taxes,
        "spending": spend,
        "remainder": remainder,
        "savings_rate": savings_rate,
    }
