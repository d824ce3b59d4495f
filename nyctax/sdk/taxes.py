"""Federal, NY State, NYC and FICA tax computation.

Pure calculation: receives an inputs dict, returns a results dict. Nothing
is validated; missing amounts count as zero and negative amounts flow
through the arithmetic unchanged.

FICA (Social Security and Medicare) is computed on gross income. Pre-tax
deductions (401k, insurance, HSA, other) reduce income tax only.
"""

import logging
from typing import Any, Dict

from .brackets import calc_brackets
from .rules import FEDERAL_MARRIED, FEDERAL_SINGLE, NY_STATE, NYC_TAX, TAX_CONSTANTS

logger = logging.getLogger(__name__)

INCOME_KEYS = ("salary", "bonus", "other_income")
DEDUCTION_KEYS = ("retirement", "insurance", "hsa", "other_deductions")


def _amount(inputs: Dict[str, Any], key: str) -> float:
    return inputs.get(key) or 0


def calc_ss_tax(gross: float) -> float:
    """Social Security tax on gross, capped at the wage base."""
    return min(gross, TAX_CONSTANTS.ss_wage_base) * TAX_CONSTANTS.ss_rate


def get_medicare_threshold(filing: str) -> float:
    """Additional Medicare threshold for a filing status."""
    if filing == "married":
        return TAX_CONSTANTS.medicare_threshold_married
    return TAX_CONSTANTS.medicare_threshold_single


def calc_medicare_tax(gross: float, filing: str = "single") -> float:
    """Medicare tax on gross, plus the additional rate above the threshold."""
    threshold = get_medicare_threshold(filing)
    tax = gross * TAX_CONSTANTS.medicare_rate
    if gross > threshold:
        tax += (gross - threshold) * TAX_CONSTANTS.medicare_additional_rate
    return tax


def compute_taxes(inputs: Dict[str, Any]) -> Dict[str, Any]:
    """Compute all taxes from income and pre-tax deduction inputs.

    Args:
        inputs: Dict with keys (all optional):
            - salary, bonus, other_income: income amounts (default: 0)
            - retirement, insurance, hsa, other_deductions: pre-tax
              deductions (default: 0)
            - filing: 'single' or 'married' (default: 'single')

    Returns:
        Dict with the echoed inputs plus:
            - gross, total_pretax
            - taxable_income: federal taxable income
            - state_taxable_income: NY taxable income (state and city base)
            - federal, state, city: {"tax", "top_rate"}
            - ss_tax, medicare_tax, medicare_threshold
            - total_tax, total_deductions, take_home, effective_rate
    """
    salary = _amount(inputs, "salary")
    bonus = _amount(inputs, "bonus")
    other_income = _amount(inputs, "other_income")
    retirement = _amount(inputs, "retirement")
    insurance = _amount(inputs, "insurance")
    hsa = _amount(inputs, "hsa")
    other_deductions = _amount(inputs, "other_deductions")
    filing = inputs.get("filing") or "single"
    married = filing == "married"

    gross = salary + bonus + other_income
    total_pretax = retirement + insurance + hsa + other_deductions

    # FICA is computed on gross (before 401k deduction)
    ss_tax = calc_ss_tax(gross)
    medicare_threshold = get_medicare_threshold(filing)
    medicare_tax = calc_medicare_tax(gross, filing)

    if married:
        standard_deduction = TAX_CONSTANTS.standard_deduction_married
        ny_standard_deduction = TAX_CONSTANTS.ny_standard_deduction_married
        federal_brackets = FEDERAL_MARRIED
    else:
        standard_deduction = TAX_CONSTANTS.standard_deduction_single
        ny_standard_deduction = TAX_CONSTANTS.ny_standard_deduction_single
        federal_brackets = FEDERAL_SINGLE

    taxable_income = max(0, gross - total_pretax - standard_deduction)
    state_taxable_income = max(0, gross - total_pretax - ny_standard_deduction)

    federal = calc_brackets(taxable_income, federal_brackets)
    state = calc_brackets(state_taxable_income, NY_STATE)
    city = calc_brackets(state_taxable_income, NYC_TAX)

    total_tax = federal["tax"] + state["tax"] + city["tax"] + ss_tax + medicare_tax
    total_deductions = total_tax + total_pretax
    take_home = gross - total_deductions
    effective_rate = total_tax / gross if gross > 0 else 0

    logger.debug(
        f"compute_taxes: gross={gross:.2f} filing={filing} "
        f"total_tax={total_tax:.2f} take_home={take_home:.2f}"
    )

    return {
        # Income
        "salary": salary,
        "bonus": bonus,
        "other_income": other_income,
        "gross": gross,
        "filing": filing,

        # Pre-tax
        "retirement": retirement,
        "insurance": insurance,
        "hsa": hsa,
        "other_deductions": other_deductions,
        "total_pretax": total_pretax,
        "taxable_income": taxable_income,
        "state_taxable_income": state_taxable_income,

        # Taxes
        "federal": federal,
        "state": state,
        "city": city,
        "ss_tax": ss_tax,
        "medicare_tax": medicare_tax,
        "medicare_threshold": medicare_threshold,
        "total_tax": total_tax,

        # Summary
        "total_deductions": total_deductions,
        "take_home": take_home,
        "effective_rate": effective_rate,
    }
