"""Tax rules loading and the 2024 bracket tables.

Rules live in nyctax/tax_rules/{year}.yaml and are validated against the
TaxRules schema. The module-level tables below are built once at import
and never mutated.
"""

import logging
import math
from pathlib import Path
from typing import NamedTuple

import yaml

from .brackets import Bracket
from .schemas import TaxBracket, TaxRules

logger = logging.getLogger(__name__)

TAX_YEAR = "2024"


class TaxConstants(NamedTuple):
    """Scalar tax parameters for a year."""

    standard_deduction_single: float
    standard_deduction_married: float
    ny_standard_deduction_single: float
    ny_standard_deduction_married: float
    ss_rate: float
    ss_wage_base: float
    medicare_rate: float
    medicare_additional_rate: float
    medicare_threshold_single: float
    medicare_threshold_married: float


def _get_tax_rules_dir() -> Path:
    """Get the tax_rules directory path."""
    return Path(__file__).parent.parent / "tax_rules"


def get_available_years() -> list[str]:
    """Get sorted list of available tax rule years (descending)."""
    years = [p.stem for p in _get_tax_rules_dir().glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


def load_tax_rules(year: str = TAX_YEAR) -> TaxRules:
    """Load and validate tax rules from tax_rules/YYYY.yaml.

    Raises:
        FileNotFoundError: If no rules file exists for the year
        pydantic.ValidationError: If the file does not match the schema
    """
    rules_file = _get_tax_rules_dir() / f"{year}.yaml"
    if not rules_file.exists():
        raise FileNotFoundError(f"Tax rules file not found for year {year}: {rules_file}")

    with open(rules_file, "r") as f:
        raw = yaml.safe_load(f)

    logger.debug(f"Loaded tax rules for {year} from {rules_file}")
    return TaxRules.model_validate(raw)


def to_bracket_table(brackets: list[TaxBracket]) -> tuple[Bracket, ...]:
    """Convert up_to/over brackets into a width-based bracket table.

    The 'over' bracket becomes the unbounded last entry.
    """
    table = []
    previous = 0.0
    for bracket in brackets:
        if bracket.up_to is None:
            table.append(Bracket(math.inf, bracket.rate))
            break
        table.append(Bracket(bracket.up_to - previous, bracket.rate))
        previous = bracket.up_to
    return tuple(table)


def build_constants(rules: TaxRules) -> TaxConstants:
    """Flatten the scalar parameters of a rules file."""
    return TaxConstants(
        standard_deduction_single=rules.federal.single.standard_deduction,
        standard_deduction_married=rules.federal.married.standard_deduction,
        ny_standard_deduction_single=rules.new_york_state.standard_deduction.single,
        ny_standard_deduction_married=rules.new_york_state.standard_deduction.married,
        ss_rate=rules.social_security.tax_rate,
        ss_wage_base=rules.social_security.wage_cap,
        medicare_rate=rules.medicare.tax_rate,
        medicare_additional_rate=rules.medicare.additional_rate,
        medicare_threshold_single=rules.medicare.additional_threshold.single,
        medicare_threshold_married=rules.medicare.additional_threshold.married,
    )


_RULES = load_tax_rules(TAX_YEAR)

FEDERAL_SINGLE = to_bracket_table(_RULES.federal.single.tax_brackets)
FEDERAL_MARRIED = to_bracket_table(_RULES.federal.married.tax_brackets)
NY_STATE = to_bracket_table(_RULES.new_york_state.tax_brackets)
NYC_TAX = to_bracket_table(_RULES.new_york_city.tax_brackets)

TAX_CONSTANTS = build_constants(_RULES)
