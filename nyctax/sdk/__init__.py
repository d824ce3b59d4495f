"""NYC Tax SDK - Tax and budget calculation engine.

Scope:
- Federal, NY State and NYC income tax over 2024 bracket tables
- FICA (Social Security with wage cap, Medicare with additional surcharge)
- Annualized spending, budget remainder and savings rate
- Spending sliders (percentage-of-income, plus the legacy multiplier form)
- Display formatting helpers and example household presets

Constraints:
- Pure calculation - receives plain dicts, returns plain dicts
- No exceptions for numeric inputs; missing amounts count as zero
- Tax rules loaded once from tax_rules/{year}.yaml

Usage:
    from nyctax.sdk import compute_budget, get_preset, preset_inputs

    preset = get_preset("senior")
    budget = compute_budget(preset_inputs(preset), preset["spending"])
"""

from .brackets import Bracket, calc_brackets

from .rules import (
    TAX_YEAR,
    TaxConstants,
    TAX_CONSTANTS,
    FEDERAL_SINGLE,
    FEDERAL_MARRIED,
    NY_STATE,
    NYC_TAX,
    load_tax_rules,
    get_available_years,
    to_bracket_table,
)

from .taxes import compute_taxes, calc_ss_tax, calc_medicare_tax
from .spending import FREQ_TO_ANNUAL, FREQUENCIES, compute_spending
from .budget import compute_budget

# Sliders (percentage-based)
from .sliders import (
    SLIDER_CONFIG,
    SLIDER_MAPPING,
    FREQ_DIVISORS,
    SliderCategory,
    SpendingItem,
    slider_to_percentage,
    percentage_to_slider,
    compute_slider_amount,
)

# Sliders (legacy)
from .legacy_sliders import (
    slider_to_multiplier,
    get_slider_for_item,
    apply_slider_multiplier,
)

from .formatting import fmt, fmtk, pct, parse_input_value

from .presets import (
    PRESETS,
    PresetNotFoundError,
    list_presets,
    get_preset,
    preset_inputs,
)

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    validate_setting,
    load_household_profile,
    ProfileNotFoundError,
    InvalidSettingError,
)

__all__ = [
    # Brackets and rules
    "Bracket",
    "calc_brackets",
    "TAX_YEAR",
    "TaxConstants",
    "TAX_CONSTANTS",
    "FEDERAL_SINGLE",
    "FEDERAL_MARRIED",
    "NY_STATE",
    "NYC_TAX",
    "load_tax_rules",
    "get_available_years",
    "to_bracket_table",
    # Computation
    "compute_taxes",
    "calc_ss_tax",
    "calc_medicare_tax",
    "FREQ_TO_ANNUAL",
    "FREQUENCIES",
    "compute_spending",
    "compute_budget",
    # Sliders
    "SLIDER_CONFIG",
    "SLIDER_MAPPING",
    "FREQ_DIVISORS",
    "SliderCategory",
    "SpendingItem",
    "slider_to_percentage",
    "percentage_to_slider",
    "compute_slider_amount",
    "slider_to_multiplier",
    "get_slider_for_item",
    "apply_slider_multiplier",
    # Formatting
    "fmt",
    "fmtk",
    "pct",
    "parse_input_value",
    # Presets
    "PRESETS",
    "PresetNotFoundError",
    "list_presets",
    "get_preset",
    "preset_inputs",
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "validate_setting",
    "load_household_profile",
    "ProfileNotFoundError",
    "InvalidSettingError",
]
