"""Pydantic schemas for tax rules and household profile validation.

These schemas validate the tax_rules/*.yaml files and presets.yaml (or a
user's household profile.yaml) and provide typed access to their values.
Bracket tables are checked for the progressive invariant at load time so a
typo in a rules file causes a clear error rather than a wrong tax figure.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TaxBracket(BaseModel):
    """Single tax bracket entry."""
    model_config = ConfigDict(extra="forbid")

    up_to: Optional[float] = Field(default=None, description="Upper bound (None if 'over' bracket)")
    over: Optional[float] = Field(default=None, description="Lower bound for top bracket")
    rate: float = Field(..., ge=0, le=1, description="Tax rate as decimal")


def _check_progressive(brackets: list[TaxBracket]) -> list[TaxBracket]:
    """Reject bracket lists that are not a valid progressive table.

    Every bracket but the last must carry an increasing 'up_to', the last
    must be an 'over' bracket, and rates may never decrease.
    """
    if not brackets:
        raise ValueError("tax_brackets must not be empty")

    *bounded, top = brackets
    if top.up_to is not None or top.over is None:
        raise ValueError("last bracket must be an 'over' bracket")

    previous = 0.0
    for bracket in bounded:
        if bracket.up_to is None:
            raise ValueError("only the last bracket may omit 'up_to'")
        if bracket.up_to <= previous:
            raise ValueError(f"bracket bound {bracket.up_to} is not above {previous}")
        previous = bracket.up_to

    if top.over != previous:
        raise ValueError(f"top bracket starts at {top.over}, expected {previous}")

    rates = [b.rate for b in brackets]
    if any(later < earlier for earlier, later in zip(rates, rates[1:])):
        raise ValueError(f"bracket rates must be non-decreasing: {rates}")

    return brackets


class FilingStatusRules(BaseModel):
    """Federal rules for a filing status (single, married)."""
    model_config = ConfigDict(extra="forbid")

    standard_deduction: float = Field(..., ge=0)
    tax_brackets: list[TaxBracket]

    @field_validator("tax_brackets")
    @classmethod
    def check_progressive(cls, brackets: list[TaxBracket]) -> list[TaxBracket]:
        return _check_progressive(brackets)


class FederalRules(BaseModel):
    """Federal income tax rules by filing status."""
    model_config = ConfigDict(extra="forbid")

    single: FilingStatusRules
    married: FilingStatusRules


class ByFilingStatus(BaseModel):
    """A scalar that differs by filing status."""
    model_config = ConfigDict(extra="forbid")

    single: float = Field(..., ge=0)
    married: float = Field(..., ge=0)


class NewYorkStateRules(BaseModel):
    """NY State rules. One bracket table, filing-dependent standard deduction."""
    model_config = ConfigDict(extra="forbid")

    standard_deduction: ByFilingStatus
    tax_brackets: list[TaxBracket]

    @field_validator("tax_brackets")
    @classmethod
    def check_progressive(cls, brackets: list[TaxBracket]) -> list[TaxBracket]:
        return _check_progressive(brackets)


class NewYorkCityRules(BaseModel):
    """NYC resident tax rules (taxed on the NY State base)."""
    model_config = ConfigDict(extra="forbid")

    tax_brackets: list[TaxBracket]

    @field_validator("tax_brackets")
    @classmethod
    def check_progressive(cls, brackets: list[TaxBracket]) -> list[TaxBracket]:
        return _check_progressive(brackets)


class SocialSecurityRules(BaseModel):
    """Social Security tax rules."""
    model_config = ConfigDict(extra="forbid")

    wage_cap: float = Field(..., gt=0, description="SS wage base (max taxable)")
    tax_rate: float = Field(..., ge=0, le=1, description="SS tax rate (employee portion)")


class MedicareRules(BaseModel):
    """Medicare tax rules including the additional Medicare surcharge."""
    model_config = ConfigDict(extra="forbid")

    tax_rate: float = Field(..., ge=0, le=1, description="Base Medicare rate (employee portion)")
    additional_rate: float = Field(..., ge=0, le=1, description="Additional Medicare rate over threshold")
    additional_threshold: ByFilingStatus


class TaxRules(BaseModel):
    """Complete tax rules for a year."""
    model_config = ConfigDict(extra="ignore")  # Allow unknown fields for forward compat

    federal: FederalRules
    new_york_state: NewYorkStateRules
    new_york_city: NewYorkCityRules
    social_security: SocialSecurityRules
    medicare: MedicareRules


# =============================================================================
# Household profiles (presets and user profile.yaml)
# =============================================================================


class SpendingMap(BaseModel):
    """Spending amounts keyed by frequency, then by item key.

    Only the four known frequency buckets are accepted.
    """
    model_config = ConfigDict(extra="forbid")

    annual: dict[str, float] = Field(default_factory=dict)
    monthly: dict[str, float] = Field(default_factory=dict)
    weekly: dict[str, float] = Field(default_factory=dict)
    daily: dict[str, float] = Field(default_factory=dict)


class Preset(BaseModel):
    """A household profile: income, pre-tax deductions and spending."""
    model_config = ConfigDict(extra="forbid")

    salary: float = 0
    bonus: float = 0
    other_income: float = 0
    retirement: float = 0
    insurance: float = 0
    hsa: float = 0
    other_deductions: float = 0
    filing: Optional[str] = Field(default=None, description="'single' or 'married'")
    spending: SpendingMap = Field(default_factory=SpendingMap)

    @model_validator(mode="after")
    def check_filing(self) -> "Preset":
        """Validate filing status when one is given."""
        if self.filing is not None and self.filing not in ("single", "married"):
            raise ValueError(f"filing must be 'single' or 'married', got '{self.filing}'")
        return self

    @property
    def total_comp(self) -> float:
        """Salary plus bonus."""
        return self.salary + self.bonus
