"""NYC Tax MCP Server - FastMCP implementation for tax and budget tools."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from nyctax import sdk

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("nyc-tax")


def _inputs(
    salary: float,
    bonus: float,
    other_income: float,
    retirement: float,
    insurance: float,
    hsa: float,
    other_deductions: float,
    filing: str,
) -> dict[str, Any]:
    return {
        "salary": salary,
        "bonus": bonus,
        "other_income": other_income,
        "retirement": retirement,
        "insurance": insurance,
        "hsa": hsa,
        "other_deductions": other_deductions,
        "filing": filing,
    }


# --- Tools ---

@mcp.tool()
async def compute_taxes(
    salary: float = Field(default=0, description="Annual base salary"),
    bonus: float = Field(default=0, description="Annual bonus"),
    other_income: float = Field(default=0, description="Other annual income"),
    retirement: float = Field(default=0, description="Pre-tax 401k contributions"),
    insurance: float = Field(default=0, description="Pre-tax insurance premiums"),
    hsa: float = Field(default=0, description="HSA contributions"),
    other_deductions: float = Field(default=0, description="Other pre-tax deductions"),
    filing: str = Field(default="single", description="Filing status ('single' or 'married')"),
) -> dict[str, Any]:
    """Compute 2024 federal, NY State, NYC, Social Security and Medicare taxes and take-home pay."""
    try:
        return sdk.compute_taxes(_inputs(
            salary, bonus, other_income, retirement, insurance, hsa, other_deductions, filing,
        ))
    except Exception as e:
        logger.error(f"Error computing taxes: {e}")
        return {"error": str(e)}


@mcp.tool()
async def compute_budget(
    preset: str | None = Field(default=None, description="Preset name for income and spending (see list_presets)"),
    spending: dict[str, dict[str, float]] | None = Field(
        default=None,
        description="Spending map: {'monthly': {'rent': 3000}, 'weekly': {...}, 'daily': {...}, 'annual': {...}}. Overrides the preset's spending.",
    ),
    salary: float | None = Field(default=None, description="Annual base salary (overrides preset)"),
    bonus: float | None = Field(default=None, description="Annual bonus (overrides preset)"),
    filing: str = Field(default="single", description="Filing status ('single' or 'married')"),
) -> dict[str, Any]:
    """Compute taxes, annual spending, remainder and savings rate for a household.

    Start from a preset and override salary, bonus or spending as needed.
    """
    try:
        base = sdk.get_preset(preset) if preset else {}
        inputs = sdk.preset_inputs(base, filing=filing)
        if salary is not None:
            inputs["salary"] = salary
        if bonus is not None:
            inputs["bonus"] = bonus

        return sdk.compute_budget(inputs, spending if spending is not None else base.get("spending", {}))

    except sdk.PresetNotFoundError as e:
        return {"error": e.args[0]}
    except Exception as e:
        logger.error(f"Error computing budget: {e}")
        return {"error": str(e)}


@mcp.tool()
async def list_presets() -> dict[str, Any]:
    """List example household presets with total compensation and annual spending."""
    presets = []
    for name, preset in sdk.PRESETS.items():
        presets.append({
            "name": name,
            "total_comp": preset["salary"] + preset["bonus"],
            "annual_spending": sdk.compute_spending(preset["spending"])["total_annual"],
        })
    return {"presets": presets, "count": len(presets)}


@mcp.tool()
async def slider_amount(
    category: str = Field(description="Slider category (housing, food, nightlife, travel, health, shopping)"),
    value: float = Field(description="Slider position from 0 to 100"),
    gross_income: float = Field(description="Annual gross income"),
) -> dict[str, Any]:
    """Convert a spending slider position into a share of income and a dollar amount."""
    if category not in sdk.SLIDER_CONFIG:
        return {"error": f"Unknown category: {category}. Available: {', '.join(sdk.SLIDER_CONFIG)}"}
    return sdk.compute_slider_amount(category, value, gross_income)


def run_server():
    """Entry point for the MCP server."""
    mcp.run()


if __name__ == "__main__":
    run_server()
