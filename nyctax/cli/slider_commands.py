"""Spending slider CLI commands."""

import click
from rich.console import Console

from nyctax.sdk import (
    SLIDER_CONFIG,
    SLIDER_MAPPING,
    FREQUENCIES,
    compute_slider_amount,
    get_slider_for_item,
    parse_input_value,
    pct,
)

from .renderers.budget_renderer import render_slider_amount


@click.group()
def slider():
    """Spending slider helpers.

    Each category maps a 0-100 slider position to a share of gross income.
    """
    pass


@slider.command("list")
def slider_list():
    """List slider categories, their ranges and mapped spending items."""
    for name, config in SLIDER_CONFIG.items():
        click.echo(
            f"{name} - {config.label}: {pct(config.min_pct)} to {pct(config.max_pct)} "
            f"(shown {config.display_freq})"
        )
        items = ", ".join(f"{item.freq}:{item.key}" for item in SLIDER_MAPPING[name])
        click.echo(f"  items: {items}")


@slider.command("amount")
@click.argument("category", type=click.Choice(list(SLIDER_CONFIG)))
@click.argument("value", type=click.FloatRange(0, 100))
@click.option("--gross", required=True, type=str, help="Annual gross income")
def slider_amount(category, value, gross):
    """Show the spending amount for CATEGORY at slider VALUE (0-100).

    \b
    Example:
      nyc-tax slider amount housing 40 --gross 240000
    """
    amount = compute_slider_amount(category, value, parse_input_value(gross))
    render_slider_amount(Console(), category, value, amount)


@slider.command("item")
@click.argument("freq", type=click.Choice(list(FREQUENCIES)))
@click.argument("key")
def slider_item(freq, key):
    """Show which slider category owns a spending item."""
    owner = get_slider_for_item(freq, key)
    if owner is None:
        click.echo(f"{freq}:{key} is not mapped to a slider")
    else:
        click.echo(owner)
