"""Preset CLI commands - browse the example household profiles."""

import json

import click

from nyctax.sdk import (
    PRESETS,
    PresetNotFoundError,
    compute_spending,
    fmt,
    fmtk,
    get_preset,
)


@click.group()
def presets():
    """Browse example household profiles.

    Presets bundle income, pre-tax deductions and a full spending map.
    Use one with: nyc-tax budget --preset NAME
    """
    pass


@presets.command("list")
def presets_list():
    """List presets with total compensation and annual spending."""
    for name, preset in PRESETS.items():
        comp = preset["salary"] + preset["bonus"]
        spend = compute_spending(preset["spending"])["total_annual"]
        click.echo(f"  {name:<10} comp {fmtk(comp):>8}   spending {fmtk(spend):>7}/yr")


@presets.command("show")
@click.argument("name")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def presets_show(name, output_format):
    """Show a preset's income, deductions and spending items."""
    try:
        preset = get_preset(name)
    except PresetNotFoundError as e:
        raise click.ClickException(e.args[0])

    if output_format == "json":
        click.echo(json.dumps(preset, indent=2))
        return

    click.echo(f"Preset: {name}")
    for key in ("salary", "bonus", "other_income", "retirement", "insurance", "hsa", "other_deductions"):
        click.echo(f"  {key}: {fmt(preset.get(key, 0))}")

    for freq, items in preset["spending"].items():
        click.echo(f"\n  {freq}:")
        for key, amount in items.items():
            click.echo(f"    {key}: {fmt(amount)}")
