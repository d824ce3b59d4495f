"""NYC Tax CLI - Command-line interface for tax and budget calculations."""

import json
import logging
import os

import click
from pydantic import ValidationError
from rich.console import Console

from nyctax import __version__
from nyctax.sdk import (
    PresetNotFoundError,
    ProfileNotFoundError,
    compute_budget,
    compute_taxes,
    get_preset,
    get_setting,
    load_household_profile,
    parse_input_value,
    preset_inputs,
)

from .presets_commands import presets as presets_group
from .renderers.budget_renderer import render_budget, render_taxes
from .settings_commands import settings as settings_group
from .slider_commands import slider as slider_group

logger = logging.getLogger(__name__)

AMOUNT_OPTIONS = (
    ("salary", "Annual base salary"),
    ("bonus", "Annual bonus"),
    ("other_income", "Other annual income"),
    ("retirement", "Pre-tax retirement (401k) contributions"),
    ("insurance", "Pre-tax insurance premiums"),
    ("hsa", "HSA contributions"),
    ("other_deductions", "Other pre-tax deductions"),
)


def _configure_logging() -> None:
    """Configure logging based on LOG_LEVEL environment variable."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def income_options(func):
    """Attach the shared income/deduction/filing/format options to a command.

    Amounts are taken as strings so '$150,000' works as well as 150000.
    """
    for name, help_text in reversed(AMOUNT_OPTIONS):
        flag = "--" + name.replace("_", "-")
        func = click.option(flag, name, type=str, default=None, help=help_text)(func)
    func = click.option("--filing", type=click.Choice(["single", "married"]), default=None,
                        help="Filing status (default: settings 'filing', else single)")(func)
    func = click.option("--preset", "preset_name", type=str, default=None,
                        help="Start from a named preset (see 'nyc-tax presets list')")(func)
    func = click.option("--format", "output_format", type=click.Choice(["text", "json"]), default=None,
                        help="Output format (default: settings 'output_format', else text)")(func)
    return func


def _load_base(preset_name, profile_path=None) -> dict:
    """Load the starting household: profile file, else preset, else empty."""
    try:
        if profile_path:
            return load_household_profile(profile_path)
        if preset_name:
            return get_preset(preset_name)
    except (PresetNotFoundError, ProfileNotFoundError) as e:
        raise click.ClickException(e.args[0])
    except ValidationError as e:
        raise click.ClickException(f"Invalid profile {profile_path}:\n{e}")
    return {}


def build_inputs(base: dict, amounts: dict, filing) -> dict:
    """Merge base household values with command-line amounts.

    Explicit options win over the base; filing falls back to settings.
    """
    inputs = preset_inputs(base, filing=filing or base.get("filing") or get_setting("filing"))
    for key, raw in amounts.items():
        if raw is not None:
            inputs[key] = parse_input_value(raw)
    return inputs


def _resolve_format(output_format):
    return output_format or get_setting("output_format", "text")


@click.group()
@click.version_option(version=__version__, prog_name="nyc-tax")
def cli():
    """NYC Tax - Federal, NY State and NYC tax and budget calculator.

    Computes 2024 income taxes, FICA and take-home pay for a New York City
    resident, and projects a household budget from spending inputs.

    Defaults are read from settings.json in (in order):

    \b
    1. NYC_TAX_CONFIG_PATH environment variable
    2. ~/.config/nyc-tax/settings.json (XDG default)

    Run 'nyc-tax settings show' to see current settings.
    """
    _configure_logging()


cli.add_command(presets_group)
cli.add_command(slider_group)
cli.add_command(settings_group)


@cli.command("taxes")
@income_options
def taxes_cmd(output_format, preset_name, filing, **amounts):
    """Compute federal, NY State, NYC and FICA taxes.

    \b
    Examples:
      nyc-tax taxes --salary 200000 --bonus 40000 --retirement 23500
      nyc-tax taxes --salary '$300,000' --filing married --format json
      nyc-tax taxes --preset senior --bonus 0
    """
    base = _load_base(preset_name)
    inputs = build_inputs(base, amounts, filing)
    result = compute_taxes(inputs)

    if _resolve_format(output_format) == "json":
        click.echo(json.dumps(result, indent=2))
        return

    render_taxes(Console(), result)


@cli.command("budget")
@income_options
@click.option("--profile", "profile_path", type=click.Path(), default=None,
              help="Household profile YAML (same shape as a preset)")
def budget_cmd(output_format, preset_name, filing, profile_path, **amounts):
    """Compute taxes, annual spending and what is left to save.

    Spending comes from --profile or --preset (default: settings 'preset').
    Income options override the profile or preset values.

    \b
    Examples:
      nyc-tax budget --preset mid
      nyc-tax budget --preset mid --salary 210000 --format json
      nyc-tax budget --profile ~/household.yaml
    """
    if not profile_path and not preset_name:
        preset_name = get_setting("preset")
    if not profile_path and not preset_name:
        raise click.ClickException(
            "No spending source. Use --preset NAME or --profile PATH, "
            "or set a default with: nyc-tax settings set preset NAME"
        )

    base = _load_base(preset_name, profile_path)
    inputs = build_inputs(base, amounts, filing)
    result = compute_budget(inputs, base.get("spending", {}))
    logger.debug(f"budget for {profile_path or preset_name}: remainder={result['remainder']:.2f}")

    if _resolve_format(output_format) == "json":
        click.echo(json.dumps(result, indent=2))
        return

    title = f"Budget: {preset_name}" if preset_name and not profile_path else "Budget"
    render_budget(Console(), result, title=title)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
