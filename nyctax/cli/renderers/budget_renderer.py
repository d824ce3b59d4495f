"""Rich renderer for tax and budget results.

Transforms SDK output dicts into formatted Rich tables.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from nyctax.sdk import SLIDER_CONFIG, fmt, pct


def render_taxes(console: Console, taxes: dict, title: str = "Taxes") -> None:
    """Render compute_taxes() output as a Rich table.

    Args:
        console: Rich Console instance
        taxes: SDK output from compute_taxes()
        title: Table title
    """
    table = Table(title=f"{title} ({taxes.get('filing', 'single')})", box=box.ROUNDED)
    table.add_column("", style="bold", min_width=24)
    table.add_column("Annual", justify="right", min_width=12)
    table.add_column("Rate", justify="right", min_width=8)

    # Income
    table.add_row("[bold]INCOME[/bold]", "", "")
    table.add_row("  Salary", fmt(taxes["salary"]), "")
    table.add_row("  Bonus", fmt(taxes["bonus"]), "")
    if taxes["other_income"]:
        table.add_row("  Other income", fmt(taxes["other_income"]), "")
    table.add_row("  Gross", fmt(taxes["gross"]), "")
    table.add_row("", "", "")

    # Pre-tax
    table.add_row("[bold]PRE-TAX DEDUCTIONS[/bold]", "", "")
    for key, label in (
        ("retirement", "Retirement"),
        ("insurance", "Insurance"),
        ("hsa", "HSA"),
        ("other_deductions", "Other"),
    ):
        if taxes[key]:
            table.add_row(f"  {label}", fmt(taxes[key]), "")
    table.add_row("  Total pre-tax", fmt(taxes["total_pretax"]), "")
    table.add_row("", "", "")

    # Taxes
    table.add_row("[bold]TAXES[/bold]", "", "")
    table.add_row("  Federal", fmt(taxes["federal"]["tax"]), pct(taxes["federal"]["top_rate"]))
    table.add_row("  NY State", fmt(taxes["state"]["tax"]), pct(taxes["state"]["top_rate"]))
    table.add_row("  NYC", fmt(taxes["city"]["tax"]), pct(taxes["city"]["top_rate"]))
    table.add_row("  Social Security", fmt(taxes["ss_tax"]), "")
    table.add_row("  Medicare", fmt(taxes["medicare_tax"]), "")
    table.add_row("  Total tax", fmt(taxes["total_tax"]), pct(taxes["effective_rate"]))
    table.add_row("", "", "")

    table.add_row("[bold]TAKE-HOME[/bold]", f"[green]{fmt(taxes['take_home'])}[/green]", "")
    table.add_row("  Per month", fmt(taxes["take_home"] / 12), "")

    console.print(table)
    console.print(
        f"[dim]Federal taxable income: {fmt(taxes['taxable_income'])}  "
        f"NY taxable income: {fmt(taxes['state_taxable_income'])}[/dim]"
    )


def render_budget(console: Console, budget: dict, title: str = "Budget") -> None:
    """Render compute_budget() output: taxes, spending and remainder.

    Args:
        console: Rich Console instance
        budget: SDK output from compute_budget()
        title: Title prefix
    """
    render_taxes(console, budget["taxes"], title=title)
    _render_spending(console, budget["spending"])

    remainder = budget["remainder"]
    color = "green" if remainder >= 0 else "red"
    label = "Savings" if remainder >= 0 else "Deficit"
    console.print(Panel(
        f"[{color}]{label}: {fmt(remainder)} per year "
        f"({pct(budget['savings_rate'])} of take-home)[/{color}]",
        title="Remainder",
        border_style=color,
    ))


def _render_spending(console: Console, spending: dict) -> None:
    """Render spending breakdown by frequency."""
    table = Table(title="Spending", box=box.ROUNDED)
    table.add_column("Frequency", style="bold", min_width=12)
    table.add_column("Per period", justify="right", min_width=12)
    table.add_column("Annual", justify="right", min_width=12)

    table.add_row("Annual", fmt(spending["annual"]), fmt(spending["annual"]))
    table.add_row("Monthly", fmt(spending["monthly"]), fmt(spending["monthly_annual"]))
    table.add_row("Weekly", fmt(spending["weekly"]), fmt(spending["weekly_annual"]))
    table.add_row("Daily", fmt(spending["daily"]), fmt(spending["daily_annual"]))
    table.add_row("[bold]Total[/bold]", "", f"[bold]{fmt(spending['total_annual'])}[/bold]")

    console.print(table)


def render_slider_amount(console: Console, category: str, value: float, amount: dict) -> None:
    """Render compute_slider_amount() output for one category."""
    config = SLIDER_CONFIG.get(category)
    label = config.label if config else category
    console.print(
        f"[bold]{label}[/bold] at {value:g}: {pct(amount['percentage'])} of income = "
        f"{fmt(amount['annual_amount'])}/yr, "
        f"{fmt(amount['display_amount'])} {amount['display_freq']}"
    )
