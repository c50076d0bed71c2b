"""
Command-Line Interface for DinDin.

Purpose
-------
Runs the site's calculators, the recommendation selector and the
investment comparator from a terminal, printing Rich tables or the same
JSON the web client receives.

Commands
--------
- compound: Compound interest projection
- retirement: Retirement capital and monthly effort
- recommend: Personalized investment recommendations for a profile
- allocate: Profile-only allocation with a rough projection
- compare: Compare investments after tax and fees
- profile create: Write a financial profile file
- info: Version and dependency information

Example Usage
-------------
    $ dindin compound -i 10000 -m 500 -r 12 -y 10
    $ dindin retirement --current-age 30 --retirement-age 60 --income 5000 --savings 50000
    $ dindin profile create me.json --income 8000 --expenses 4000 --leisure 1000 --risk moderate --age 40
    $ dindin recommend --profile-file me.json --json
    $ dindin compare -a 10000 -p 5 -s cdb -s lci -s bitcoin
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Tuple

import click


def _get_console():
    """Lazy import Rich for better startup time."""
    from rich.console import Console
    return Console()


# Version
__version__ = "0.1.0"

RISK_CHOICES = ["conservative", "moderate", "aggressive"]


def _configure_logging(level: str) -> None:
    """Attach a RichHandler to the package logger once and set its level."""
    from rich.console import Console
    from rich.logging import RichHandler

    logger = logging.getLogger("dindin")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _money(ctx: click.Context, value: float, decimals: int = 2) -> str:
    from .utils import format_currency
    return format_currency(value, decimals=decimals, symbol=ctx.obj["settings"].currency_symbol)


def _finish(ctx: click.Context, payload: Any, as_json: bool, output: Optional[Path]) -> None:
    """Print the JSON payload when requested and save it when asked to."""
    if as_json:
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    if output:
        from .serialization import save_result
        save_result(payload, output)
        if not ctx.obj.get("quiet", False) and not as_json:
            click.echo(f"Results saved to {output}")


def _save_plot(ctx: click.Context, plot_fn, args: Tuple, path: Path) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    fig, _ = plot_fn(*args, save_path=str(path))
    plt.close(fig)
    if not ctx.obj.get("quiet", False):
        click.echo(f"Chart saved to {path}", err=True)


_output_option = click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Save the JSON result to this file",
)
_json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print the result as JSON"
)


@click.group()
@click.version_option(version=__version__, prog_name="dindin")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, quiet: bool, verbose: bool) -> None:
    """
    DinDin - Personal finance projections and investment recommendations.

    Compound interest and retirement calculators, a rule-based
    recommendation engine and an investment comparator for Brazilian
    investors.

    Use 'dindin COMMAND --help' for command-specific help.
    """
    from .config import load_settings
    from .exceptions import ConfigurationError

    try:
        settings = load_settings()
    except ConfigurationError as e:
        _fail(str(e))

    _configure_logging("DEBUG" if verbose else settings.effective_log_level)

    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = _get_console()


# ---------------------------------------------------------------------------
# Calculators
# ---------------------------------------------------------------------------

@main.command()
@click.option("--initial", "-i", type=float, default=0.0, show_default=True,
              help="Initial amount (R$)")
@click.option("--monthly", "-m", type=float, default=0.0, show_default=True,
              help="Monthly contribution (R$)")
@click.option("--rate", "-r", type=float, required=True,
              help="Annual interest rate in percent (12 for 12%)")
@click.option("--years", "-y", type=int, required=True, help="Number of years")
@click.option("--plot", "plot_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Save a growth chart (PNG) to this file")
@_output_option
@_json_option
@click.pass_context
def compound(
    ctx: click.Context,
    initial: float,
    monthly: float,
    rate: float,
    years: int,
    plot_path: Optional[Path],
    output: Optional[Path],
    as_json: bool,
) -> None:
    """
    Project an investment under compound interest.

    Example:
        dindin compound -i 10000 -m 500 -r 12 -y 10
    """
    from .exceptions import DinDinError
    from .projection import project_compound_growth
    from .serialization import projection_input_from_dict, projection_result_to_dict

    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)

    try:
        inp = projection_input_from_dict({
            "initial_amount": initial,
            "monthly_contribution": monthly,
            "interest_rate": rate,
            "time_period": years,
        })
        result = project_compound_growth(inp)
    except DinDinError as e:
        _fail(str(e))

    payload = projection_result_to_dict(result)

    if not as_json:
        if console and not quiet:
            from rich.table import Table

            table = Table(title="Compound Interest", show_header=True)
            table.add_column("Metric", style="cyan")
            table.add_column("Value", style="green", justify="right")
            table.add_row("Years", f"{inp.years}")
            table.add_row("Annual rate", f"{inp.annual_rate_percent:g}%")
            table.add_row("Total invested", _money(ctx, result.total_invested))
            table.add_row("Interest earned", _money(ctx, result.total_interest))
            table.add_row("Final amount", _money(ctx, result.final_amount))
            console.print(table)
        else:
            click.echo(f"Total invested: {_money(ctx, result.total_invested)}")
            click.echo(f"Interest earned: {_money(ctx, result.total_interest)}")
            click.echo(f"Final amount: {_money(ctx, result.final_amount)}")

    _finish(ctx, payload, as_json, output)

    if plot_path:
        from .plotting import plot_projection
        _save_plot(ctx, plot_projection, (inp,), plot_path)


@main.command()
@click.option("--current-age", type=int, required=True, help="Age today")
@click.option("--retirement-age", type=int, required=True, help="Planned retirement age")
@click.option("--income", type=float, required=True,
              help="Desired monthly income in retirement (R$)")
@click.option("--savings", type=float, default=0.0, show_default=True,
              help="Current savings (R$)")
@_output_option
@_json_option
@click.pass_context
def retirement(
    ctx: click.Context,
    current_age: int,
    retirement_age: int,
    income: float,
    savings: float,
    output: Optional[Path],
    as_json: bool,
) -> None:
    """
    Capital needed to retire and the monthly deposit that reaches it.

    Uses the 4% withdrawal rule and a 10% a.a. assumed return.

    Example:
        dindin retirement --current-age 30 --retirement-age 60 --income 5000 --savings 50000
    """
    from .exceptions import DinDinError
    from .projection import project_retirement_need
    from .serialization import retirement_input_from_dict, retirement_result_to_dict

    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)

    try:
        inp = retirement_input_from_dict({
            "current_age": current_age,
            "retirement_age": retirement_age,
            "desired_income": income,
            "current_savings": savings,
        })
        result = project_retirement_need(inp)
    except DinDinError as e:
        _fail(str(e))

    payload = retirement_result_to_dict(result)

    if not as_json:
        if console and not quiet:
            from rich.table import Table

            table = Table(title="Retirement Plan", show_header=True)
            table.add_column("Metric", style="cyan")
            table.add_column("Value", style="green", justify="right")
            table.add_row("Years to retirement", f"{result.years_to_retirement}")
            table.add_row("Capital needed", _money(ctx, result.total_needed))
            table.add_row("Savings at retirement",
                          _money(ctx, result.future_value_of_current_savings))
            table.add_row("Monthly contribution", _money(ctx, result.monthly_contribution_needed))
            console.print(table)
        else:
            click.echo(f"Years to retirement: {result.years_to_retirement}")
            click.echo(f"Capital needed: {_money(ctx, result.total_needed)}")
            click.echo(f"Monthly contribution: {_money(ctx, result.monthly_contribution_needed)}")

    _finish(ctx, payload, as_json, output)


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

def _profile_options(with_defaults: bool):
    """Shared --income/--expenses/--leisure/--risk/--age options."""
    def default(value):
        return value if with_defaults else None

    options = [
        click.option("--income", type=float, default=default(5000.0),
                     show_default=with_defaults, help="Net monthly income (R$)"),
        click.option("--expenses", type=float, default=default(3000.0),
                     show_default=with_defaults, help="Essential monthly expenses (R$)"),
        click.option("--leisure", type=float, default=default(500.0),
                     show_default=with_defaults, help="Leisure monthly expenses (R$)"),
        click.option("--risk", type=click.Choice(RISK_CHOICES), default=default("moderate"),
                     show_default=with_defaults, help="Investor risk profile"),
        click.option("--age", type=int, default=default(30),
                     show_default=with_defaults, help="Investor age"),
    ]

    def decorator(f):
        for option in reversed(options):
            f = option(f)
        return f
    return decorator


def _profile_from_options(income, expenses, leisure, risk, age):
    from .serialization import profile_from_dict

    missing = [
        flag for flag, value in (
            ("--income", income), ("--expenses", expenses), ("--risk", risk), ("--age", age)
        )
        if value is None
    ]
    if missing:
        _fail(f"missing options {', '.join(missing)} (or use --profile-file)")
    return profile_from_dict({
        "monthly_income": income,
        "monthly_expenses": expenses,
        "leisure_expenses": leisure or 0.0,
        "investment_profile": risk,
        "age": age,
    })


def _suggestion_table(title: str, suggestions):
    from rich.table import Table

    table = Table(title=title, show_header=True)
    table.add_column("Investment", style="cyan")
    table.add_column("Allocation", justify="right")
    table.add_column("Expected return", style="green")
    table.add_column("Risk")
    table.add_column("Horizon")
    for s in suggestions:
        table.add_row(
            s.name, f"{s.allocation_percent:.0f}%", s.expected_return_description,
            s.risk_level.value, s.recommended_horizon,
        )
    return table


@main.command()
@click.option("--profile-file", "-f", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help="Financial profile file (see 'dindin profile create')")
@_profile_options(with_defaults=False)
@_output_option
@_json_option
@click.pass_context
def recommend(
    ctx: click.Context,
    profile_file: Optional[Path],
    income: Optional[float],
    expenses: Optional[float],
    leisure: Optional[float],
    risk: Optional[str],
    age: Optional[int],
    output: Optional[Path],
    as_json: bool,
) -> None:
    """
    Personalized investment recommendations.

    Example:
        dindin recommend --income 3000 --expenses 2000 --leisure 500 --risk conservative --age 30
    """
    from .advisor import personalized_recommendations
    from .exceptions import DinDinError
    from .serialization import bundle_to_dict, load_profile

    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)

    try:
        if profile_file is not None:
            profile = load_profile(profile_file)
        else:
            profile = _profile_from_options(income, expenses, leisure, risk, age)
        response = personalized_recommendations(profile)
    except DinDinError as e:
        _fail(str(e))

    bundle = response.bundle
    payload = bundle_to_dict(bundle)

    if not as_json:
        if console and not quiet:
            from rich.panel import Panel

            console.print(Panel(bundle.summary, title="Summary", border_style="green"))
            console.print(_suggestion_table("Domestic", bundle.domestic_suggestions))
            console.print(_suggestion_table("International", bundle.international_suggestions))
            if bundle.warnings:
                console.print(Panel("\n".join(f"- {w}" for w in bundle.warnings),
                                    title="Warnings", border_style="yellow"))
        else:
            click.echo(bundle.summary)
            for s in bundle.domestic_suggestions + bundle.international_suggestions:
                click.echo(f"[{s.region.value}] {s.name}: {s.allocation_percent:.0f}%")
            for w in bundle.warnings:
                click.echo(f"Warning: {w}")

    _finish(ctx, payload, as_json, output)


@main.command()
@click.option("--risk", type=click.Choice(RISK_CHOICES), required=True, help="Risk profile")
@click.option("--amount", type=float, required=True, help="Amount available today (R$)")
@click.option("--years", type=float, required=True, help="Time horizon (years)")
@click.option("--monthly", type=float, default=0.0, show_default=True,
              help="Monthly contribution (R$)")
@_json_option
@click.pass_context
def allocate(
    ctx: click.Context,
    risk: str,
    amount: float,
    years: float,
    monthly: float,
    as_json: bool,
) -> None:
    """
    Suggested asset-class allocation for a risk profile.

    Example:
        dindin allocate --risk moderate --amount 10000 --years 10 --monthly 500
    """
    from pydantic import ValidationError as PydanticValidationError
    from .config import AllocationRequest
    from .exceptions import DinDinError
    from .serialization import allocation_to_dict

    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)

    try:
        rec = AllocationRequest(
            profile=risk, amount=amount, time_horizon=years, monthly_contribution=monthly
        ).evaluate()
    except PydanticValidationError as e:
        _fail(f"invalid allocation request: {e}")
    except DinDinError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps(allocation_to_dict(rec), indent=2, ensure_ascii=False))
        return

    if console and not quiet:
        from rich.panel import Panel
        from rich.table import Table

        console.print(Panel(rec.recommendation, title=f"{risk.title()} profile"))
        table = Table(title="Suggested Allocation", show_header=True)
        table.add_column("Asset class", style="cyan")
        table.add_column("Share", justify="right", style="green")
        for name, share in rec.suggested_allocation.items():
            table.add_row(name, f"{share:g}%")
        console.print(table)
        console.print(
            f"Expected return {rec.expected_return_percent:g}% a.a., "
            f"projected {_money(ctx, rec.projected_value)}"
        )
    else:
        for name, share in rec.suggested_allocation.items():
            click.echo(f"{name}: {share:g}%")
        click.echo(f"Projected value: {_money(ctx, rec.projected_value)}")


# ---------------------------------------------------------------------------
# Comparator
# ---------------------------------------------------------------------------

@main.command()
@click.option("--amount", "-a", type=float, required=True, help="Amount invested (R$)")
@click.option("--period", "-p", type=int, required=True, help="Holding period (years)")
@click.option("--select", "-s", "selected", multiple=True,
              help="Product id to compare (repeatable). Default: cdb, acoes, fiis")
@click.option("--plot", "plot_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Save a comparison chart (PNG) to this file")
@_json_option
@click.pass_context
def compare(
    ctx: click.Context,
    amount: float,
    period: int,
    selected: Tuple[str, ...],
    plot_path: Optional[Path],
    as_json: bool,
) -> None:
    """
    Compare investments after income tax and fees.

    Products: poupanca, cdb, tesouro_selic, lci, acoes, fiis, bitcoin.

    Example:
        dindin compare -a 10000 -p 5 -s cdb -s lci -s bitcoin
    """
    from pydantic import ValidationError as PydanticValidationError
    from .config import ComparisonRequest
    from .exceptions import DinDinError
    from .serialization import comparison_to_dict

    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)

    fields = {"amount": amount, "period": period}
    if selected:
        fields["investments"] = list(selected)
    try:
        results = ComparisonRequest(**fields).evaluate()
    except PydanticValidationError as e:
        _fail(f"invalid comparison request: {e}")
    except DinDinError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps(comparison_to_dict(results), indent=2, ensure_ascii=False))
    elif console and not quiet:
        from rich.table import Table

        table = Table(title=f"{_money(ctx, amount)} for {period} years", show_header=True)
        table.add_column("#", justify="right")
        table.add_column("Investment", style="cyan")
        table.add_column("Final amount", justify="right", style="green")
        table.add_column("Profit", justify="right")
        table.add_column("Return", justify="right")
        table.add_column("Risk")
        for rank, r in enumerate(results, start=1):
            table.add_row(
                str(rank), r.name, _money(ctx, r.final_amount), _money(ctx, r.profit),
                f"{r.profit_percent:.1f}%", r.risk_level.value,
            )
        console.print(table)
    else:
        for r in results:
            click.echo(f"{r.name}: {_money(ctx, r.final_amount)} ({r.profit_percent:.1f}%)")

    if plot_path:
        from .plotting import plot_comparison
        _save_plot(ctx, plot_comparison, (results,), plot_path)


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

@main.group()
def profile() -> None:
    """
    Financial profile files.

    A profile file feeds 'dindin recommend --profile-file'.
    """
    pass


@profile.command("create")
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@_profile_options(with_defaults=True)
@click.pass_context
def profile_create(
    ctx: click.Context,
    output_file: Path,
    income: float,
    expenses: float,
    leisure: float,
    risk: str,
    age: int,
) -> None:
    """
    Write a financial profile file.

    Example:
        dindin profile create me.json --income 8000 --expenses 4000 --risk moderate --age 40
    """
    from .exceptions import DinDinError
    from .serialization import save_profile

    try:
        profile_obj = _profile_from_options(income, expenses, leisure, risk, age)
        save_profile(profile_obj, output_file)
    except DinDinError as e:
        _fail(str(e))

    if not ctx.obj.get("quiet", False):
        click.echo(f"Created profile file: {output_file}")
        if profile_obj.available_to_invest <= 0:
            click.echo(
                "Warning: expenses consume the whole income; "
                "recommendations will be refused for this profile.",
                err=True,
            )


@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """
    Display system and package information.

    Shows version numbers, installed dependencies, and
    active settings.
    """
    from importlib.metadata import version

    console = ctx.obj.get("console")
    settings = ctx.obj["settings"]

    info_lines = [
        f"DinDin Version: {__version__}",
        f"Python: {sys.version.split()[0]}",
        f"Log level: {settings.effective_log_level}",
        f"Currency: {settings.currency_symbol}",
    ]

    for name in ("numpy", "pandas", "matplotlib", "pydantic", "rich", "click"):
        info_lines.append(f"{name}: {version(name)}")

    if console and not ctx.obj.get("quiet", False):
        from rich.panel import Panel
        console.print(Panel("\n".join(info_lines), title="System Information"))
    else:
        for line in info_lines:
            click.echo(line)


if __name__ == "__main__":
    main()
