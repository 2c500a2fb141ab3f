"""Command line entry points for debtpath."""

from __future__ import annotations

import json
from pathlib import Path

import click

from .config import get_config
from .errors import DebtPathError
from .logging_config import get_logger, setup_logging
from .models import Debt, Strategy
from .services.compare import compare_strategies
from .services.import_csv import load_debts
from .services.ordering import order
from .services.simulator import simulate
from .services.summary import format_money, payoff_dates

logger = get_logger(__name__)

STRATEGY_CHOICE = click.Choice([s.value for s in Strategy], case_sensitive=False)
debts_file_argument = click.argument(
    "debts_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


def _load(path: Path) -> list[Debt]:
    try:
        return load_debts(path)
    except DebtPathError as exc:
        raise click.ClickException(str(exc)) from exc
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        raise click.ClickException(f"Could not read {path}: {exc}") from exc


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Plan debt payoff with the avalanche or snowball method."""

    config = get_config()
    setup_logging(config)
    ctx.obj = config


@main.command("plan")
@debts_file_argument
@click.option("--strategy", "-s", type=STRATEGY_CHOICE, default="avalanche", show_default=True)
@click.option("--extra", "-e", type=str, default="0", show_default=True,
              help="Extra amount paid each month on top of the minimums")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Print the monthly schedule")
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit the result as JSON")
@click.pass_obj
def plan(config, debts_file: Path, strategy: str, extra: str, verbose: bool, as_json: bool) -> None:
    """Simulate paying off the debts in DEBTS_FILE."""

    debts = _load(debts_file)
    try:
        result = simulate(
            debts, strategy, extra, verbose=verbose or as_json, max_months=config.MAX_MONTHS
        )
    except DebtPathError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    symbol = config.CURRENCY_SYMBOL
    click.echo(result.narrative)
    click.echo(f"Monthly payment: {format_money(result.monthly_payment, symbol)}")
    names = {d.id: d.name for d in debts}
    dates = payoff_dates(result)
    for rank, debt_id in enumerate(result.priority_order, start=1):
        month = result.payoff_month_by_debt_id[debt_id]
        click.echo(
            f"{rank}. {names[debt_id]}: paid off in month {month} "
            f"({dates[debt_id].strftime('%b %Y')})"
        )

    if verbose and result.trace:
        for month in result.trace:
            click.echo(f"Month {month.month} (extra pool {format_money(month.extra_pool, symbol)})")
            for entry in month.entries:
                click.echo(
                    f"  {names[entry.debt_id]}: interest {format_money(entry.interest_accrued, symbol)}, "
                    f"paid {format_money(entry.payment_applied, symbol)}, "
                    f"remaining {format_money(entry.remaining_balance, symbol)}"
                )


@main.command("order")
@debts_file_argument
@click.option("--strategy", "-s", type=STRATEGY_CHOICE, default="avalanche", show_default=True)
@click.pass_obj
def order_command(config, debts_file: Path, strategy: str) -> None:
    """Show this month's payoff priority for DEBTS_FILE."""

    for rank, debt in enumerate(order(_load(debts_file), strategy), start=1):
        click.echo(
            f"{rank}. {debt.name} (balance {format_money(debt.balance, config.CURRENCY_SYMBOL)}, "
            f"{debt.annual_interest_rate_percent}% APR)"
        )


@main.command("compare")
@debts_file_argument
@click.option("--extra", "-e", type=str, default="0", show_default=True)
@click.pass_obj
def compare(config, debts_file: Path, extra: str) -> None:
    """Compare avalanche and snowball plans for DEBTS_FILE."""

    try:
        comparison = compare_strategies(
            _load(debts_file), extra, max_months=config.MAX_MONTHS
        )
    except DebtPathError as exc:
        raise click.ClickException(str(exc)) from exc

    symbol = config.CURRENCY_SYMBOL
    for result in (comparison.avalanche, comparison.snowball):
        click.echo(
            f"{result.strategy.value}: {result.total_months} months, "
            f"{format_money(result.total_interest_paid, symbol)} interest"
        )
    click.echo(
        f"Recommended: {comparison.recommended.value} "
        f"(saves {format_money(comparison.interest_saved, symbol)} "
        f"and {comparison.months_saved} months)"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
