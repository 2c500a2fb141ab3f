"""Result aggregation: totals, narrative text and payoff timelines."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Hashable, Iterable

from ..config import get_config
from ..models import CENT, Debt, MonthTrace, SimulationResult, Strategy

if TYPE_CHECKING:
    from .simulator import SimulationRun


def format_money(amount: Decimal, symbol: str = "$") -> str:
    """Render an amount as ``$1,234.56``."""
    return f"{symbol}{amount.quantize(CENT):,.2f}"


def format_duration(months: int) -> str:
    """Return ``"N years, M months"`` text for a month count."""

    years, rest = divmod(months, 12)
    year_part = f"{years} year" + ("" if years == 1 else "s")
    month_part = f"{rest} month" + ("" if rest == 1 else "s")
    if years and rest:
        return f"{year_part}, {month_part}"
    if years:
        return year_part
    return month_part


def build_narrative(
    *,
    strategy: Strategy,
    extra_monthly_payment: Decimal,
    total_months: int,
    total_interest_paid: Decimal,
    currency_symbol: str = "$",
) -> str:
    """Human-readable one-paragraph summary of a payoff plan."""

    if total_months == 0:
        return "You have no outstanding debts to pay off."

    if extra_monthly_payment > 0:
        lead = (
            f"Using the {strategy.value} method with an extra "
            f"{format_money(extra_monthly_payment, currency_symbol)}/month"
        )
    else:
        lead = f"Using the {strategy.value} method with minimum payments only"

    month_word = "month" if total_months == 1 else "months"
    text = f"{lead}, you'll be debt-free in {total_months} {month_word}"
    if total_months >= 12:
        text += f" ({format_duration(total_months)})"
    return f"{text} and pay {format_money(total_interest_paid, currency_symbol)} in interest."


def build_result(
    *,
    strategy: Strategy,
    extra_monthly_payment: Decimal,
    ordered: list[Debt],
    run: "SimulationRun",
    currency_symbol: str | None = None,
) -> SimulationResult:
    """Assemble the caller-facing result from the simulator's final state."""

    symbol = currency_symbol if currency_symbol is not None else get_config().CURRENCY_SYMBOL
    starting_total = sum((d.balance for d in ordered), Decimal("0"))
    monthly_payment = sum((d.minimum_payment for d in ordered), Decimal("0")) + extra_monthly_payment

    return SimulationResult(
        strategy=strategy,
        extra_monthly_payment=extra_monthly_payment,
        total_months=run.months,
        total_interest_paid=run.total_interest_paid,
        payoff_month_by_debt_id=dict(run.payoff_month_by_debt_id),
        priority_order=[d.id for d in ordered],
        monthly_payment=monthly_payment,
        total_paid=starting_total + run.total_interest_paid,
        narrative=build_narrative(
            strategy=strategy,
            extra_monthly_payment=extra_monthly_payment,
            total_months=run.months,
            total_interest_paid=run.total_interest_paid,
            currency_symbol=symbol,
        ),
        trace=run.trace,
    )


def _add_months(value: date, months: int) -> date:
    """Return the first day of the month *months* after *value*'s month."""

    month_index = value.month - 1 + months
    return date(value.year + month_index // 12, month_index % 12 + 1, 1)


def payoff_dates(result: SimulationResult, *, start: date | None = None) -> dict[Hashable, date]:
    """Map each debt id to the calendar month (first day) it is paid off.

    Month 1 of the schedule is the month after *start* (default today).
    """

    origin = start or date.today()
    return {
        debt_id: _add_months(origin, month)
        for debt_id, month in result.payoff_month_by_debt_id.items()
    }


def debt_free_date(result: SimulationResult, *, start: date | None = None) -> date:
    """Calendar month in which the last debt is cleared."""
    return _add_months(start or date.today(), result.total_months)


def balance_timeline(debts: Iterable[Debt], trace: Iterable[MonthTrace]) -> list[tuple[int, Decimal]]:
    """Total outstanding balance per month, starting with month 0.

    Month 0 is the starting total; later points come from a verbose trace.
    Debts paid off in earlier months no longer appear in the trace and count
    as zero.
    """

    points = [(0, sum((d.balance for d in debts), Decimal("0")))]
    for month in trace:
        points.append((month.month, month.total_remaining))
    return points
