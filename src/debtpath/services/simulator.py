"""Month-by-month payoff simulation with a rolling extra-payment pool."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Hashable, Iterable

from ..config import get_config
from ..errors import NonConvergenceError, ValidationError
from ..logging_config import get_logger
from ..models import Debt, MonthTrace, SimulationResult, Strategy, TraceEntry
from .ordering import Orderer, order
from .summary import build_result
from .validation import validate_debts, validate_extra_payment

logger = get_logger(__name__)

ZERO = Decimal("0")


class SimulationState(str, Enum):
    SIMULATING = "simulating"
    CLEARED = "cleared"


@dataclass(slots=True)
class ExtraPool:
    """Payment capacity beyond the minimums, always aimed at priority 0.

    A paid-off debt frees its minimum payment for every later month and its
    overpayment for the following month only. Both are held as pending and
    join the pool when the month closes.
    """

    base: Decimal
    freed_minimums: Decimal = ZERO
    carried_surplus: Decimal = ZERO
    _pending_minimums: Decimal = ZERO
    _pending_surplus: Decimal = ZERO

    @property
    def available(self) -> Decimal:
        return self.base + self.freed_minimums + self.carried_surplus

    def release(self, *, minimum_payment: Decimal, surplus: Decimal) -> None:
        self._pending_minimums += minimum_payment
        self._pending_surplus += surplus

    def close_month(self) -> None:
        self.freed_minimums += self._pending_minimums
        self.carried_surplus = self._pending_surplus
        self._pending_minimums = ZERO
        self._pending_surplus = ZERO


@dataclass(slots=True)
class _WorkingDebt:
    debt: Debt
    balance: Decimal


@dataclass(slots=True)
class SimulationRun:
    """Final simulator state handed to the result aggregator."""

    state: SimulationState
    months: int
    total_interest_paid: Decimal
    payoff_month_by_debt_id: dict[Hashable, int]
    trace: list[MonthTrace] | None = field(default=None, repr=False)


def run_schedule(
    ordered: list[Debt],
    extra_monthly_payment: Decimal,
    *,
    max_months: int,
    record_trace: bool = False,
) -> SimulationRun:
    """Advance the schedule until every debt in *ordered* is paid.

    *ordered* is consumed in the given priority order and never re-sorted.
    Raises ``NonConvergenceError`` if debts remain after *max_months*.
    """

    active = [_WorkingDebt(debt=d, balance=d.balance) for d in ordered]
    pool = ExtraPool(base=extra_monthly_payment)
    payoff_months: dict[Hashable, int] = {}
    trace: list[MonthTrace] | None = [] if record_trace else None
    total_interest = ZERO
    month = 0
    state = SimulationState.SIMULATING if active else SimulationState.CLEARED

    while state is SimulationState.SIMULATING:
        if month >= max_months:
            remaining = {w.debt.id: w.balance for w in active}
            logger.warning(
                "Payoff schedule did not converge within %d months",
                max_months,
                extra={"remaining_debt_ids": [str(k) for k in remaining]},
            )
            raise NonConvergenceError(
                f"Payoff schedule did not converge within {max_months} months; "
                f"payments never clear debt(s) {', '.join(repr(k) for k in remaining)}",
                months=month,
                remaining_balances=remaining,
                payoff_month_by_debt_id=payoff_months,
                total_interest_paid=total_interest,
            )

        month += 1
        pool_amount = pool.available
        entries: list[TraceEntry] = []

        for position, working in enumerate(active):
            debt = working.debt
            interest = debt.monthly_interest_on(working.balance)
            total_interest += interest

            extra = pool_amount if position == 0 and pool_amount > ZERO else ZERO
            payment = debt.minimum_payment + extra
            working.balance = working.balance + interest - payment

            if working.balance <= ZERO:
                surplus = -working.balance
                payment -= surplus
                working.balance = ZERO
                payoff_months[debt.id] = month
                pool.release(minimum_payment=debt.minimum_payment, surplus=surplus)
                logger.debug(
                    "Debt %r paid off in month %d", debt.id, month,
                    extra={"surplus": str(surplus)},
                )

            if trace is not None:
                entries.append(
                    TraceEntry(
                        debt_id=debt.id,
                        interest_accrued=interest,
                        payment_applied=payment,
                        extra_allocated=extra,
                        remaining_balance=working.balance,
                    )
                )

        # Paid debts leave only after the month so priority shifts next month.
        active = [w for w in active if w.balance > ZERO]
        pool.close_month()

        if trace is not None:
            trace.append(MonthTrace(month=month, extra_pool=pool_amount, entries=tuple(entries)))
        if not active:
            state = SimulationState.CLEARED

    return SimulationRun(
        state=state,
        months=month,
        total_interest_paid=total_interest,
        payoff_month_by_debt_id=payoff_months,
        trace=trace,
    )


def _resolve_max_months(max_months: int | None) -> int:
    if max_months is None:
        return get_config().MAX_MONTHS
    if isinstance(max_months, bool) or not isinstance(max_months, int) or max_months <= 0:
        raise ValidationError(
            f"max_months must be a positive integer, got {max_months!r}", field="max_months"
        )
    return max_months


def simulate(
    debts: Iterable[Debt],
    strategy: Strategy | str,
    extra_monthly_payment: Any = 0,
    *,
    verbose: bool = False,
    max_months: int | None = None,
    orderer: Orderer = order,
    currency_symbol: str | None = None,
) -> SimulationResult:
    """Simulate paying off *debts* under *strategy* with a monthly extra budget.

    Input is validated first; the caller's debts are never modified. With
    ``verbose=True`` the result carries a month-by-month trace.

    Raises:
        ValidationError: malformed debts, strategy or extra payment
        NonConvergenceError: payments never clear the debts within the cap
    """

    parsed = Strategy.parse(strategy)
    checked = validate_debts(debts, extra_monthly_payment)
    extra = validate_extra_payment(extra_monthly_payment)
    cap = _resolve_max_months(max_months)

    ordered = orderer(checked, parsed)
    run = run_schedule(ordered, extra, max_months=cap, record_trace=verbose)
    result = build_result(
        strategy=parsed,
        extra_monthly_payment=extra,
        ordered=ordered,
        run=run,
        currency_symbol=currency_symbol,
    )
    logger.info(
        "Simulated %s payoff of %d debt(s): %d months",
        parsed.value,
        len(ordered),
        result.total_months,
        extra={"total_interest_paid": str(result.total_interest_paid)},
    )
    return result
