"""Side-by-side comparison of avalanche and snowball plans."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable

from ..models import Debt, SimulationResult, Strategy
from .simulator import simulate


@dataclass(frozen=True, slots=True)
class StrategyComparison:
    """Results for both strategies plus which one to recommend."""

    avalanche: SimulationResult
    snowball: SimulationResult
    recommended: Strategy
    interest_saved: Decimal
    months_saved: int

    def result_for(self, strategy: Strategy | str) -> SimulationResult:
        if Strategy.parse(strategy) is Strategy.AVALANCHE:
            return self.avalanche
        return self.snowball


def compare_strategies(
    debts: Iterable[Debt],
    extra_monthly_payment: Any = 0,
    *,
    max_months: int | None = None,
    currency_symbol: str | None = None,
) -> StrategyComparison:
    """Run both strategies on the same debts and pick the cheaper one.

    Lower total interest wins; ties go to fewer months, then to avalanche.
    Savings are reported relative to the other strategy and are never negative.
    """

    debts = list(debts)
    kwargs = {"max_months": max_months, "currency_symbol": currency_symbol}
    avalanche = simulate(debts, Strategy.AVALANCHE, extra_monthly_payment, **kwargs)
    snowball = simulate(debts, Strategy.SNOWBALL, extra_monthly_payment, **kwargs)

    avalanche_key = (avalanche.total_interest_paid, avalanche.total_months)
    snowball_key = (snowball.total_interest_paid, snowball.total_months)
    if snowball_key < avalanche_key:
        best, other, recommended = snowball, avalanche, Strategy.SNOWBALL
    else:
        best, other, recommended = avalanche, snowball, Strategy.AVALANCHE

    return StrategyComparison(
        avalanche=avalanche,
        snowball=snowball,
        recommended=recommended,
        interest_saved=other.total_interest_paid - best.total_interest_paid,
        months_saved=max(other.total_months - best.total_months, 0),
    )
