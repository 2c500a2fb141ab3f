"""Priority ordering for snowball and avalanche payoff."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Iterable, Protocol

from ..models import Debt, Strategy


class Orderer(Protocol):
    """Produces the priority order a simulation works through."""

    def __call__(
        self, debts: Iterable[Debt], strategy: Strategy | str
    ) -> list[Debt]:  # pragma: no cover - interface
        ...


def _highest_rate(debt: Debt) -> Decimal:
    return -debt.annual_interest_rate_percent


def _smallest_balance(debt: Debt) -> Decimal:
    return debt.balance


_SORT_KEYS: dict[Strategy, Callable[[Debt], Decimal]] = {
    Strategy.AVALANCHE: _highest_rate,
    Strategy.SNOWBALL: _smallest_balance,
}


def sort_key(strategy: Strategy | str) -> Callable[[Debt], Decimal]:
    """Return the comparator key used to rank debts under *strategy*."""
    return _SORT_KEYS[Strategy.parse(strategy)]


def order(debts: Iterable[Debt], strategy: Strategy | str) -> list[Debt]:
    """Return debts in payoff priority order; index 0 receives the extra pool.

    Avalanche ranks by interest rate descending, snowball by balance
    ascending. ``sorted`` is stable, so ties keep their input position.
    """
    return sorted(debts, key=sort_key(strategy))
