"""Exceptions raised by the payoff engine."""

from __future__ import annotations

from decimal import Decimal
from typing import Hashable, Mapping


class DebtPathError(ValueError):
    """Base class for engine failures surfaced to callers."""


class ValidationError(DebtPathError):
    """Raised when debt input is malformed; the whole batch is rejected."""

    def __init__(self, message: str, *, debt_id: Hashable | None = None, field: str | None = None):
        super().__init__(message)
        self.debt_id = debt_id
        self.field = field


class NonConvergenceError(DebtPathError):
    """Raised when the safety cap is reached with debts still outstanding.

    Carries the simulator's state at the cap so callers can explain which
    debts the scheduled payments never clear.
    """

    def __init__(
        self,
        message: str,
        *,
        months: int,
        remaining_balances: Mapping[Hashable, Decimal],
        payoff_month_by_debt_id: Mapping[Hashable, int],
        total_interest_paid: Decimal,
    ):
        super().__init__(message)
        self.months = months
        self.remaining_balances = dict(remaining_balances)
        self.payoff_month_by_debt_id = dict(payoff_month_by_debt_id)
        self.total_interest_paid = total_interest_paid

    @property
    def stalled_debt_ids(self) -> list[Hashable]:
        """Ids of debts still carrying a balance at the cap."""
        return list(self.remaining_balances)
