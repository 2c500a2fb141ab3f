"""Simulation output records."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Hashable

from .debt import Strategy


@dataclass(frozen=True, slots=True)
class TraceEntry:
    """What happened to one debt in one simulated month."""

    debt_id: Hashable
    interest_accrued: Decimal
    payment_applied: Decimal
    extra_allocated: Decimal
    remaining_balance: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "debt_id": self.debt_id,
            "interest_accrued": float(self.interest_accrued),
            "payment_applied": float(self.payment_applied),
            "extra_allocated": float(self.extra_allocated),
            "remaining_balance": float(self.remaining_balance),
        }


@dataclass(frozen=True, slots=True)
class MonthTrace:
    """All debt activity for a single month of the schedule."""

    month: int
    extra_pool: Decimal
    entries: tuple[TraceEntry, ...]

    @property
    def total_payment(self) -> Decimal:
        return sum((e.payment_applied for e in self.entries), Decimal("0"))

    @property
    def total_remaining(self) -> Decimal:
        return sum((e.remaining_balance for e in self.entries), Decimal("0"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "extra_pool": float(self.extra_pool),
            "payments": {str(e.debt_id): e.to_dict() for e in self.entries},
        }


@dataclass(slots=True)
class SimulationResult:
    """Aggregate outcome of one payoff simulation."""

    strategy: Strategy
    extra_monthly_payment: Decimal
    total_months: int
    total_interest_paid: Decimal
    payoff_month_by_debt_id: dict[Hashable, int]
    priority_order: list[Hashable]
    monthly_payment: Decimal
    total_paid: Decimal
    narrative: str = ""
    trace: list[MonthTrace] | None = field(default=None, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Plain-JSON view for presentation layers."""

        data: dict[str, Any] = {
            "strategy": self.strategy.value,
            "extra_monthly_payment": float(self.extra_monthly_payment),
            "total_months": self.total_months,
            "total_interest_paid": float(self.total_interest_paid),
            "payoff_month_by_debt_id": {str(k): v for k, v in self.payoff_month_by_debt_id.items()},
            "priority_order": [str(debt_id) for debt_id in self.priority_order],
            "monthly_payment": float(self.monthly_payment),
            "total_paid": float(self.total_paid),
            "narrative": self.narrative,
        }
        if self.trace is not None:
            data["trace"] = [month.to_dict() for month in self.trace]
        return data
