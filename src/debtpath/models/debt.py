"""Debt input records and payoff strategies."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Hashable

from ..errors import ValidationError

CENT = Decimal("0.01")


def to_money(value: Any) -> Decimal:
    """Coerce a numeric input into a Decimal via its string form."""

    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or value is None:
        raise TypeError(f"not a monetary amount: {value!r}")
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        return Decimal(value.strip().replace(",", ""))
    raise TypeError(f"not a monetary amount: {value!r}")


class Strategy(str, Enum):
    """Closed set of payoff prioritization strategies."""

    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"

    @classmethod
    def parse(cls, value: "Strategy | str") -> "Strategy":
        """Return the strategy for an enum member or case-insensitive name."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError(
            f"Invalid debt payoff strategy: {value!r} (expected 'avalanche' or 'snowball')",
            field="strategy",
        )


@dataclass(frozen=True, slots=True)
class Debt:
    """One owed balance tracked by the payoff engine.

    Instances are immutable; the simulator copies balances into its own
    working set so a caller's debts are never changed by a run.
    """

    id: Hashable
    name: str
    balance: Decimal
    annual_interest_rate_percent: Decimal
    minimum_payment: Decimal

    def __post_init__(self) -> None:
        for field_name in ("balance", "annual_interest_rate_percent", "minimum_payment"):
            raw = getattr(self, field_name)
            try:
                amount = to_money(raw)
            except (TypeError, InvalidOperation) as exc:
                raise ValidationError(
                    f"Debt {self.id!r}: {field_name} is not a number ({raw!r})",
                    debt_id=self.id,
                    field=field_name,
                ) from exc
            object.__setattr__(self, field_name, amount)

    def monthly_interest_on(self, balance: Decimal) -> Decimal:
        """Interest accrued in one month on *balance*, rounded half-up to the cent."""
        interest = balance * self.annual_interest_rate_percent / Decimal(1200)
        return interest.quantize(CENT, rounding=ROUND_HALF_UP)
