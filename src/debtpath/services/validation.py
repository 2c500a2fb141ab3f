"""Input checks run before any payoff simulation."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from ..errors import ValidationError
from ..logging_config import get_logger
from ..models import Debt, to_money

logger = get_logger(__name__)

_ZERO = Decimal("0")


def _reject(message: str, *, debt_id=None, field: str | None = None) -> ValidationError:
    logger.warning("Rejected debt input: %s", message, extra={"debt_id": debt_id, "field": field})
    return ValidationError(message, debt_id=debt_id, field=field)


def validate_extra_payment(extra_monthly_payment: Any) -> Decimal:
    """Return the extra payment as a Decimal, rejecting negatives."""

    try:
        extra = to_money(extra_monthly_payment)
    except (TypeError, InvalidOperation) as exc:
        raise _reject(
            f"extra_monthly_payment is not a number ({extra_monthly_payment!r})",
            field="extra_monthly_payment",
        ) from exc
    if not extra.is_finite():
        raise _reject("extra_monthly_payment must be finite", field="extra_monthly_payment")
    if extra < _ZERO:
        raise _reject(
            f"extra_monthly_payment must be >= 0, got {extra}", field="extra_monthly_payment"
        )
    return extra


def validate_debts(debts: Iterable[Debt], extra_monthly_payment: Any = 0) -> list[Debt]:
    """Return *debts* as a list if every record is well formed.

    Fails fast with ``ValidationError`` on the first violation, naming the
    offending debt id. Nothing is modified.
    """

    validate_extra_payment(extra_monthly_payment)

    checked: list[Debt] = []
    seen_ids: set = set()
    for debt in debts:
        for field_name in ("balance", "annual_interest_rate_percent", "minimum_payment"):
            if not getattr(debt, field_name).is_finite():
                raise _reject(
                    f"Debt {debt.id!r}: {field_name} must be finite",
                    debt_id=debt.id,
                    field=field_name,
                )
        if debt.balance <= _ZERO:
            raise _reject(
                f"Debt {debt.id!r}: balance must be > 0, got {debt.balance}",
                debt_id=debt.id,
                field="balance",
            )
        if debt.annual_interest_rate_percent < _ZERO:
            raise _reject(
                f"Debt {debt.id!r}: annual interest rate must be >= 0, "
                f"got {debt.annual_interest_rate_percent}",
                debt_id=debt.id,
                field="annual_interest_rate_percent",
            )
        if debt.minimum_payment <= _ZERO:
            raise _reject(
                f"Debt {debt.id!r}: minimum payment must be > 0, got {debt.minimum_payment}",
                debt_id=debt.id,
                field="minimum_payment",
            )
        if debt.id in seen_ids:
            raise _reject(f"Duplicate debt id {debt.id!r}", debt_id=debt.id, field="id")
        seen_ids.add(debt.id)
        checked.append(debt)
    return checked
