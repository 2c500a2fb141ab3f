"""Pytest configuration and shared fixtures for debtpath tests.

Provides debt factories, the representative three-debt household used in the
end-to-end scenarios, and helpers for comparing Decimal money values.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from debtpath.models import Debt

# =============================================================================
# Environment isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep each test away from real .env values and the working directory."""
    for name in ("DEBTPATH_MAX_MONTHS", "DEBTPATH_CURRENCY_SYMBOL", "DEBTPATH_TESTING"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DEBTPATH_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.setenv("DEBTPATH_DEV_MODE", "false")
    yield
    package_logger = logging.getLogger("debtpath")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()


# =============================================================================
# Debt factories
# =============================================================================


@pytest.fixture
def debt_factory():
    """Build Debt records with sensible defaults."""

    counter = {"n": 0}

    def _make(**overrides) -> Debt:
        counter["n"] += 1
        data = {
            "id": f"debt-{counter['n']}",
            "name": f"Debt {counter['n']}",
            "balance": "1000.00",
            "annual_interest_rate_percent": "12.0",
            "minimum_payment": "50.00",
        }
        data.update(overrides)
        return Debt(**data)

    return _make


@pytest.fixture
def household_debts() -> list[Debt]:
    """Credit card, auto loan and student loan from the sample data set."""
    return [
        Debt(id="cc", name="CreditCard", balance=5750, annual_interest_rate_percent="24.99", minimum_payment=150),
        Debt(id="auto", name="Auto", balance=18500, annual_interest_rate_percent="4.5", minimum_payment=450),
        Debt(id="student", name="Student", balance=21500, annual_interest_rate_percent="5.8", minimum_payment=250),
    ]


@pytest.fixture
def household_csv(tmp_path):
    """CSV export of the sample household debts."""
    path = tmp_path / "debts.csv"
    path.write_text(
        "ID,Name,Balance,APR,Min Payment\n"
        'cc,CreditCard,"$5,750.00",24.99%,150\n'
        "auto,Auto,18500,4.5,450\n"
        "student,Student,21500,5.8,250\n",
        encoding="utf-8",
    )
    return path


# =============================================================================
# Helpers
# =============================================================================


def money(value) -> Decimal:
    return Decimal(str(value))


def assert_money_equal(actual, expected, tolerance: str = "0.01"):
    """Assert that two money amounts agree within a tolerance (default 1 cent)."""
    difference = abs(money(actual) - money(expected))
    assert difference < Decimal(tolerance), (
        f"Expected {expected}, got {actual} (difference: {difference})"
    )
