"""Tests for side-by-side strategy comparison."""

from __future__ import annotations

import pytest

from debtpath import NonConvergenceError, Strategy, compare_strategies


def test_avalanche_saves_more_on_interest(debt_factory):
    """High-rate large balance vs low-rate small balance favours avalanche."""
    debts = [
        debt_factory(id="small", balance="500", annual_interest_rate_percent="10", minimum_payment="25"),
        debt_factory(id="large", balance="5000", annual_interest_rate_percent="20", minimum_payment="100"),
    ]

    comparison = compare_strategies(debts, "200")

    assert comparison.recommended is Strategy.AVALANCHE
    assert comparison.avalanche.total_interest_paid < comparison.snowball.total_interest_paid
    assert comparison.interest_saved == (
        comparison.snowball.total_interest_paid - comparison.avalanche.total_interest_paid
    )
    assert comparison.months_saved >= 0


def test_identical_orderings_tie_to_avalanche(debt_factory):
    debt = debt_factory(balance="2500", annual_interest_rate_percent="15", minimum_payment="100")

    comparison = compare_strategies([debt], "50")

    assert comparison.recommended is Strategy.AVALANCHE
    assert comparison.interest_saved == 0
    assert comparison.months_saved == 0


def test_result_for_returns_matching_run(household_debts):
    comparison = compare_strategies(household_debts, "100")

    assert comparison.result_for("snowball") is comparison.snowball
    assert comparison.result_for(Strategy.AVALANCHE) is comparison.avalanche
    assert comparison.avalanche.priority_order == ["cc", "student", "auto"]
    assert comparison.snowball.priority_order == ["cc", "auto", "student"]


def test_accepts_one_shot_iterable(household_debts):
    comparison = compare_strategies(iter(household_debts), 0)
    assert comparison.snowball.total_months > 0


def test_non_convergence_propagates(debt_factory):
    debt = debt_factory(balance="10000", annual_interest_rate_percent="24", minimum_payment="100")

    with pytest.raises(NonConvergenceError):
        compare_strategies([debt], 0, max_months=36)
