"""Debt payoff simulation engine (avalanche and snowball)."""

from __future__ import annotations

from .config import BaseConfig, DevConfig, get_config
from .errors import DebtPathError, NonConvergenceError, ValidationError
from .models import Debt, MonthTrace, SimulationResult, Strategy, TraceEntry
from .services.compare import StrategyComparison, compare_strategies
from .services.ordering import Orderer, order
from .services.simulator import simulate

__all__ = [
    "BaseConfig",
    "Debt",
    "DebtPathError",
    "DevConfig",
    "MonthTrace",
    "NonConvergenceError",
    "Orderer",
    "SimulationResult",
    "Strategy",
    "StrategyComparison",
    "TraceEntry",
    "ValidationError",
    "compare_strategies",
    "get_config",
    "order",
    "simulate",
]
