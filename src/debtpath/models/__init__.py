"""Domain records for the payoff engine."""

from .debt import CENT, Debt, Strategy, to_money
from .result import MonthTrace, SimulationResult, TraceEntry

__all__ = [
    "CENT",
    "Debt",
    "MonthTrace",
    "SimulationResult",
    "Strategy",
    "TraceEntry",
    "to_money",
]
