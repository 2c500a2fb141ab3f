"""Service module exports."""

from . import compare, import_csv, ordering, simulator, summary, validation

__all__ = [
    "compare",
    "import_csv",
    "ordering",
    "simulator",
    "summary",
    "validation",
]
