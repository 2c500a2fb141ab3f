"""CSV ingestion of debt records for the command line."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

import pandas as pd

from ..errors import ValidationError
from ..models import Debt


@dataclass(slots=True)
class ColumnMapping:
    """Maps debt fields to (lower-cased) CSV headers."""

    balance: str = "balance"
    rate: str = "rate"
    minimum_payment: str = "minimum_payment"
    id: str | None = "id"
    name: str | None = "name"


_ALIASES = {
    "rate": ("rate", "apr", "interest_rate", "annual_interest_rate_percent"),
    "minimum_payment": ("minimum_payment", "min_payment", "minimum"),
}


def normalize_frame(*, file_path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """Load a CSV file into a DataFrame with consistent column casing."""

    frame = pd.read_csv(file_path, encoding=encoding, dtype=str, keep_default_na=False)
    frame.columns = [c.strip().lower().replace(" ", "_") for c in frame.columns]
    return frame


def detect_mapping(columns: Iterable[str]) -> ColumnMapping:
    """Pick header names for each field, accepting common aliases."""

    available = set(columns)
    resolved: dict[str, str] = {}
    for field_name, candidates in _ALIASES.items():
        match = next((c for c in candidates if c in available), None)
        if match is None:
            raise ValidationError(
                f"CSV is missing a {field_name} column (tried {', '.join(candidates)})",
                field=field_name,
            )
        resolved[field_name] = match
    if "balance" not in available:
        raise ValidationError("CSV is missing a balance column", field="balance")
    return ColumnMapping(
        rate=resolved["rate"],
        minimum_payment=resolved["minimum_payment"],
        id="id" if "id" in available else None,
        name="name" if "name" in available else None,
    )


def rows_to_debts(*, rows: Iterable[Mapping], mapping: ColumnMapping) -> list[Debt]:
    """Convert dict-like rows into ``Debt`` records.

    Rows without an id column are numbered from 1 in file order. Blank
    numeric cells raise ``ValidationError`` naming the row's id.
    """

    debts: list[Debt] = []
    for index, row in enumerate(rows, start=1):
        raw_id = str(row.get(mapping.id, "")).strip() if mapping.id else ""
        debt_id = raw_id or str(index)
        name = str(row.get(mapping.name, "")).strip() if mapping.name else ""

        values: dict[str, str] = {}
        for field_name, column in (
            ("balance", mapping.balance),
            ("annual_interest_rate_percent", mapping.rate),
            ("minimum_payment", mapping.minimum_payment),
        ):
            cell = str(row.get(column, "")).strip()
            if not cell:
                raise ValidationError(
                    f"Debt {debt_id!r}: missing {column}", debt_id=debt_id, field=field_name
                )
            values[field_name] = cell.lstrip("$").rstrip("%")

        debts.append(Debt(id=debt_id, name=name or debt_id, **values))
    return debts


def load_debts(file_path: Path, *, encoding: str = "utf-8") -> list[Debt]:
    """Read debts from a CSV file."""

    frame = normalize_frame(file_path=Path(file_path), encoding=encoding)
    mapping = detect_mapping(frame.columns)
    return rows_to_debts(rows=frame.to_dict(orient="records"), mapping=mapping)
