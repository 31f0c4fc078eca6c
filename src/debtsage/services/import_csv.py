"""CSV ingestion for debts and lump sums."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

import pandas as pd
from pydantic import ValidationError

from ..forms import DebtForm, LumpSumForm, validation_errors
from ..logging_config import get_logger
from ..models.debt import Debt, LumpSum

logger = get_logger(__name__)

# Alternate header spellings accepted for each form field.
DEBT_COLUMN_ALIASES = {
    "id": ("id", "debt_id"),
    "name": ("name",),
    "balance": ("balance", "current_balance"),
    "original_amount": ("original_amount", "original"),
    "interest_rate": ("interest_rate", "apr", "rate"),
    "minimum_payment": ("minimum_payment", "min_payment", "minimum"),
    "payment_interval": ("payment_interval", "interval"),
    "priority": ("priority",),
}

LUMP_SUM_COLUMN_ALIASES = {
    "amount": ("amount",),
    "month": ("month", "period", "period_key"),
    "description": ("description", "memo"),
}


class CsvImportError(ValueError):
    """Raised when a CSV row fails validation."""

    def __init__(self, path: Path, row_number: int, errors: dict[str, list[str]]):
        self.path = path
        self.row_number = row_number
        self.errors = errors
        details = "; ".join(f"{field}: {', '.join(msgs)}" for field, msgs in errors.items())
        super().__init__(f"{path.name} row {row_number}: {details}")


def normalize_frame(*, file_path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """Load a CSV file as strings with lower-cased, underscored headers."""

    frame = pd.read_csv(file_path, encoding=encoding, dtype=str, keep_default_na=False)
    frame.columns = [c.strip().lower().replace(" ", "_") for c in frame.columns]
    return frame


def _map_row(row: Mapping[str, str], aliases: Mapping[str, Iterable[str]]) -> dict[str, str]:
    mapped: dict[str, str] = {}
    for field_name, candidates in aliases.items():
        for column in candidates:
            if column in row:
                mapped[field_name] = row[column]
                break
    return mapped


def _rows(frame: pd.DataFrame) -> list[dict[str, str]]:
    return [{c: r[c] for c in frame.columns} for _, r in frame.iterrows()]


def read_debts_csv(csv_path: Path) -> list[Debt]:
    """Parse and validate a debts CSV into engine records.

    Row numbers in errors count the header as row 1.
    """

    frame = normalize_frame(file_path=csv_path)
    debts: list[Debt] = []
    for index, row in enumerate(_rows(frame), start=2):
        try:
            debts.append(DebtForm.model_validate(_map_row(row, DEBT_COLUMN_ALIASES)).to_debt())
        except ValidationError as exc:
            raise CsvImportError(csv_path, index, validation_errors(exc)) from exc
    logger.info("Imported debts", extra={"path": str(csv_path), "count": len(debts)})
    return debts


def read_lump_sums_csv(csv_path: Path) -> list[LumpSum]:
    """Parse and validate a lump-sum CSV (amount, month, description)."""

    frame = normalize_frame(file_path=csv_path)
    lump_sums: list[LumpSum] = []
    for index, row in enumerate(_rows(frame), start=2):
        try:
            form = LumpSumForm.model_validate(_map_row(row, LUMP_SUM_COLUMN_ALIASES))
        except ValidationError as exc:
            raise CsvImportError(csv_path, index, validation_errors(exc)) from exc
        lump_sums.append(form.to_lump_sum())
    logger.info("Imported lump sums", extra={"path": str(csv_path), "count": len(lump_sums)})
    return lump_sums


__all__ = ["CsvImportError", "normalize_frame", "read_debts_csv", "read_lump_sums_csv"]
