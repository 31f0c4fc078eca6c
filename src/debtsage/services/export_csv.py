"""CSV export of payoff schedules."""

from __future__ import annotations

import csv
from pathlib import Path

from ..models.projection import ProjectionResult

HEADERS = [
    "period",
    "debt_id",
    "payment",
    "principal",
    "interest",
    "remaining_balance",
    "written_off",
]


def export_schedule_csv(*, result: ProjectionResult, output_path: Path) -> Path:
    """Write one row per debt per period to ``output_path``.

    Amounts are written unrounded so the file reproduces the simulation
    exactly. Returns the path written.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=HEADERS, quoting=csv.QUOTE_MINIMAL)
        writer.writeheader()
        for period in result.schedule:
            for payment in period.payments:
                writer.writerow(
                    {
                        "period": period.period_key,
                        "debt_id": str(payment.debt_id),
                        "payment": str(payment.payment),
                        "principal": str(payment.principal),
                        "interest": str(payment.interest),
                        "remaining_balance": str(payment.remaining_balance),
                        "written_off": str(payment.written_off),
                    }
                )

    return output_path


__all__ = ["HEADERS", "export_schedule_csv"]
