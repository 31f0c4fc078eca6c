"""Service module exports."""

from . import (
    allocation,
    amortization,
    comparison,
    debts,
    export_csv,
    import_csv,
    projections,
    strategies,
    summary,
)

__all__ = [
    "allocation",
    "amortization",
    "comparison",
    "debts",
    "export_csv",
    "import_csv",
    "projections",
    "strategies",
    "summary",
]
