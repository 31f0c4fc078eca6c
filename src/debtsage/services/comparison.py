"""Snowball versus avalanche comparison and recommendation."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable

from ..config import DEFAULT_RECOMMENDATION_THRESHOLD
from ..logging_config import get_logger
from ..models.debt import Debt, LumpSum, to_decimal
from ..models.projection import ProjectionResult, Recommendation, StrategyComparison
from ..models.strategy import Strategy
from .debts import MAX_PERIODS, project_payoff

logger = get_logger(__name__)

COMPARED_STRATEGIES = (Strategy.SNOWBALL, Strategy.AVALANCHE)


def recommend(
    snowball: ProjectionResult,
    avalanche: ProjectionResult,
    *,
    threshold: Decimal = DEFAULT_RECOMMENDATION_THRESHOLD,
) -> Recommendation:
    """Pick avalanche only when it saves more than ``threshold`` in interest."""

    savings = snowball.total_interest_paid - avalanche.total_interest_paid
    if savings > threshold:
        return Recommendation(
            recommended=Strategy.AVALANCHE,
            reason=f"Avalanche saves {savings} in interest compared to snowball.",
            interest_savings=savings,
        )
    return Recommendation(
        recommended=Strategy.SNOWBALL,
        reason=(
            "Snowball clears the smallest balances first; the quick wins help you "
            "stay motivated and the interest difference is small."
        ),
        interest_savings=savings,
    )


def compare_strategies(
    debts: Iterable[Debt],
    monthly_extra: Decimal | int | float | str,
    start: date | str,
    lump_sums: Iterable[LumpSum] = (),
    *,
    threshold: Decimal | int | float | str = DEFAULT_RECOMMENDATION_THRESHOLD,
    max_periods: int = MAX_PERIODS,
) -> StrategyComparison:
    """Run snowball and avalanche on the same inputs and recommend one."""

    debts = list(debts)
    lump_sums = list(lump_sums)
    results = {
        strategy: project_payoff(
            debts, strategy, monthly_extra, start, lump_sums, max_periods=max_periods
        )
        for strategy in COMPARED_STRATEGIES
    }
    recommendation = recommend(
        results[Strategy.SNOWBALL],
        results[Strategy.AVALANCHE],
        threshold=to_decimal(threshold, field_name="threshold"),
    )
    logger.debug(
        "Compared payoff strategies",
        extra={
            "recommended": recommendation.recommended.value,
            "interest_savings": str(recommendation.interest_savings),
        },
    )
    return StrategyComparison(
        comparisons=tuple(results[strategy] for strategy in COMPARED_STRATEGIES),
        recommendation=recommendation,
    )


__all__ = ["COMPARED_STRATEGIES", "compare_strategies", "recommend"]
