"""
Batch Statistics

Reduces a batch of decisions to summary counts.
"""

from typing import Sequence

from schemas.response import BatchStats
from schemas.result import Decision, DecisionKind


def format_rate(numerator: int, denominator: int) -> str:
    """Percentage with one decimal place; an empty denominator gives 0.0%."""
    if denominator == 0:
        return "0.0%"
    return f"{numerator / denominator * 100:.1f}%"


def calculate_batch_stats(decisions: Sequence[Decision]) -> BatchStats:
    """
    Count decisions per kind.

    An empty batch yields all-zero counts and an approval rate of 0.0%.
    """
    total = len(decisions)
    approved = sum(1 for d in decisions if d.decision == DecisionKind.AUTO_APPROVED)
    flagged = sum(1 for d in decisions if d.decision == DecisionKind.FLAGGED_FOR_REVIEW)
    rejected = sum(1 for d in decisions if d.decision == DecisionKind.REJECTED)

    return BatchStats(
        total=total,
        approved=approved,
        flagged=flagged,
        rejected=rejected,
        approval_rate=format_rate(approved, total),
    )
