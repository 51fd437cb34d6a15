"""
Evidence Bundle Builder

Assembles the audit record attached to auto-approved readings in
evidence-rich mode.

DESIGN RULES:
- Pure function: randomness and time are injected
- Missing context degrades to None, never raises
- Zero baselines raise BaselineDivisionError
"""

import random
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from schemas.context import VerificationContext
from schemas.result import (
    BaselineComparison,
    EvidenceBundle,
    TrustScoreCalculation,
    VerificationResult,
)
from verification.exceptions import BaselineDivisionError


TRUST_SCORE_FORMULA = "0.30*P + 0.25*T + 0.20*E + 0.15*S + 0.10*C"

DEFAULT_SAMPLE_SIZE = 5

CHECK_NAMES = ("physics", "temporal", "environmental", "statistical", "consistency")

# Formula operand -> sub-check
OPERANDS = {
    "P": "physics",
    "T": "temporal",
    "E": "environmental",
    "S": "statistical",
    "C": "consistency",
}


def select_sample_readings(
    readings: Sequence[Dict[str, Any]],
    count: int,
    rng: random.Random,
) -> List[Dict[str, Any]]:
    """Draw up to `count` readings without replacement."""
    if count <= 0 or not readings:
        return []
    return rng.sample(list(readings), min(count, len(readings)))


def _relative_deviation(metric: str, observed: Optional[float], average: float) -> Optional[float]:
    if average == 0:
        raise BaselineDivisionError(metric)
    if observed is None:
        return None
    return abs(observed - average) / average


def calculate_deviation(
    result: VerificationResult,
    context: VerificationContext,
) -> Optional[Dict[str, Optional[float]]]:
    """
    Relative deviation of the reading from the device baseline.

    Returns:
        None without a device baseline, otherwise a dict with
        `generation` and `flow` (each None if the reading lacks it)

    Raises:
        BaselineDivisionError: a baseline average is zero
    """
    baseline = context.device_baseline
    if baseline is None:
        return None

    return {
        "generation": _relative_deviation("generation", result.generation, baseline.avg_generation),
        "flow": _relative_deviation("flow", result.flow, baseline.avg_flow),
    }


def build_evidence_bundle(
    result: VerificationResult,
    context: VerificationContext,
    rng: random.Random,
    now: Optional[datetime] = None,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> EvidenceBundle:
    """
    Build the evidence bundle for one auto-approved reading.

    Args:
        result: Base verification result (or the decision built from it)
        context: Batch context
        rng: Random source for the recent-reading sample
        now: Generation timestamp (defaults to current UTC time)
        sample_size: Maximum number of recent readings to include
    """
    checks = result.checks
    derivation_log = {name: getattr(checks, name).model_dump() for name in CHECK_NAMES}
    values = {operand: getattr(checks, name).score for operand, name in OPERANDS.items()}

    stats = context.stats
    statistical_summary = {
        "mean": stats.mean if stats else None,
        "std_dev": stats.std_dev if stats else None,
        "outliers": stats.outliers if stats else None,
        "z_scores": stats.z_scores if stats else None,
    }

    return EvidenceBundle(
        timestamp=now or datetime.now(timezone.utc),
        reading_id=result.reading_id,
        derivation_log=derivation_log,
        trust_score_calculation=TrustScoreCalculation(
            formula=TRUST_SCORE_FORMULA,
            values=values,
            result=result.trust_score,
        ),
        sample_readings=select_sample_readings(context.recent_readings, sample_size, rng),
        statistical_summary=statistical_summary,
        baseline_comparison=BaselineComparison(
            device_baseline=context.device_baseline.model_dump() if context.device_baseline else None,
            fleet_baseline=context.fleet_baseline.model_dump() if context.fleet_baseline else None,
            deviation=calculate_deviation(result, context),
        ),
    )
