from typing import Any, Dict, List
from pydantic import BaseModel, Field

from schemas.result import Decision
from schemas.sampling import SamplingPlan


class BatchStats(BaseModel):
    """Summary counts for one batch of decisions."""
    total: int = 0
    approved: int = 0
    flagged: int = 0
    rejected: int = 0
    approval_rate: str = Field(default="0.0%", description="approved/total as a percentage, one decimal")


class BatchVerificationResponse(BaseModel):
    """
    Complete, machine-readable response from verify_batch.

    `decisions` is in the same order as the submitted readings.
    """
    decisions: List[Decision] = Field(default_factory=list)
    sampling_plan: SamplingPlan
    mode: str = Field(..., description="Verification mode used: strict | evidence-rich")
    thresholds: Dict[str, Any] = Field(..., description="Threshold preset applied to the batch")
    stats: BatchStats
