from typing import List
from pydantic import BaseModel, ConfigDict, Field


class SampledReading(BaseModel):
    """A reading selected for audit."""
    model_config = ConfigDict(frozen=True)

    reading_id: str
    position: int = Field(..., ge=0, description="Index of the reading in the batch")
    sampling_rate: float


class SamplingPlan(BaseModel):
    """
    Which readings an auditor should inspect.

    `selected` and `review_queue` are in batch input order.
    """
    model_config = ConfigDict(frozen=True)

    selected: List[SampledReading] = Field(default_factory=list)
    review_queue: List[str] = Field(default_factory=list)
    candidates: int = 0
    target_sample_count: int = 0
    effective_rate: str = "0.0%"
