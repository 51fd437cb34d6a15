from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


# --- Base Verifier Output ---

class CheckDetail(BaseModel):
    """
    One weighted sub-check produced by the base verifier.

    Only `score` is required. Any further detail (status, reason,
    nested measurements) is preserved verbatim for the derivation log.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    score: float = Field(..., allow_inf_nan=False)


class CheckSet(BaseModel):
    """The five named sub-checks behind a trust score."""
    model_config = ConfigDict(frozen=True)

    physics: CheckDetail
    temporal: CheckDetail
    environmental: CheckDetail
    statistical: CheckDetail
    consistency: CheckDetail


class VerificationResult(BaseModel):
    """
    Per-reading output of the base verifier.

    `trust_score` is conceptually in [0, 1] but is not clamped here.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    reading_id: str
    trust_score: float = Field(..., allow_inf_nan=False)
    checks: CheckSet
    generation: Optional[float] = Field(default=None, allow_inf_nan=False, description="Observed generation (kW)")
    flow: Optional[float] = Field(default=None, allow_inf_nan=False, description="Observed flow rate (m3/s)")
    verified: Optional[bool] = None


# --- Decision Engine Output ---

class DecisionKind(str, Enum):
    """Disposition of a single reading."""
    AUTO_APPROVED = "AUTO_APPROVED"
    FLAGGED_FOR_REVIEW = "FLAGGED_FOR_REVIEW"
    REJECTED = "REJECTED"


class TrustScoreCalculation(BaseModel):
    """The trust-score formula with its operand values."""
    model_config = ConfigDict(frozen=True)

    formula: str
    values: Dict[str, float]
    result: float


class BaselineComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    device_baseline: Optional[Dict[str, Any]] = None
    fleet_baseline: Optional[Dict[str, Any]] = None
    deviation: Optional[Dict[str, Optional[float]]] = None


class EvidenceBundle(BaseModel):
    """
    Audit-ready snapshot justifying an auto-approval.

    Built only for AUTO_APPROVED readings in evidence-rich mode.
    """
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    reading_id: str
    derivation_log: Dict[str, Dict[str, Any]]
    trust_score_calculation: TrustScoreCalculation
    sample_readings: List[Dict[str, Any]] = Field(default_factory=list)
    statistical_summary: Dict[str, Any] = Field(default_factory=dict)
    baseline_comparison: BaselineComparison


class Decision(VerificationResult):
    """
    A verification result with its disposition attached.

    Carries every field of the originating VerificationResult.
    """
    decision: DecisionKind
    reasoning: str = Field(..., description="Trace of the rule that produced the decision")
    requires_sampling: bool = False
    sampling_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    evidence_generated: bool = False
    evidence_bundle: Optional[EvidenceBundle] = None

    @classmethod
    def from_result(
        cls,
        result: VerificationResult,
        decision: DecisionKind,
        reasoning: str,
        **fields: Any,
    ) -> "Decision":
        """Build a Decision that keeps all fields of `result`."""
        data = result.model_dump()
        data.update(fields, decision=decision, reasoning=reasoning)
        return cls(**data)
