"""
Verification Context

Read-only, per-batch inputs shared by every reading in the batch.
Every field is optional; derived values degrade to None when absent.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class DeviceInfo(BaseModel):
    """Device metadata supplied by the caller."""
    model_config = ConfigDict(frozen=True, extra="allow")

    device_id: Optional[str] = None
    operational_days: Optional[int] = Field(default=None, ge=0)
    recent_anomalies: Optional[int] = Field(default=None, ge=0)


class StatisticalSummary(BaseModel):
    """Precomputed statistics over the device's recent readings."""
    model_config = ConfigDict(frozen=True, extra="allow")

    mean: Optional[float] = None
    std_dev: Optional[float] = None
    outliers: Optional[List[Any]] = None
    z_scores: Optional[List[float]] = None


class Baseline(BaseModel):
    """Historical averages for a device or for the whole fleet."""
    model_config = ConfigDict(frozen=True, extra="allow")

    avg_generation: float = Field(..., ge=0.0, allow_inf_nan=False)
    avg_flow: float = Field(..., ge=0.0, allow_inf_nan=False)


class VerificationContext(BaseModel):
    """
    Per-batch context.

    Recent anomalies may be reported on the context or on the device;
    both count.

    Treated as read-only; the engine never mutates it.
    """
    model_config = ConfigDict(frozen=True)

    device: Optional[DeviceInfo] = None
    recent_anomalies: int = Field(default=0, ge=0)
    recent_readings: List[Dict[str, Any]] = Field(default_factory=list)
    stats: Optional[StatisticalSummary] = None
    device_baseline: Optional[Baseline] = None
    fleet_baseline: Optional[Baseline] = None

    @property
    def anomaly_count(self) -> int:
        """Recent anomalies from either location; the larger report wins."""
        device_count = self.device.recent_anomalies if self.device else None
        return max(self.recent_anomalies, device_count or 0)
