"""
Graduation Rules

Configurable criteria for promoting a device from strict to
evidence-rich verification.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

# Fixed: not overridable through configuration
MIN_DAYS_SINCE_MAINTENANCE = 30


@dataclass(frozen=True)
class GraduationCriteria:
    """Thresholds for graduation decisions."""
    min_operational_days: int = 180
    max_anomaly_rate_percent: float = 2.0
    min_data_quality_percent: float = 95.0
    vvb_approval_required: bool = False

    @property
    def max_anomaly_rate(self) -> float:
        """Anomaly-rate ceiling as a fraction."""
        return self.max_anomaly_rate_percent / 100

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Default criteria
DEFAULT_CRITERIA = GraduationCriteria()
