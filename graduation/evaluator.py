"""
Graduation Evaluator

Evaluates whether a device may graduate from strict (Mode A) to
evidence-rich (Mode B) verification.

Checks, in report order:
    operational_time   operational_days >= min_operational_days
    anomaly_rate       anomaly_rate <= max_anomaly_rate_percent / 100
    data_quality       data_quality >= min_data_quality_percent
    vvb_approval       not required, or status is APPROVED
    stability          days_since_last_maintenance >= 30
"""

import json
import sys
from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from graduation.rules import (
    DEFAULT_CRITERIA,
    MIN_DAYS_SINCE_MAINTENANCE,
    GraduationCriteria,
)


ELIGIBLE_RECOMMENDATION = "Device eligible for evidence-rich graduation"
INELIGIBLE_RECOMMENDATION = "Device must remain in strict mode"


class VvbApprovalStatus(str, Enum):
    APPROVED = "APPROVED"
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    NOT_SUBMITTED = "NOT_SUBMITTED"


class DeviceHistory(BaseModel):
    """Historical operating record of a device."""
    model_config = ConfigDict(frozen=True)

    device_id: Optional[str] = None
    operational_days: int = Field(..., ge=0)
    anomaly_rate: float = Field(..., ge=0.0, le=1.0, description="Fraction of anomalous readings")
    data_quality: float = Field(..., ge=0.0, le=100.0, description="Data quality percent")
    vvb_approval_status: VvbApprovalStatus = VvbApprovalStatus.NOT_SUBMITTED
    days_since_last_maintenance: int = Field(..., ge=0)


@dataclass
class GraduationReport:
    """Result of graduation evaluation."""
    eligible: bool
    checks: Dict[str, bool]
    recommendation: str
    missing_requirements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class GraduationEvaluator:
    """
    Evaluates whether a device can be promoted to evidence-rich mode.
    """

    def __init__(self, criteria: Optional[GraduationCriteria] = None):
        self._criteria = criteria or DEFAULT_CRITERIA

    @property
    def criteria(self) -> GraduationCriteria:
        return self._criteria

    def evaluate(self, history: DeviceHistory) -> GraduationReport:
        """
        Evaluate graduation readiness.

        Args:
            history: Device operating record

        Returns:
            GraduationReport; missing_requirements follows check order
        """
        criteria = self._criteria

        checks = {
            "operational_time": history.operational_days >= criteria.min_operational_days,
            "anomaly_rate": history.anomaly_rate <= criteria.max_anomaly_rate,
            "data_quality": history.data_quality >= criteria.min_data_quality_percent,
            "vvb_approval": (
                not criteria.vvb_approval_required
                or history.vvb_approval_status == VvbApprovalStatus.APPROVED
            ),
            "stability": history.days_since_last_maintenance >= MIN_DAYS_SINCE_MAINTENANCE,
        }

        eligible = all(checks.values())

        return GraduationReport(
            eligible=eligible,
            checks=checks,
            recommendation=ELIGIBLE_RECOMMENDATION if eligible else INELIGIBLE_RECOMMENDATION,
            missing_requirements=[name for name, passed in checks.items() if not passed],
        )


def check_graduation_eligibility(
    history: DeviceHistory,
    criteria: Optional[GraduationCriteria] = None,
) -> GraduationReport:
    """Convenience wrapper around GraduationEvaluator."""
    return GraduationEvaluator(criteria).evaluate(history)


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Device Graduation Check")
    parser.add_argument("--history", required=True, help="JSON file with the device history")
    parser.add_argument("--min-days", type=int, help="Override minimum operational days")
    parser.add_argument("--max-anomaly-pct", type=float, help="Override max anomaly rate (percent)")
    parser.add_argument("--min-quality", type=float, help="Override min data quality (percent)")
    parser.add_argument("--require-vvb", action="store_true", help="Require VVB approval")

    args = parser.parse_args(argv)

    with open(args.history, "r") as f:
        history = DeviceHistory.model_validate(json.load(f))

    # Build criteria
    overrides: Dict[str, Any] = {}
    if args.min_days is not None:
        overrides["min_operational_days"] = args.min_days
    if args.max_anomaly_pct is not None:
        overrides["max_anomaly_rate_percent"] = args.max_anomaly_pct
    if args.min_quality is not None:
        overrides["min_data_quality_percent"] = args.min_quality
    if args.require_vvb:
        overrides["vvb_approval_required"] = True

    report = check_graduation_eligibility(history, GraduationCriteria(**overrides))
    print(json.dumps(report.to_dict(), indent=2))
    return 0 if report.eligible else 1


# CLI entry point
if __name__ == "__main__":
    sys.exit(main())
