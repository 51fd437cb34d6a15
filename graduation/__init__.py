# Graduation Package
from graduation.rules import GraduationCriteria, DEFAULT_CRITERIA
from graduation.evaluator import (
    DeviceHistory,
    GraduationEvaluator,
    GraduationReport,
    VvbApprovalStatus,
    check_graduation_eligibility,
)

__all__ = [
    "GraduationCriteria",
    "DEFAULT_CRITERIA",
    "DeviceHistory",
    "GraduationEvaluator",
    "GraduationReport",
    "VvbApprovalStatus",
    "check_graduation_eligibility",
]
