"""
Adaptive Sampling Rate

Audit probability for auto-approved readings in evidence-rich mode.

DESIGN RULES:
- Pure function, no side effects
- Result always within [BASE_RATE, MAX_RATE]
"""

from schemas.context import VerificationContext
from schemas.result import VerificationResult


BASE_RATE = 0.05
MAX_RATE = 0.30

NEW_DEVICE_DAYS = 180
NEW_DEVICE_ADJUSTMENT = 0.05
ANOMALY_ADJUSTMENT = 0.10
LOW_TRUST_CUTOFF = 0.92
LOW_TRUST_ADJUSTMENT = 0.05


def is_new_device(context: VerificationContext) -> bool:
    """
    True when the device is younger than NEW_DEVICE_DAYS.

    A device whose age is unknown is treated as new.
    """
    if context.device is None or context.device.operational_days is None:
        return True
    return context.device.operational_days < NEW_DEVICE_DAYS


def calculate_adaptive_sampling_rate(
    result: VerificationResult,
    context: VerificationContext,
) -> float:
    """
    Calculate the audit sampling rate for one reading.

    Args:
        result: Base verification result of the reading
        context: Batch context (device age, recent anomalies)

    Returns:
        Sampling rate in [0.05, 0.30]
    """
    rate = BASE_RATE

    if is_new_device(context):
        rate += NEW_DEVICE_ADJUSTMENT
    if context.anomaly_count > 0:
        rate += ANOMALY_ADJUSTMENT
    if result.trust_score < LOW_TRUST_CUTOFF:
        rate += LOW_TRUST_ADJUSTMENT

    return min(round(rate, 4), MAX_RATE)
