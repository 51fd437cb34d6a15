"""
Decision Rules

One classification rule per verification mode.
Rules are looked up once, when the engine is built.

Bands, evaluated top-down (first match wins):
    trust >= auto_approve          -> AUTO_APPROVED
    flag <= trust < auto_approve   -> FLAGGED_FOR_REVIEW
    trust < reject                 -> REJECTED
"""

from dataclasses import dataclass
from typing import Callable, Dict

from schemas.context import VerificationContext
from schemas.result import Decision, DecisionKind, VerificationResult
from verification.exceptions import UnknownModeError
from verification.modes import PRESETS, ThresholdPreset, VerificationMode
from verification.sampling import calculate_adaptive_sampling_rate


STRICT_SAMPLING_RATE = 0.30

ClassifyFn = Callable[[VerificationResult, VerificationContext, ThresholdPreset], Decision]


def classify_strict(
    result: VerificationResult,
    context: VerificationContext,
    thresholds: ThresholdPreset,
) -> Decision:
    """Mode A: conservative auto-approval with fixed 30% sampling."""
    trust = result.trust_score

    if trust >= thresholds.auto_approve:
        return Decision.from_result(
            result,
            DecisionKind.AUTO_APPROVED,
            f"Mode A (strict): trust {trust} >= {thresholds.auto_approve:.2f} "
            f"auto-approve threshold, auto-approved with {STRICT_SAMPLING_RATE:.0%} sampling",
            requires_sampling=True,
            sampling_rate=STRICT_SAMPLING_RATE,
        )

    if trust >= thresholds.flag:
        return Decision.from_result(
            result,
            DecisionKind.FLAGGED_FOR_REVIEW,
            f"Mode A (strict): trust {trust} below {thresholds.auto_approve:.2f} "
            f"auto-approve threshold and >= {thresholds.flag:.2f}, flagged for human review",
            requires_sampling=False,
        )

    return Decision.from_result(
        result,
        DecisionKind.REJECTED,
        f"Mode A (strict): trust {trust} < {thresholds.reject:.2f} reject threshold, rejected",
    )


def classify_evidence_rich(
    result: VerificationResult,
    context: VerificationContext,
    thresholds: ThresholdPreset,
) -> Decision:
    """Mode B: wider auto-approval band with adaptive sampling and evidence."""
    trust = result.trust_score

    if trust >= thresholds.auto_approve:
        sampling_rate = calculate_adaptive_sampling_rate(result, context)
        return Decision.from_result(
            result,
            DecisionKind.AUTO_APPROVED,
            f"Mode B (evidence-rich): trust {trust} >= {thresholds.auto_approve:.2f} "
            f"auto-approve threshold, auto-approved with {sampling_rate * 100:.1f}% adaptive sampling",
            requires_sampling=True,
            sampling_rate=sampling_rate,
            evidence_generated=True,
        )

    if trust >= thresholds.flag:
        return Decision.from_result(
            result,
            DecisionKind.FLAGGED_FOR_REVIEW,
            f"Mode B (evidence-rich): trust {trust} in {thresholds.flag:.2f}-"
            f"{thresholds.auto_approve:.2f} review band, flagged for targeted review",
        )

    return Decision.from_result(
        result,
        DecisionKind.REJECTED,
        f"Mode B (evidence-rich): trust {trust} < {thresholds.reject:.2f} reject threshold, rejected",
    )


@dataclass(frozen=True)
class ModeRule:
    """Classification strategy bound to a mode."""
    mode: VerificationMode
    thresholds: ThresholdPreset
    classify: ClassifyFn
    captures_evidence: bool


MODE_RULES: Dict[VerificationMode, ModeRule] = {
    VerificationMode.STRICT: ModeRule(
        mode=VerificationMode.STRICT,
        thresholds=PRESETS[VerificationMode.STRICT],
        classify=classify_strict,
        captures_evidence=False,
    ),
    VerificationMode.EVIDENCE_RICH: ModeRule(
        mode=VerificationMode.EVIDENCE_RICH,
        thresholds=PRESETS[VerificationMode.EVIDENCE_RICH],
        classify=classify_evidence_rich,
        captures_evidence=True,
    ),
}


def get_rule(mode: VerificationMode) -> ModeRule:
    """Look up the rule for a mode; a mode without a rule is a configuration error."""
    try:
        return MODE_RULES[mode]
    except KeyError:
        raise UnknownModeError(mode) from None
