"""
Verification Modes

Threshold presets for the two verification tiers.

DESIGN RULES:
- Declarative (data, not code)
- Presets are immutable once resolved
- Unknown modes are rejected when resolved, never per reading
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Union

from verification.exceptions import UnknownModeError


class VerificationMode(str, Enum):
    STRICT = "strict"
    EVIDENCE_RICH = "evidence-rich"


DEFAULT_MODE = VerificationMode.STRICT


@dataclass(frozen=True)
class ThresholdPreset:
    """Numeric cutoffs for one verification mode."""
    auto_approve: float
    flag: float
    reject: float
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Preset Definitions
PRESETS: Dict[VerificationMode, ThresholdPreset] = {
    VerificationMode.STRICT: ThresholdPreset(
        auto_approve=0.97,
        flag=0.50,
        reject=0.50,
        description="Regulator-strict mode for pilots",
    ),
    VerificationMode.EVIDENCE_RICH: ThresholdPreset(
        auto_approve=0.90,
        flag=0.70,
        reject=0.70,
        description="Evidence-rich mode for mature plants",
    ),
}


def parse_mode(value: Optional[Union[str, VerificationMode]]) -> VerificationMode:
    """
    Turn a configured mode value into a VerificationMode.

    An absent mode falls back to strict. Anything explicitly configured
    must name a known mode.

    Raises:
        UnknownModeError: value is set but not a known mode
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return DEFAULT_MODE

    if isinstance(value, VerificationMode):
        return value

    if not isinstance(value, str):
        raise UnknownModeError(value)

    try:
        return VerificationMode(value.strip().lower())
    except ValueError:
        raise UnknownModeError(value) from None


def resolve_thresholds(mode: Optional[Union[str, VerificationMode]]) -> ThresholdPreset:
    """Return the preset for a mode, failing fast on unknown modes."""
    return PRESETS[parse_mode(mode)]
