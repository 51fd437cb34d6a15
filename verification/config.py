"""
Verifier Configuration

Resolved once, when the engine is built. Downstream code reads a fully
populated, immutable value and never checks for absence.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from graduation.rules import GraduationCriteria
from sampler.smart_sampler import SamplerConfig
from verification.evidence import DEFAULT_SAMPLE_SIZE
from verification.modes import DEFAULT_MODE, VerificationMode, parse_mode


@dataclass(frozen=True)
class VerifierConfig:
    """
    Complete decision-engine configuration.

    Attributes:
        mode: Verification mode (strict | evidence-rich)
        graduation: Criteria for promoting a device to evidence-rich
        sampler: Default sampler settings
        evidence_sample_size: Max recent readings copied into a bundle
        evidence_seed: Seed for per-batch randomness (None = unseeded)
    """
    mode: VerificationMode = DEFAULT_MODE
    graduation: GraduationCriteria = field(default_factory=GraduationCriteria)
    sampler: SamplerConfig = field(default_factory=SamplerConfig)
    evidence_sample_size: int = DEFAULT_SAMPLE_SIZE
    evidence_seed: Optional[int] = None

    def __post_init__(self):
        # Accept plain strings, but fail here rather than mid-batch
        object.__setattr__(self, "mode", parse_mode(self.mode))

    @classmethod
    def from_settings(cls, settings: Any) -> "VerifierConfig":
        """
        Resolve application settings into a VerifierConfig.

        Raises:
            UnknownModeError: settings name an unknown mode
        """
        return cls(
            mode=parse_mode(settings.verification_mode),
            graduation=GraduationCriteria(
                min_operational_days=settings.min_operational_days,
                max_anomaly_rate_percent=settings.max_anomaly_rate_percent,
                min_data_quality_percent=settings.min_data_quality_percent,
                vvb_approval_required=settings.vvb_approval_required,
            ),
            sampler=SamplerConfig(
                min_samples=settings.sampler_min_samples,
                include_flagged=settings.sampler_include_flagged,
            ),
            evidence_sample_size=settings.evidence_sample_size,
            evidence_seed=settings.evidence_seed,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "graduation": self.graduation.to_dict(),
            "sampler": self.sampler.to_dict(),
            "evidence_sample_size": self.evidence_sample_size,
            "evidence_seed": self.evidence_seed,
        }
