"""
Two-Tier Verification Engine

Mode-aware decision layer on top of a base verifier.

FLOW:
Readings → BaseVerifier → results → ModeRule → decisions
         → EvidenceBundle (evidence-rich, auto-approved only)
         → Sampler → SamplingPlan
         → BatchStats

GUARANTEES:
- Mode is validated when the engine is built, before any scoring
- Base verifier runs exactly once per batch
- One decision per reading, in input order
- No state carries across batches except the immutable config
"""

import logging
import random
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from graduation.evaluator import DeviceHistory, GraduationEvaluator, GraduationReport
from sampler.base import Sampler
from sampler.smart_sampler import SmartSampler
from schemas.context import VerificationContext
from schemas.response import BatchVerificationResponse
from schemas.result import Decision, DecisionKind, VerificationResult
from verification.base import BaseVerifier
from verification.config import VerifierConfig
from verification.evidence import build_evidence_bundle
from verification.exceptions import ResultCountMismatchError
from verification.modes import ThresholdPreset, VerificationMode
from verification.rules import get_rule
from verification.stats import calculate_batch_stats


logger = logging.getLogger(__name__)


class TwoTierVerifier:
    """
    Classifies scored readings into approve / review / reject.

    Holds no business state. All per-batch objects belong to the caller.
    """

    def __init__(
        self,
        base_verifier: BaseVerifier,
        config: Optional[VerifierConfig] = None,
        sampler: Optional[Sampler] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the engine with injected dependencies.

        Args:
            base_verifier: Scores readings (trust score + five sub-checks)
            config: Resolved configuration (strict defaults if not provided)
            sampler: Builds the audit sampling plan (SmartSampler if not provided)
            clock: Timestamp source for evidence bundles

        Raises:
            UnknownModeError: configured mode has no rule
        """
        self._config = config or VerifierConfig()
        self._rule = get_rule(self._config.mode)
        self._base = base_verifier
        self._sampler = sampler or SmartSampler(self._config.sampler)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._graduation = GraduationEvaluator(self._config.graduation)

        logger.info(
            f"TwoTierVerifier initialized: mode={self.mode.value} "
            f"thresholds={self.thresholds.to_dict()}"
        )

    @property
    def mode(self) -> VerificationMode:
        return self._rule.mode

    @property
    def thresholds(self) -> ThresholdPreset:
        return self._rule.thresholds

    @property
    def config(self) -> VerifierConfig:
        return self._config

    def classify(self, result: VerificationResult, context: VerificationContext) -> Decision:
        """Apply the mode's decision rule to one result."""
        return self._rule.classify(result, context, self._rule.thresholds)

    def attach_evidence(
        self,
        decision: Decision,
        context: VerificationContext,
        rng: random.Random,
    ) -> Decision:
        """Return the decision with an evidence bundle, if the mode captures one."""
        if not self._rule.captures_evidence or decision.decision != DecisionKind.AUTO_APPROVED:
            return decision

        bundle = build_evidence_bundle(
            decision,
            context,
            rng,
            now=self._clock(),
            sample_size=self._config.evidence_sample_size,
        )
        return decision.model_copy(update={"evidence_bundle": bundle})

    async def verify_batch(
        self,
        readings: Sequence[Dict[str, Any]],
        context: Optional[VerificationContext] = None,
        seed: Optional[int] = None,
    ) -> BatchVerificationResponse:
        """
        Verify a batch of readings.

        Args:
            readings: Raw readings, forwarded to the base verifier
            context: Batch context (empty context if not provided)
            seed: Seed for evidence and audit sampling (overrides config)

        Returns:
            BatchVerificationResponse with decisions in input order

        Raises:
            ResultCountMismatchError: base verifier dropped or added results
        """
        context = context or VerificationContext()
        logger.debug(f"Verifying {len(readings)} readings in {self.mode.value} mode")

        results = await self._base.verify_batch(readings, context)
        if len(results) != len(readings):
            raise ResultCountMismatchError(expected=len(readings), actual=len(results))

        rng = random.Random(seed if seed is not None else self._config.evidence_seed)

        decisions: List[Decision] = [
            self.attach_evidence(self.classify(result, context), context, rng)
            for result in results
        ]

        sampling_plan = self._sampler.select_samples(decisions, context, rng=rng)
        stats = calculate_batch_stats(decisions)

        logger.info(
            f"Batch verified ({self.mode.value}): total={stats.total} approved={stats.approved} "
            f"flagged={stats.flagged} rejected={stats.rejected} approval_rate={stats.approval_rate}"
        )

        return BatchVerificationResponse(
            decisions=decisions,
            sampling_plan=sampling_plan,
            mode=self.mode.value,
            thresholds=self.thresholds.to_dict(),
            stats=stats,
        )

    def check_graduation_eligibility(self, history: DeviceHistory) -> GraduationReport:
        """Check whether a device may move to evidence-rich mode."""
        report = self._graduation.evaluate(history)
        logger.info(
            f"Graduation check for device={history.device_id}: eligible={report.eligible} "
            f"missing={report.missing_requirements}"
        )
        return report
