"""
Smart Sampler

Default audit sampler.

Selection:
- Candidates are decisions that require sampling
- Target count = ceil(sum of candidate sampling rates),
  at least `min_samples`, at most the number of candidates
- Picks without replacement, reported in batch order
- Flagged readings go to the human review queue
"""

import logging
import math
import random
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Sequence

from sampler.base import Sampler
from schemas.context import VerificationContext
from schemas.result import Decision, DecisionKind
from schemas.sampling import SampledReading, SamplingPlan
from verification.stats import format_rate


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SamplerConfig:
    """Tunable sampler behaviour."""
    min_samples: int = 1
    include_flagged: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class SmartSampler(Sampler):
    """
    Rate-driven sampler over auto-approved readings.
    """

    def __init__(self, config: Optional[SamplerConfig] = None):
        self._config = config or SamplerConfig()

    def select_samples(
        self,
        decisions: Sequence[Decision],
        context: VerificationContext,
        rng: Optional[random.Random] = None,
    ) -> SamplingPlan:
        rng = rng or random.Random()

        candidates = [
            (position, decision)
            for position, decision in enumerate(decisions)
            if decision.requires_sampling
        ]

        target = 0
        if candidates:
            expected = sum(decision.sampling_rate or 0.0 for _, decision in candidates)
            target = min(len(candidates), max(self._config.min_samples, math.ceil(round(expected, 6))))

        picked = sorted(rng.sample(candidates, target), key=lambda item: item[0])

        review_queue = []
        if self._config.include_flagged:
            review_queue = [
                d.reading_id for d in decisions if d.decision == DecisionKind.FLAGGED_FOR_REVIEW
            ]

        logger.debug(
            f"Sampling plan: {target}/{len(candidates)} candidates selected, "
            f"{len(review_queue)} queued for review"
        )

        return SamplingPlan(
            selected=[
                SampledReading(
                    reading_id=decision.reading_id,
                    position=position,
                    sampling_rate=decision.sampling_rate or 0.0,
                )
                for position, decision in picked
            ],
            review_queue=review_queue,
            candidates=len(candidates),
            target_sample_count=target,
            effective_rate=format_rate(target, len(candidates)),
        )
