"""
Sampler Interface

Turns a batch of decisions into an audit sampling plan.
The decision engine only sets rates; samplers pick the readings.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from schemas.context import VerificationContext
from schemas.result import Decision
from schemas.sampling import SamplingPlan


class Sampler(ABC):
    """
    Abstract base class for audit samplers.

    Implement `select_samples()` to define the selection strategy.
    """

    @abstractmethod
    def select_samples(
        self,
        decisions: Sequence[Decision],
        context: VerificationContext,
        rng: Optional[random.Random] = None,
    ) -> SamplingPlan:
        """
        Build a sampling plan for one batch.

        Args:
            decisions: Decisions in batch input order
            context: Batch context (read-only)
            rng: Random source; implementations must not use global state

        Returns:
            SamplingPlan
        """
        pass
