"""
Base Verifier Boundary

The decision engine does not score readings. It delegates to any
BaseVerifier, which returns one VerificationResult per reading, in order.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError

from schemas.context import VerificationContext
from schemas.result import VerificationResult
from verification.exceptions import InvalidReadingError


class BaseVerifier(ABC):
    """
    Scores a batch of readings.

    Implementations compute the five weighted sub-checks and the
    composite trust score.
    """

    @abstractmethod
    async def verify_batch(
        self,
        readings: Sequence[Dict[str, Any]],
        context: VerificationContext,
    ) -> List[VerificationResult]:
        """Return one result per reading, in the same order."""
        pass


class PrecomputedVerifier(BaseVerifier):
    """
    Accepts readings already scored by an upstream engine.

    Each reading must carry `reading_id`, `trust_score` and `checks`.
    """

    async def verify_batch(
        self,
        readings: Sequence[Dict[str, Any]],
        context: VerificationContext,
    ) -> List[VerificationResult]:
        results = []
        for position, reading in enumerate(readings):
            try:
                results.append(VerificationResult.model_validate(reading))
            except ValidationError as e:
                raise InvalidReadingError(position, str(e)) from e
        return results
