"""
FastAPI Dependencies

All object creation happens here, not per request.

RULE: routes call the engine, never the rules or builders directly.
"""

from functools import lru_cache

from app.core.config import settings
from verification.base import PrecomputedVerifier
from verification.config import VerifierConfig
from verification.engine import TwoTierVerifier


@lru_cache(maxsize=1)
def get_verifier() -> TwoTierVerifier:
    """
    Create and cache the TwoTierVerifier singleton.

    Components wired here:
    - VerifierConfig: resolved from settings (fails on unknown mode)
    - PrecomputedVerifier: readings arrive already scored upstream
    - SmartSampler: built by the engine from the sampler config

    Returns:
        TwoTierVerifier
    """
    config = VerifierConfig.from_settings(settings)
    return TwoTierVerifier(base_verifier=PrecomputedVerifier(), config=config)
