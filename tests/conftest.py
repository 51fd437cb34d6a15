import pytest
from typing import Any, Dict, List, Sequence
from unittest.mock import AsyncMock

from schemas.context import Baseline, DeviceInfo, StatisticalSummary, VerificationContext
from schemas.result import VerificationResult
from verification.base import BaseVerifier


def build_reading(
    trust_score: float,
    reading_id: str = "r-1",
    generation: float = 105.0,
    flow: float = 2.2,
    **extra: Any,
) -> Dict[str, Any]:
    """A scored reading as an upstream engine would emit it."""
    return {
        "reading_id": reading_id,
        "trust_score": trust_score,
        "generation": generation,
        "flow": flow,
        "checks": {
            "physics": {"score": 0.98, "status": "PASS", "efficiency": 0.86},
            "temporal": {"score": 0.95, "status": "PASS"},
            "environmental": {"score": 0.90, "status": "PASS"},
            "statistical": {"score": 0.92, "status": "PASS", "z_score": 0.4},
            "consistency": {"score": 1.0, "status": "PASS"},
        },
        **extra,
    }


def build_result(trust_score: float, reading_id: str = "r-1", **kwargs: Any) -> VerificationResult:
    return VerificationResult.model_validate(build_reading(trust_score, reading_id, **kwargs))


class FakeBaseVerifier(BaseVerifier):
    """Turns readings into results without scoring; records every call."""

    def __init__(self):
        self.calls = 0

    async def verify_batch(
        self,
        readings: Sequence[Dict[str, Any]],
        context: VerificationContext,
    ) -> List[VerificationResult]:
        self.calls += 1
        return [VerificationResult.model_validate(r) for r in readings]


@pytest.fixture
def base_verifier():
    return FakeBaseVerifier()


@pytest.fixture
def mock_base_verifier():
    mock = AsyncMock(spec=BaseVerifier)
    mock.verify_batch = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def recent_readings():
    return [{"reading_id": f"hist-{i}", "generation": 100.0 + i} for i in range(12)]


@pytest.fixture
def mature_context(recent_readings):
    """Mature device, no anomalies, full baselines."""
    return VerificationContext(
        device=DeviceInfo(device_id="plant-7", operational_days=400),
        recent_anomalies=0,
        recent_readings=recent_readings,
        stats=StatisticalSummary(mean=101.5, std_dev=3.2, outliers=[], z_scores=[0.1, -0.4, 0.9]),
        device_baseline=Baseline(avg_generation=100.0, avg_flow=2.0),
        fleet_baseline=Baseline(avg_generation=95.0, avg_flow=2.1),
    )


@pytest.fixture
def empty_context():
    return VerificationContext()
