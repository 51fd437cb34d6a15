"""
Verification API Routes

Thin delegation layer to the TwoTierVerifier.
Contains NO decision logic.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.dependencies import get_verifier
from graduation.evaluator import DeviceHistory
from schemas.request import VerifyBatchRequest
from schemas.response import BatchVerificationResponse
from verification.engine import TwoTierVerifier
from verification.modes import PRESETS


router = APIRouter()


@router.post("/verify", response_model=BatchVerificationResponse)
async def verify(
    request: VerifyBatchRequest,
    verifier: TwoTierVerifier = Depends(get_verifier),
) -> BatchVerificationResponse:
    """Classify a batch of scored readings."""
    return await verifier.verify_batch(request.readings, request.context, seed=request.seed)


@router.post("/graduation")
def graduation(
    history: DeviceHistory,
    verifier: TwoTierVerifier = Depends(get_verifier),
) -> Dict[str, Any]:
    """Check whether a device may graduate to evidence-rich mode."""
    return verifier.check_graduation_eligibility(history).to_dict()


@router.get("/modes")
def modes() -> Dict[str, Any]:
    """List the threshold preset of every verification mode."""
    return {mode.value: preset.to_dict() for mode, preset in PRESETS.items()}
