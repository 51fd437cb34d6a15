from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from schemas.context import VerificationContext


class VerifyBatchRequest(BaseModel):
    """
    API request model for the /verify endpoint.

    This is the external contract clients send.
    Readings must already carry `trust_score` and `checks` from the
    upstream scoring engine.
    """
    readings: List[Dict[str, Any]] = Field(..., description="Scored telemetry readings")
    context: VerificationContext = Field(default_factory=VerificationContext)
    seed: Optional[int] = Field(default=None, description="Seed for evidence and audit sampling")
