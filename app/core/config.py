from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application configuration settings.
    """
    model_config = SettingsConfigDict(env_prefix="TWO_TIER_VERIFIER_", env_file=".env", extra="ignore")

    # Service Info
    service_name: str = "two-tier-verifier"
    environment: str = "local"
    log_level: str = "INFO"
    
    # API 
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    
    # Verification
    verification_mode: Optional[str] = "strict"  # strict | evidence-rich
    evidence_sample_size: int = 5
    evidence_seed: Optional[int] = None
    
    # Graduation criteria
    min_operational_days: int = 180
    max_anomaly_rate_percent: float = 2.0
    min_data_quality_percent: float = 95.0
    vvb_approval_required: bool = False
    
    # Sampler
    sampler_min_samples: int = 1
    sampler_include_flagged: bool = True
    

settings = Settings()
