# Sampler Package
from sampler.base import Sampler
from sampler.smart_sampler import SamplerConfig, SmartSampler

__all__ = ["Sampler", "SamplerConfig", "SmartSampler"]
