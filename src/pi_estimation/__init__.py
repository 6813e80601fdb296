"""
Monte Carlo estimation of pi by sampling the unit square.
"""

from .errors import InvalidArgumentError
from .sampler import QuarterCircleSampler, SamplingResult, estimate_pi, is_inside

__all__ = [
    "InvalidArgumentError",
    "QuarterCircleSampler",
    "SamplingResult",
    "estimate_pi",
    "is_inside",
]
