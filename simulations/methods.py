# simulations/methods.py

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from .common import ExperimentSpec, ExperimentResult, Timer

from pi_estimation import InvalidArgumentError, QuarterCircleSampler, SamplingResult

logger = logging.getLogger(__name__)


SimFn = Callable[[ExperimentSpec, int], ExperimentResult]


def trial_seed(seed: int, trial: int) -> int:
    """
    Seed for trial `trial` (0-based). Trials never share a stream.
    """
    return seed + 1000 * (trial + 1)


def simulate_reference(spec: ExperimentSpec, seed: int) -> ExperimentResult:
    """
    Reference sampling: every trial keeps its full coordinate lists.

    Only the last trial's SamplingResult is attached to the result, which is
    enough for a scatter view without holding every trial in memory.
    """
    estimates: List[float] = []
    last: Optional[SamplingResult] = None

    with Timer() as t:
        for i in range(spec.trials):
            sampler = QuarterCircleSampler(seed=trial_seed(seed, i))
            last = sampler.sample(spec.samples)
            estimates.append(last.estimate)
            logger.debug("reference trial %d: estimate=%.6f", i, last.estimate)

    return ExperimentResult(
        method="reference",
        spec=spec,
        estimates=estimates,
        runtime_s=t.elapsed_s,
        meta={"keeps_points": True},
        last=last,
    )


def simulate_count_only(spec: ExperimentSpec, seed: int) -> ExperimentResult:
    """
    Counting-only sampling: identical draws to the reference method, but
    coordinates are discarded as they are generated.

    For the same seed the estimates match simulate_reference exactly.
    """
    estimates: List[float] = []
    total_inside = 0

    with Timer() as t:
        for i in range(spec.trials):
            sampler = QuarterCircleSampler(seed=trial_seed(seed, i))
            inside = sampler.count_inside(spec.samples)
            total_inside += inside
            estimate = 4.0 * inside / spec.samples
            estimates.append(estimate)
            logger.debug("count_only trial %d: estimate=%.6f", i, estimate)

    return ExperimentResult(
        method="count_only",
        spec=spec,
        estimates=estimates,
        runtime_s=t.elapsed_s,
        meta={"keeps_points": False, "total_inside": total_inside},
    )


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> Callable[..., ExperimentResult]:
    name = name.strip().lower()
    if name not in METHODS:
        raise InvalidArgumentError(f"unknown method '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


# METHODS maps method name -> function.
METHODS: Dict[str, Callable[..., ExperimentResult]] = {
    "reference": simulate_reference,
    "count_only": simulate_count_only,
}
