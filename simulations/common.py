# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import math
import time

from pi_estimation import InvalidArgumentError, SamplingResult
from pi_estimation.errors import require_positive_int


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Common experiment parameters shared across all sampling methods.
    """
    samples: int  # points per trial
    trials: int = 1  # independent seeded runs

    def __post_init__(self) -> None:
        require_positive_int("samples", self.samples)
        require_positive_int("trials", self.trials)


@dataclass(frozen=True)
class SummaryStats:
    """
    Basic summary stats over per-trial estimates.
    """
    min: float
    max: float
    mean: float
    std: float  # population stddev


def summarize_estimates(estimates: List[float]) -> SummaryStats:
    """
    Compute min/max/mean/std over trial estimates (population stddev).
    """
    if not estimates:
        raise InvalidArgumentError("estimates must be non-empty")

    n = len(estimates)
    mean = math.fsum(estimates) / n

    var_acc = 0.0
    for e in estimates:
        d = e - mean
        var_acc += d * d
    std = math.sqrt(var_acc / n)

    return SummaryStats(min=min(estimates), max=max(estimates), mean=mean, std=std)


@dataclass
class ExperimentResult:
    """
    Common return type for all sampling methods.
    """
    method: str
    spec: ExperimentSpec
    estimates: List[float]

    stats: SummaryStats = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)
    last: Optional[SamplingResult] = None  # coordinates of the final trial, if kept

    def __post_init__(self) -> None:
        if len(self.estimates) != self.spec.trials:
            raise InvalidArgumentError(
                f"estimate count mismatch: expected {self.spec.trials}, got {len(self.estimates)}"
            )
        for e in self.estimates:
            if not 0.0 <= e <= 4.0:
                raise InvalidArgumentError(f"estimate out of range [0, 4]: {e}")

        self.stats = summarize_estimates(self.estimates)

    @property
    def abs_error(self) -> float:
        """Distance of the mean estimate from math.pi."""
        return abs(self.stats.mean - math.pi)


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def common_x_range(results: List[ExperimentResult]) -> Tuple[float, float]:
    """
    Shared (xmin, xmax) across results so estimate histograms line up.
    """
    if not results:
        raise InvalidArgumentError("results must be non-empty")

    xmin = min(r.stats.min for r in results)
    xmax = max(r.stats.max for r in results)
    if xmin == xmax:
        # single trial: widen so the histogram bin has width
        xmin, xmax = xmin - 0.01, xmax + 0.01
    return xmin, xmax


def format_stats_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    s = r.stats
    return (
        f"{r.method}: trials={r.spec.trials}, samples={r.spec.samples}, "
        f"mean={s.mean:.6f}, std={s.std:.6f}, min={s.min:.6f}, max={s.max:.6f}, "
        f"|mean-pi|={r.abs_error:.6f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
