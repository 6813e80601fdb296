import logging
import math
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .errors import InvalidArgumentError, require_positive_int

logger = logging.getLogger(__name__)


def is_inside(x: float, y: float) -> bool:
    """
    True if (x, y) lies in the closed unit quarter circle x^2 + y^2 <= 1.
    """
    return x * x + y * y <= 1.0


@dataclass(frozen=True)
class SamplingResult:
    """
    Outcome of one sampling run.

    xs and ys are index-aligned and kept in generation order so callers can
    plot or re-check the points afterwards.
    """
    estimate: float
    inside: int
    samples: int
    xs: List[float]
    ys: List[float]

    @property
    def abs_error(self) -> float:
        return abs(self.estimate - math.pi)

    def points(self) -> Iterator[Tuple[float, float]]:
        return zip(self.xs, self.ys)

    def inside_mask(self) -> List[bool]:
        return [is_inside(x, y) for x, y in self.points()]


class QuarterCircleSampler:
    """
    QuarterCircleSampler

    Draws points uniformly from [0,1) x [0,1) and counts how many fall in
    the unit quarter circle. The area ratio of quarter circle to square is
    pi/4, so

        pi ~= 4 * inside / samples

    Each instance owns its own random.Random. Consecutive calls continue
    the same stream, so two samplers built with the same seed and driven
    with the same calls return identical results.

    This code is:
      - single-threaded
      - not thread-safe
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise InvalidArgumentError("seed must be an int or None")

        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def sample(self, samples: int) -> SamplingResult:
        """
        Run one estimation over `samples` points and keep every coordinate.
        """
        n = require_positive_int("samples", samples)
        rng = self._rng

        xs: List[float] = []
        ys: List[float] = []
        inside = 0

        for _ in range(n):
            x = rng.random()
            y = rng.random()
            xs.append(x)
            ys.append(y)
            if x * x + y * y <= 1.0:
                inside += 1

        estimate = 4.0 * inside / n
        logger.debug("sampled %d points, inside=%d, estimate=%.6f", n, inside, estimate)
        return SamplingResult(estimate=estimate, inside=inside, samples=n, xs=xs, ys=ys)

    def count_inside(self, samples: int) -> int:
        """
        Same draws as sample(), but only the in-circle count is kept.
        Memory stays constant for large sample counts.
        """
        n = require_positive_int("samples", samples)
        rng = self._rng

        inside = 0
        for _ in range(n):
            x = rng.random()
            y = rng.random()
            if x * x + y * y <= 1.0:
                inside += 1

        logger.debug("counted %d points, inside=%d", n, inside)
        return inside


def estimate_pi(
    samples: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> SamplingResult:
    """
    Estimate pi from `samples` uniform points in the unit square.

    Parameters
    ----------
    samples:
        Number of (x, y) points to draw. Must be a positive int.
    seed:
        Seed for a fresh RNG. Ignored when `rng` is given.
    rng:
        Existing random.Random to draw from (its state is advanced).

    Returns
    -------
    SamplingResult

    Raises
    ------
    InvalidArgumentError
        If `samples` is not a positive integer.
    """
    return QuarterCircleSampler(seed=seed, rng=rng).sample(samples)
