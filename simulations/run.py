# simulations/run.py

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .common import ExperimentSpec, ExperimentResult
from .methods import get_method

logger = logging.getLogger(__name__)


def run_experiment(
    method: str,
    samples: int,
    trials: int = 1,
    seed: int = 42,
    method_kwargs: Optional[Dict[str, Any]] = None,
) -> ExperimentResult:
    """
    Run a single experiment and return an ExperimentResult.

    Parameters
    ----------
    method:
        Name of the method ('reference' or 'count_only').
    samples:
        Number of points drawn per trial.
    trials:
        Number of independent trials.
    seed:
        Base RNG seed; trial seeds are derived from it.
    method_kwargs:
        Optional dict of method-specific kwargs.

    Returns
    -------
    ExperimentResult
    """
    spec = ExperimentSpec(samples=samples, trials=trials)
    fn = get_method(method)

    logger.debug("running %s: samples=%d trials=%d seed=%d", method, samples, trials, seed)
    kwargs = method_kwargs or {}
    return fn(spec, seed, **kwargs)


def run_pair(
    method_a: str,
    method_b: str,
    samples: int,
    trials: int = 1,
    seed: int = 42,
    method_kwargs_a: Optional[Dict[str, Any]] = None,
    method_kwargs_b: Optional[Dict[str, Any]] = None,
):
    """
    Convenience helper: run two methods under the same spec and seed.

    Returns (result_a, result_b).
    """
    ra = run_experiment(
        method=method_a,
        samples=samples,
        trials=trials,
        seed=seed,
        method_kwargs=method_kwargs_a,
    )
    rb = run_experiment(
        method=method_b,
        samples=samples,
        trials=trials,
        seed=seed,
        method_kwargs=method_kwargs_b,
    )
    return ra, rb
