# simulations/run.py

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .common import ExperimentSpec, ExperimentResult
from .methods import get_method


logger = logging.getLogger(__name__)


def run_experiment(
    method: str,
    capacity: int,
    stream: int,
    trials: int = 1,
    seed: int = 42,
    method_kwargs: Optional[Dict[str, Any]] = None,
) -> ExperimentResult:
    """
    Run a single simulation and return an ExperimentResult.

    Parameters
    ----------
    method:
        Name of the method (e.g., 'reservoir', 'modulo', 'lottery', 'prefix').
    capacity:
        Sampler capacity (total number of prizes for 'lottery').
    stream:
        Number of items fed per trial.
    trials:
        Number of independent trials.
    seed:
        Base RNG seed.
    method_kwargs:
        Optional dict of method-specific kwargs (e.g., {'tiers': [1, 2, 7]}).

    Returns
    -------
    ExperimentResult
    """
    spec = ExperimentSpec(capacity=capacity, stream=stream, trials=trials)
    fn = get_method(method)

    kwargs = method_kwargs or {}
    logger.info(
        "running %s: capacity=%d stream=%d trials=%d seed=%d",
        method, capacity, stream, trials, seed,
    )
    result = fn(spec, seed, **kwargs)  # type: ignore[arg-type]
    return result


def run_pair(
    method_a: str,
    method_b: str,
    capacity: int,
    stream: int,
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
        capacity=capacity,
        stream=stream,
        trials=trials,
        seed=seed,
        method_kwargs=method_kwargs_a,
    )
    rb = run_experiment(
        method=method_b,
        capacity=capacity,
        stream=stream,
        trials=trials,
        seed=seed,
        method_kwargs=method_kwargs_b,
    )
    return ra, rb
