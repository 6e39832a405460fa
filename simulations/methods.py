# simulations/methods.py

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, Sequence

from .common import ExperimentSpec, ExperimentResult, Timer

from reservoir_lottery import LotteryBuilder, NoOneChosen, Reservoir


logger = logging.getLogger(__name__)

SimFn = Callable[[ExperimentSpec, int], ExperimentResult]


class ModuloRandom:
    """
    Draws in [a, b] by reducing a raw 32-bit value modulo the range size.
    This is the legacy way of picking ranks; it is slightly biased towards
    small values once the range no longer divides 2**32.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        return a + self._rng.getrandbits(32) % (b - a + 1)


def default_tiers(capacity: int) -> List[int]:
    """
    Split a capacity into prize tiers shaped like a typical draw:
    one first prize, one second prize, everything else third.
    """
    if capacity <= 2:
        return [1] * capacity
    return [1, 1, capacity - 2]


def _run_reservoir_trials(spec: ExperimentSpec, rng) -> List[int]:
    counts = [0] * spec.stream
    for _ in range(spec.trials):
        reservoir = Reservoir(spec.capacity, rng=rng)
        for item in range(spec.stream):
            reservoir.sample(item)
        for kept in reservoir.finalize():
            if kept is not None:
                counts[kept] += 1
    return counts


def simulate_reservoir(spec: ExperimentSpec, seed: int) -> ExperimentResult:
    """
    Plain reservoir: sample the whole stream, finalize, count survivors.
    """
    rng = random.Random(seed)

    with Timer() as t:
        counts = _run_reservoir_trials(spec, rng)

    return ExperimentResult(
        method="reservoir",
        spec=spec,
        counts=counts,
        runtime_s=t.elapsed_s,
        meta={"draw": "bounded"},
    )


def simulate_modulo(spec: ExperimentSpec, seed: int) -> ExperimentResult:
    """
    Same reservoir, but ranks come from a modulo-reduced raw draw.
    At simulation sizes the bias should be invisible next to sampling noise.
    """
    rng = ModuloRandom(seed)

    with Timer() as t:
        counts = _run_reservoir_trials(spec, rng)

    return ExperimentResult(
        method="modulo",
        spec=spec,
        counts=counts,
        runtime_s=t.elapsed_s,
        meta={"draw": "modulo32"},
    )


def simulate_lottery(
    spec: ExperimentSpec,
    seed: int,
    tiers: Optional[Sequence[int]] = None,
) -> ExperimentResult:
    """
    Full lottery: the capacity is split into prize tiers, every item is
    drawn, and winners of all tiers are counted as kept.

    meta["tier_counts"][k] records how many winners tier k produced over
    all trials.
    """
    tiers = list(tiers) if tiers is not None else default_tiers(spec.capacity)
    if sum(tiers) != spec.capacity:
        raise ValueError(f"tiers {tiers} do not add up to capacity {spec.capacity}")

    builder = LotteryBuilder()
    for k, cap in enumerate(tiers):
        builder.add(f"tier{k + 1}", cap)

    rng = random.Random(seed)
    counts = [0] * spec.stream
    tier_counts = [0] * len(tiers)

    with Timer() as t:
        for _ in range(spec.trials):
            lottery = builder.build(rng=rng)
            for item in range(spec.stream):
                lottery.draw(item)
            try:
                winners = lottery.close()
            except NoOneChosen:
                # Empty stream: the trial keeps nothing
                continue
            for k, (_, won) in enumerate(winners):
                tier_counts[k] += len(won)
                for item in won:
                    counts[item] += 1

    return ExperimentResult(
        method="lottery",
        spec=spec,
        counts=counts,
        runtime_s=t.elapsed_s,
        meta={"tiers": tiers, "tier_counts": tier_counts},
    )


def simulate_prefix(spec: ExperimentSpec, seed: int) -> ExperimentResult:
    """
    Biased baseline: keep the first `capacity` items and ignore the rest.
    Shows what the reservoir is protecting against.
    """
    counts = [0] * spec.stream

    with Timer() as t:
        for _ in range(spec.trials):
            for item in range(spec.kept_per_trial):
                counts[item] += 1

    return ExperimentResult(
        method="prefix",
        spec=spec,
        counts=counts,
        runtime_s=t.elapsed_s,
        meta={},
    )


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> Callable[..., ExperimentResult]:
    name = name.strip().lower()
    if name not in METHODS:
        raise ValueError(f"unknown method '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


# METHODS maps method name -> function.
# Note: simulate_lottery takes an extra tiers parameter; callers can pass it.
METHODS: Dict[str, Callable[..., ExperimentResult]] = {
    "reservoir": simulate_reservoir,
    "modulo": simulate_modulo,
    "lottery": simulate_lottery,
    "prefix": simulate_prefix,
}
