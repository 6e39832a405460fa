# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import logging
import math
import time


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Common experiment parameters shared across all simulations.

    Each trial feeds the items 0..stream-1, in order, to a fresh sampler
    of the given capacity and records which items it keeps.
    """
    capacity: int
    stream: int
    trials: int = 1

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("capacity must be > 0")
        if self.stream < 0:
            raise ValueError("stream must be >= 0")
        if self.trials <= 0:
            raise ValueError("trials must be > 0")

    @property
    def kept_per_trial(self) -> int:
        return min(self.capacity, self.stream)

    @property
    def expected_rate(self) -> float:
        """Inclusion probability every item should have under uniform sampling."""
        if self.stream == 0:
            return 0.0
        return self.kept_per_trial / self.stream


@dataclass(frozen=True)
class SummaryStats:
    """
    Summary of per-item inclusion rates (kept count / trials).
    """
    min: float
    max: float
    mean: float
    std: float  # population stddev
    max_abs_dev: float  # worst distance from the expected rate


def summarize_rates(rates: List[float], expected: float) -> SummaryStats:
    """
    Compute min/max/mean/std over inclusion rates (population stddev),
    plus the largest deviation from `expected`.
    """
    if not rates:
        raise ValueError("rates must be non-empty")

    n = len(rates)
    mean = sum(rates) / n

    var_acc = 0.0
    for r in rates:
        d = r - mean
        var_acc += d * d
    std = math.sqrt(var_acc / n)

    worst = max(abs(r - expected) for r in rates)

    return SummaryStats(min=min(rates), max=max(rates), mean=mean, std=std, max_abs_dev=worst)


@dataclass
class ExperimentResult:
    """
    Common return type for all simulations.

    counts[i] is the number of trials in which item i was kept.
    """
    method: str
    spec: ExperimentSpec
    counts: List[int]

    rates: List[float] = field(init=False)
    stats: Optional[SummaryStats] = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.counts) != self.spec.stream:
            raise ValueError(
                f"counts length mismatch: expected {self.spec.stream}, got {len(self.counts)}"
            )

        # Sanity: every trial keeps exactly min(capacity, stream) items
        expected = self.spec.trials * self.spec.kept_per_trial
        actual = sum(self.counts)
        if actual != expected:
            raise ValueError(
                f"counts sum mismatch: expected {expected}, got {actual}"
            )

        self.rates = [c / self.spec.trials for c in self.counts]
        self.stats = summarize_rates(self.rates, self.spec.expected_rate) if self.rates else None


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
    Shared (xmin, xmax) of inclusion rates across results, for 'same x-axis'
    histogram comparisons.
    """
    stats = [r.stats for r in results if r.stats is not None]
    if not stats:
        raise ValueError("results must contain at least one non-empty experiment")

    return min(s.min for s in stats), max(s.max for s in stats)


def format_stats_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    s = r.stats
    if s is None:
        return f"{r.method}: empty stream"
    return (
        f"{r.method}: expected={r.spec.expected_rate:.4f}, min={s.min:.4f}, max={s.max:.4f}, "
        f"mean={s.mean:.4f}, std={s.std:.4f}, worst_dev={s.max_abs_dev:.4f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
