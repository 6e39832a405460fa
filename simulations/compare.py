# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .common import common_x_range, configure_logging, format_stats_line
from .run import run_experiment


logger = logging.getLogger(__name__)

DEFAULT_SEED = 42
DEFAULT_TRIALS = 2000


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare two sampling methods via Monte Carlo (per-item inclusion rates, same x-axis plots)."
    )
    parser.add_argument("--method-a", required=True, help="e.g. reservoir | modulo | lottery | prefix")
    parser.add_argument("--method-b", required=True, help="e.g. reservoir | modulo | lottery | prefix")
    parser.add_argument("--capacity", type=int, required=True, help="sampler capacity")
    parser.add_argument("--stream", type=int, required=True, help="items fed per trial")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="independent trials")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="base RNG seed")
    parser.add_argument("--no-plot", action="store_true", help="print stats only")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        ra = run_experiment(
            method=args.method_a,
            capacity=args.capacity,
            stream=args.stream,
            trials=args.trials,
            seed=args.seed,
        )
        rb = run_experiment(
            method=args.method_b,
            capacity=args.capacity,
            stream=args.stream,
            trials=args.trials,
            seed=args.seed,
        )
    except ValueError as e:
        logger.error("Failed: %s", e)
        return 1

    print(format_stats_line(ra))
    print(format_stats_line(rb))

    if args.no_plot or ra.stats is None or rb.stats is None:
        return 0

    xmin, xmax = common_x_range([ra, rb])
    expected = ra.spec.expected_rate
    # Deterministic methods can put every item on one rate
    pad = max((xmax - xmin) * 0.05, 0.01)
    xmin, xmax = xmin - pad, xmax + pad

    plt.figure(figsize=(12, 4))

    plt.subplot(1, 2, 1)
    plt.hist(ra.rates, bins=60, range=(xmin, xmax))
    plt.axvline(expected, color="red", linestyle="--", linewidth=1)
    plt.title(ra.method)
    plt.xlabel("Inclusion rate per item")
    plt.ylabel("Number of items")
    plt.xlim(xmin, xmax)

    plt.subplot(1, 2, 2)
    plt.hist(rb.rates, bins=60, range=(xmin, xmax))
    plt.axvline(expected, color="red", linestyle="--", linewidth=1)
    plt.title(rb.method)
    plt.xlabel("Inclusion rate per item")
    plt.xlim(xmin, xmax)

    plt.suptitle(
        f"Compare: {ra.method} vs {rb.method}  "
        f"(capacity={args.capacity}, stream={args.stream}, trials={args.trials})"
    )
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
