# simulations/draw.py

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from .common import configure_logging

from reservoir_lottery import LotteryBuilder, LotteryError


logger = logging.getLogger(__name__)


def parse_position(text: str) -> Tuple[str, int]:
    """
    Parse NAME:CAP. The name may itself contain ':'; the capacity is
    whatever follows the last one.
    """
    name, sep, cap = text.rpartition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected NAME:CAP, got '{text}'")
    try:
        return name, int(cap)
    except ValueError:
        raise argparse.ArgumentTypeError(f"capacity must be an integer in '{text}'") from None


def read_items(items: Sequence[str], stdin: TextIO) -> List[str]:
    if items:
        return list(items)
    return [line.strip() for line in stdin if line.strip()]


def main(argv: list[str], stdin: Optional[TextIO] = None, out: Optional[TextIO] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Draw winners for named prize tiers from a stream of entries."
    )
    parser.add_argument(
        "--position", "-p",
        dest="positions",
        action="append",
        type=parse_position,
        required=True,
        metavar="NAME:CAP",
        help="prize tier and how many winners it takes (repeatable, in prize order)",
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible draw")
    parser.add_argument("--show-pool", action="store_true", help="print the pool after every draw")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("items", nargs="*", help="entries; read one per line from stdin when omitted")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout

    try:
        builder = LotteryBuilder()
        for name, cap in args.positions:
            builder.add(name, cap)
        lottery = builder.build(seed=args.seed)

        entries = read_items(args.items, stdin)
        logger.info("drawing %d entries into %d prizes", len(entries), lottery.capacity)

        for entry in entries:
            rank, seen, evicted = lottery.draw(entry)
            if args.show_pool:
                pool = ["-" if it is None else it for it in lottery.samples()]
                line = f"#{seen} {entry} rank={rank} pool=[{', '.join(pool)}]"
                if evicted is not None:
                    line += f" out={evicted}"
                print(line, file=out)

        winners = lottery.close()
    except LotteryError as e:
        logger.error("Failed: %s", e)
        return 1

    for name, won in winners:
        print(f"{name}: {', '.join(won) if won else '(none)'}", file=out)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
