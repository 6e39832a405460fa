"""
Streaming reservoir sampling and prize-tier lotteries built on top of it.

Typical use:
    lottery = LotteryBuilder().add("first", 1).add("second", 3).build()
    for ticket in tickets:
        lottery.draw(ticket)
    winners = lottery.close()
"""

from .builder import LotteryBuilder
from .errors import (
    EmptyBuilder,
    EmptyName,
    IndexOutOfRange,
    LotteryError,
    NoOneChosen,
    PositionError,
    SamplerConsumed,
    ZeroCapacity,
)
from .lottery import Lottery
from .position import Position
from .reservoir import Reservoir
from .sampler import RandomSource, StreamSampler

__all__ = [
    "EmptyBuilder",
    "EmptyName",
    "IndexOutOfRange",
    "Lottery",
    "LotteryBuilder",
    "LotteryError",
    "NoOneChosen",
    "Position",
    "PositionError",
    "RandomSource",
    "Reservoir",
    "SamplerConsumed",
    "StreamSampler",
    "ZeroCapacity",
]
