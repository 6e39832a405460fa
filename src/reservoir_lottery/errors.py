"""
Errors raised by the reservoir and the lottery layer.

Every error is a LotteryError and also the builtin exception the same
condition would raise elsewhere (ValueError for bad input, IndexError for a
bad position index, RuntimeError for an unusable sampler), so callers can
catch whichever is more convenient.
"""


class LotteryError(Exception):
    """Base class for all reservoir_lottery errors."""


class PositionError(LotteryError, ValueError):
    """A position was given an invalid name or capacity."""


class EmptyName(PositionError):
    def __init__(self) -> None:
        super().__init__("position name must be non-empty")


class ZeroCapacity(PositionError):
    def __init__(self) -> None:
        super().__init__("position capacity must be > 0")


class IndexOutOfRange(LotteryError, IndexError):
    def __init__(self, index: int) -> None:
        super().__init__(f"position index {index} out of range")
        self.index = index


class EmptyBuilder(LotteryError, ValueError):
    def __init__(self) -> None:
        super().__init__("cannot build a lottery without positions")


class NoOneChosen(LotteryError, RuntimeError):
    def __init__(self) -> None:
        super().__init__("no item was drawn, nobody can be chosen")


class SamplerConsumed(LotteryError, RuntimeError):
    """The sampler was already finalized (or its lottery closed)."""

    def __init__(self) -> None:
        super().__init__("sampler already finalized")
