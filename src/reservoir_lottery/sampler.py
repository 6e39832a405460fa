"""Streaming sampler interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Protocol, Sequence, Tuple, TypeVar

T = TypeVar("T")

# (rank, seen, evicted)
SampleResult = Tuple[int, int, Optional[T]]


class RandomSource(Protocol):
    """
    Anything that can draw a uniform integer in [a, b], bounds inclusive.
    random.Random satisfies this; tests plug in scripted generators.
    """

    def randint(self, a: int, b: int) -> int:
        ...


class StreamSampler(ABC, Generic[T]):
    """
    A sampler that sees a stream one item at a time, always knows which
    items it currently holds, and can be finalized exactly once when the
    caller decides the stream is over.
    """

    @abstractmethod
    def sample(self, item: T) -> SampleResult:
        """
        Offer one item to the sampler.

        Returns (rank, seen, evicted): the random rank the item drew, how
        many items have passed through so far, and the item that left the
        pool because of this call (None if nothing did).
        """

    @abstractmethod
    def samples(self) -> Sequence[Optional[T]]:
        """Read-only view of the held slots, available mid-stream."""

    @abstractmethod
    def finalize(self) -> List[Optional[T]]:
        """
        End sampling and hand over the slots. Implementations may reorder
        the result; the sampler is unusable afterwards.
        """
