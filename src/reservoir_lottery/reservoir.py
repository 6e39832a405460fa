import logging
import random
from typing import List, Optional, Tuple, TypeVar

from .errors import SamplerConsumed
from .sampler import RandomSource, SampleResult, StreamSampler

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Reservoir(StreamSampler[T]):
    """
    Reservoir (Algorithm R with inside-out placement)

    Keeps a uniformly random subset of at most `capacity` items from a
    stream of unknown length, with O(1) work per item.

    Each incoming item draws a rank r uniform in [1, seen]. If r falls
    inside the pool it takes slot r-1, evicting the previous occupant.
    While the pool is still filling, the evicted occupant is moved to the
    first empty slot instead of being dropped, so the first `seen` slots
    are always occupied and hold a random permutation of the items so far.

    finalize() continues that permutation over the empty tail, so a pool
    that never filled does not leave its items bunched at low slot indices.

    Slots use None as the empty marker, so None itself cannot be sampled.

    IMPORTANT:
      - Single-threaded
      - Not thread-safe
      - Consumed by finalize(); every call afterwards raises SamplerConsumed
    """

    def __init__(
        self,
        capacity: int,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ):
        if capacity <= 0:
            raise ValueError("capacity must be > 0")

        self._capacity = capacity
        self._seen = 0
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)

        # _slots[i] = item held in slot i, or None; dropped by finalize()
        self._slots: Optional[List[Optional[T]]] = [None] * capacity

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def sample(self, item: T) -> SampleResult:
        if item is None:
            raise ValueError("None cannot be sampled, it marks an empty slot")
        slots = self._live_slots()

        self._seen += 1
        seen = self._seen
        r = self._draw(seen)

        evicted: Optional[T] = None
        if r <= self._capacity:
            evicted = slots[r - 1]
            slots[r - 1] = item

        # Warm-up: slot seen-1 is still empty, the displaced item goes there
        if seen <= self._capacity and r < seen:
            slots[seen - 1] = evicted
            evicted = None

        return r, seen, evicted

    def samples(self) -> Tuple[Optional[T], ...]:
        return tuple(self._live_slots())

    def finalize(self) -> List[Optional[T]]:
        slots = self._live_slots()

        # Tail of the inside-out shuffle: pretend the missing items were
        # empty ones and keep placing them.
        for i in range(self._seen + 1, self._capacity + 1):
            r = self._draw(i)
            moved = slots[r - 1]
            slots[r - 1] = None
            slots[i - 1] = moved

        logger.debug(
            "reservoir finalized: capacity=%d seen=%d tail_draws=%d",
            self._capacity,
            self._seen,
            max(0, self._capacity - self._seen),
        )

        self._slots = None
        return slots

    # ------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def seen(self) -> int:
        return self._seen

    @property
    def finalized(self) -> bool:
        return self._slots is None

    # ------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------

    def _draw(self, k: int) -> int:
        # Bounded uniform draw in [1, k]. A modulo-reduced raw draw would
        # reproduce older output bit for bit but is slightly biased for
        # large k; we do not need that reproducibility.
        return self._rng.randint(1, k)

    def _live_slots(self) -> List[Optional[T]]:
        if self._slots is None:
            raise SamplerConsumed()
        return self._slots
