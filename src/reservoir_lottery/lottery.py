import logging
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from .errors import EmptyBuilder, NoOneChosen
from .position import Position
from .reservoir import Reservoir
from .sampler import RandomSource, SampleResult

T = TypeVar("T")

logger = logging.getLogger(__name__)

# (position name, winners in slot order)
Winners = List[Tuple[str, List[T]]]


class Lottery(Generic[T]):
    """
    Lottery

    Runs one sampling pass over a stream of candidates and splits the
    final reservoir into prize tiers. Position k owns the contiguous block
    of slots that follows the blocks of positions 0..k-1, so every slot
    belongs to exactly one position and nobody can win twice.

    Build instances through LotteryBuilder. The lottery owns its reservoir;
    close() finalizes it, after which draw(), samples() and close() raise
    SamplerConsumed.

    IMPORTANT:
      - Single-threaded
      - Not thread-safe
    """

    def __init__(
        self,
        positions: Sequence[Position],
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ):
        if not positions:
            raise EmptyBuilder()

        self._positions: Tuple[Position, ...] = tuple(positions)
        self._reservoir: Reservoir[T] = Reservoir(
            sum(p.capacity for p in self._positions),
            rng=rng,
            seed=seed,
        )

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def draw(self, item: T) -> SampleResult:
        return self._reservoir.sample(item)

    def samples(self) -> Tuple[Optional[T], ...]:
        """Current pool, for progress display."""
        return self._reservoir.samples()

    def close(self) -> Winners:
        """
        Finalize the reservoir and report winners per position, in declared
        order. Empty slots inside a position's block are skipped, so a
        position may come back with fewer winners than its capacity, or
        none at all.

        Raises NoOneChosen if nothing was ever drawn.
        """
        final = self._reservoir.finalize()

        if all(it is None for it in final):
            raise NoOneChosen()

        result: Winners = []
        start = 0
        for p in self._positions:
            block = final[start:start + p.capacity]
            result.append((p.name, [it for it in block if it is not None]))
            start += p.capacity

        logger.debug(
            "lottery closed: seen=%d winners=%s",
            self._reservoir.seen,
            ", ".join(f"{name}:{len(w)}" for name, w in result),
        )
        return result

    # ------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------

    @property
    def positions(self) -> Tuple[Position, ...]:
        return self._positions

    @property
    def capacity(self) -> int:
        return self._reservoir.capacity

    @property
    def seen(self) -> int:
        return self._reservoir.seen
