import logging
from typing import List, Optional, Tuple

from .errors import EmptyBuilder, IndexOutOfRange
from .lottery import Lottery
from .position import Position
from .sampler import RandomSource

logger = logging.getLogger(__name__)


class LotteryBuilder:
    """
    Stages and validates positions before any drawing starts.

    Every editing method returns the builder so calls can be chained:

        lottery = (
            LotteryBuilder()
            .add("first", 1)
            .add("second", 1)
            .add("third", 4)
            .build(seed=7)
        )

    The builder keeps its own list; editing it after build() does not touch
    lotteries that were already built.
    """

    def __init__(self) -> None:
        self._positions: List[Position] = []

    # ------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------

    def add(self, name: str, capacity: int) -> "LotteryBuilder":
        self._positions.append(Position(name, capacity))
        return self

    def set_name(self, index: int, name: str) -> "LotteryBuilder":
        self._check_index(index)
        self._positions[index] = self._positions[index].with_name(name)
        return self

    def set_capacity(self, index: int, capacity: int) -> "LotteryBuilder":
        self._check_index(index)
        self._positions[index] = self._positions[index].with_capacity(capacity)
        return self

    def remove(self, index: int) -> "LotteryBuilder":
        self._check_index(index)
        del self._positions[index]
        return self

    # ------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------

    def positions(self) -> Tuple[Position, ...]:
        return tuple(self._positions)

    def total_capacity(self) -> int:
        return sum(p.capacity for p in self._positions)

    # ------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------

    def build(
        self,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ) -> Lottery:
        """
        Freeze the staged positions into a new Lottery whose reservoir holds
        exactly one slot per prize. `rng` / `seed` configure its random
        source (see Reservoir).
        """
        if not self._positions:
            raise EmptyBuilder()

        positions = tuple(self._positions)
        logger.debug(
            "building lottery: %s (capacity=%d)",
            ", ".join(f"{p.name}:{p.capacity}" for p in positions),
            self.total_capacity(),
        )
        return Lottery(positions, rng=rng, seed=seed)

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected rather than counted from the end
        if index < 0 or index >= len(self._positions):
            raise IndexOutOfRange(index)
