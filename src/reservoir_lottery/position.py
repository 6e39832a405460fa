from dataclasses import dataclass, replace

from .errors import EmptyName, ZeroCapacity


@dataclass(frozen=True)
class Position:
    """
    A named prize tier that can hold up to `capacity` winners.
    """
    name: str = "default_name"
    capacity: int = 1

    def __post_init__(self) -> None:
        if not self.name:
            raise EmptyName()
        if self.capacity <= 0:
            raise ZeroCapacity()

    def with_name(self, name: str) -> "Position":
        return replace(self, name=name)

    def with_capacity(self, capacity: int) -> "Position":
        return replace(self, capacity=capacity)
