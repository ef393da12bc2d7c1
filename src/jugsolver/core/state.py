"""JugState and Capacities dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Capacities:
    """The fixed sizes of jug X and jug Y for one solve."""

    x: int
    y: int

    @property
    def largest(self) -> int:
        return max(self.x, self.y)

    def contains(self, state: JugState) -> bool:
        """True if both levels of ``state`` are within these capacities."""
        return 0 <= state.x <= self.x and 0 <= state.y <= self.y


@dataclass(frozen=True)
class JugState:
    """Current fill levels of jug X and jug Y.

    States are the nodes of the search graph. Identity is the coordinate
    pair, so two states with equal levels are the same node.
    """

    x: int
    y: int

    @classmethod
    def initial(cls) -> JugState:
        """Both jugs empty."""
        return cls(0, 0)

    @property
    def key(self) -> str:
        """Visited-set key, e.g. ``"2,8"``."""
        return f"{self.x},{self.y}"

    def holds(self, target: int) -> bool:
        """True if either jug contains exactly ``target``."""
        return self.x == target or self.y == target

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
