from __future__ import annotations

from enum import Enum
from typing import Tuple


class Orientation(Enum):
    """Compass heading of a rover on the plateau.

    Headings form a fixed clockwise ring N -> E -> S -> W -> N, so rotation
    is modular arithmetic over the ring index rather than a lookup per case.
    """

    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @property
    def index(self) -> int:
        """Position of this heading on the clockwise ring (N=0 ... W=3)."""
        return _RING.index(self)

    def turn_left(self) -> "Orientation":
        """Heading 90 degrees counter-clockwise."""
        return _RING[(self.index - 1) % len(_RING)]

    def turn_right(self) -> "Orientation":
        """Heading 90 degrees clockwise."""
        return _RING[(self.index + 1) % len(_RING)]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit grid step (dx, dy) for moving forward along this heading."""
        return _DELTAS[self]

    def __str__(self) -> str:
        return self.value


_RING = (Orientation.N, Orientation.E, Orientation.S, Orientation.W)

_DELTAS = {
    Orientation.N: (0, 1),
    Orientation.E: (1, 0),
    Orientation.S: (0, -1),
    Orientation.W: (-1, 0),
}


class Instruction(Enum):
    """Single navigation command."""

    L = "L"
    R = "R"
    M = "M"

    def __str__(self) -> str:
        return self.value
