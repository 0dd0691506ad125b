"""
Grid geometry for the plateau simulation.

Provides the immutable integer ``Point`` and the inclusive grid test used by
plateau bounds checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .orientation import Orientation


@dataclass(frozen=True)
class Point:
    """Integer grid coordinate.

    Points are values: stepping returns a new Point and leaves this one
    untouched, so earlier positions stay valid in snapshots.
    """

    x: int
    y: int

    def step(self, orientation: Orientation) -> "Point":
        """Point one grid unit ahead along ``orientation``."""
        dx, dy = orientation.delta
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


# ---------------------------------------------------------------------------
# Grid helpers
# ---------------------------------------------------------------------------


def point_in_grid(point: Point, max_x: int, max_y: int) -> bool:
    """Return True if point lies in the inclusive rectangle [0,max_x] x [0,max_y]."""
    return 0 <= point.x <= max_x and 0 <= point.y <= max_y

