from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import numpy as np

from .geometry_utils import Point, point_in_grid

if TYPE_CHECKING:
    from .rover import Rover


class Plateau:
    """Bounded zero-origin grid holding the rovers that have landed on it.

    Coordinates run from (0, 0) at the bottom-left to (width, height) at the
    top-right, both bounds inclusive, so the grid has
    (width + 1) x (height + 1) cells.

    Parameters
    ----------
    width : int
        Largest valid x coordinate.
    height : int
        Largest valid y coordinate.
    rovers : list[Rover], optional
        Rovers already occupying the plateau.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rovers: Optional[List["Rover"]] = None,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Plateau bounds must be non-negative, got width={self.width} height={self.height}"
            )
        self.rovers: List["Rover"] = list(rovers) if rovers is not None else []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_map_dict(cls, data: Dict[str, Any]) -> "Plateau":
        """Create an empty plateau from a ``{"width": .., "height": ..}`` dict."""
        return cls(width=data["width"], height=data["height"])

    # ------------------------------------------------------------------
    # Bounds and occupancy
    # ------------------------------------------------------------------
    def is_out_of_bounds(self, point: Point) -> bool:
        """Return True if point lies outside [0, width] x [0, height]."""
        return not point_in_grid(point, self.width, self.height)

    def rover_at(self, point: Point) -> Optional["Rover"]:
        """Return the landed rover whose live position equals point, if any."""
        for rover in self.rovers:
            if rover.position == point:
                return rover
        return None

    def has_rover_at(self, point: Point) -> bool:
        """Return True if any landed rover currently occupies point."""
        return self.rover_at(point) is not None

    def occupancy_grid(self) -> np.ndarray:
        """Return an int8 array of shape (height + 1, width + 1), 1 where a rover sits.

        Rows are indexed by y and columns by x.
        """
        grid = np.zeros((self.height + 1, self.width + 1), dtype=np.int8)
        for rover in self.rovers:
            if rover.position is not None:
                grid[rover.position.y, rover.position.x] = 1
        return grid
