from __future__ import annotations

from typing import Optional

from .geometry_utils import Point


class RoverError(Exception):
    """Base class for rover landing and navigation failures."""

    def __init__(self, rover_name: str, message: str, point: Optional[Point] = None) -> None:
        super().__init__(message)
        self.rover_name = rover_name
        self.point = point


class WouldFallOffPlateau(RoverError):
    """Target coordinate lies outside the plateau bounds."""


class WouldCollideWithRover(RoverError):
    """Target coordinate is already held by another landed rover."""


class NotYetLanded(RoverError):
    """Rover has no position or orientation yet."""


class AlreadyLanded(RoverError):
    """Rover is already registered on a plateau."""
