"""
Top-level package for the plateau rover simulator.

Components:
- orientation: compass headings and navigation instructions
- geometry_utils: integer grid points and grid helpers
- errors: landing/navigation failure conditions
- plateau: bounded grid and rover occupancy
- rover: landing and instruction execution
- mission: YAML mission loading and sequential execution
- render: pygame-based visualization
"""

from .orientation import Orientation, Instruction
from .geometry_utils import Point
from .errors import (
    RoverError,
    WouldFallOffPlateau,
    WouldCollideWithRover,
    NotYetLanded,
    AlreadyLanded,
)
from .plateau import Plateau
from .rover import RoverState, Rover

__all__ = [
    "Orientation",
    "Instruction",
    "Point",
    "RoverError",
    "WouldFallOffPlateau",
    "WouldCollideWithRover",
    "NotYetLanded",
    "AlreadyLanded",
    "Plateau",
    "RoverState",
    "Rover",
]
