"""
Robotic rovers on a plateau.

A rover lands at a position and heading, then executes a string of
single-letter instructions: ``L`` and ``R`` spin it 90 degrees in place and
``M`` moves it forward one grid point keeping the same heading.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .errors import AlreadyLanded, NotYetLanded, WouldCollideWithRover, WouldFallOffPlateau
from .geometry_utils import Point
from .orientation import Instruction, Orientation
from .plateau import Plateau


@dataclass(frozen=True)
class RoverState:
    """Position and heading of a rover.

    Attributes
    ----------
    position : Point
        Grid coordinate.
    orientation : Orientation
        Compass heading.
    """

    position: Point
    orientation: Orientation

    def to_dict(self) -> Dict[str, Any]:
        return {"position": self.position.to_dict(), "orientation": self.orientation.value}


StepCallback = Callable[["Rover", Instruction], None]


class Rover:
    """Grid rover driven by L/R/M instructions.

    The rover never stores the plateau it lives on; every operation that
    needs bounds or occupancy receives the plateau explicitly.
    """

    def __init__(
        self,
        name: str,
        landing: RoverState,
        instructions: Iterable[Union[Instruction, str]] = (),
    ) -> None:
        self.name = name
        self.landing = landing
        self.instructions: List[Instruction] = [Instruction(i) for i in instructions]

        self.position: Optional[Point] = None
        self.orientation: Optional[Orientation] = None
        # State right before the most recently executed instruction
        self.previous: Optional[RoverState] = None

    # ------------------------------------------------------------------
    # Landing
    # ------------------------------------------------------------------
    def land_on(self, plateau: Plateau) -> None:
        """Place the rover at its landing target and register it on the plateau."""
        if self.has_landed():
            raise AlreadyLanded(self.name, f"{self.name} has already landed on a plateau.", self.position)
        target = self.landing.position
        if self.will_fall_from(plateau, target):
            raise WouldFallOffPlateau(
                self.name, f"{self.name} cannot land, will fall from plateau.", target
            )
        if plateau.has_rover_at(target):
            raise WouldCollideWithRover(
                self.name, f"{self.name} cannot land, will collide with another rover.", target
            )

        self.position = target
        self.orientation = self.landing.orientation
        plateau.rovers.append(self)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def navigate_on(self, plateau: Plateau, on_step: Optional[StepCallback] = None) -> str:
        """Execute all instructions in order and return the final status line.

        The first failing instruction raises and leaves the rover where the
        last successful one put it.
        """
        if not self.has_landed():
            raise NotYetLanded(
                self.name,
                f"{self.name} cannot execute instructions if it has not yet landed on a plateau.",
            )

        for instruction in self.instructions:
            self.execute(instruction, plateau)
            if on_step is not None:
                on_step(self, instruction)
        return self.get_status()

    def execute(self, instruction: Union[Instruction, str], plateau: Plateau) -> None:
        """Execute a single instruction after snapshotting the current state."""
        instruction = Instruction(instruction)
        self._log_history()
        if instruction is Instruction.L:
            self.turn_left()
        elif instruction is Instruction.R:
            self.turn_right()
        else:
            self.move(plateau)

    def _log_history(self) -> None:
        if self.has_landed():
            self.previous = RoverState(position=self.position, orientation=self.orientation)

    def turn_left(self) -> Orientation:
        self.orientation = self._require_orientation().turn_left()
        return self.orientation

    def turn_right(self) -> Orientation:
        self.orientation = self._require_orientation().turn_right()
        return self.orientation

    def move(self, plateau: Plateau) -> Point:
        """Advance one grid unit along the current heading.

        The candidate cell is checked against the plateau bounds first and
        then against occupancy; on either failure the position is unchanged.
        """
        if not self.has_landed():
            raise NotYetLanded(
                self.name, f"{self.name} cannot move if it has not yet landed on a plateau."
            )

        candidate = self.position.step(self.orientation)
        if self.will_fall_from(plateau, candidate):
            raise WouldFallOffPlateau(
                self.name,
                f"{self.name} can no longer move or it will fall from plateau "
                f"at x:{candidate.x} y:{candidate.y}.",
                candidate,
            )
        if plateau.has_rover_at(candidate):
            raise WouldCollideWithRover(
                self.name,
                f"{self.name} can no longer move or it will collide with another rover "
                f"at x:{candidate.x} y:{candidate.y}.",
                candidate,
            )

        self.position = candidate
        return self.position

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @staticmethod
    def will_fall_from(plateau: Plateau, point: Point) -> bool:
        return plateau.is_out_of_bounds(point)

    def has_landed(self) -> bool:
        return self.position is not None and self.orientation is not None

    def get_state(self) -> Optional[RoverState]:
        """Return current state, or None before landing."""
        if not self.has_landed():
            return None
        return RoverState(position=self.position, orientation=self.orientation)

    def get_status(self) -> str:
        if not self.has_landed():
            return f"{self.name} not yet landed."
        return (
            f"{self.name} is at x:{self.position.x} y:{self.position.y} "
            f"facing {self.orientation.value}."
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize rover state to a dict for logging/telemetry."""
        return {
            "name": self.name,
            "position": self.position.to_dict() if self.position is not None else None,
            "orientation": self.orientation.value if self.orientation is not None else None,
            "previous": self.previous.to_dict() if self.previous is not None else None,
        }

    def _require_orientation(self) -> Orientation:
        if self.orientation is None:
            raise NotYetLanded(self.name, f"{self.name} cannot turn if it has not yet landed on a plateau.")
        return self.orientation
