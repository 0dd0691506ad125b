from __future__ import annotations

import pytest

from plateau_sim.errors import AlreadyLanded, NotYetLanded, WouldCollideWithRover, WouldFallOffPlateau
from plateau_sim.geometry_utils import Point
from plateau_sim.orientation import Instruction, Orientation
from plateau_sim.plateau import Plateau
from plateau_sim.rover import Rover, RoverState


def make_rover(name: str, x: int, y: int, heading: str, instructions: str = "") -> Rover:
    return Rover(name, RoverState(Point(x, y), Orientation(heading)), instructions)


@pytest.mark.parametrize("heading", ["N", "E", "S", "W"])
def test_landing_anywhere_inside_bounds(heading: str) -> None:
    for x in range(4):
        for y in range(3):
            plateau = Plateau(width=3, height=2)
            rover = make_rover("A", x, y, heading)
            rover.land_on(plateau)

            assert rover.get_state() == RoverState(Point(x, y), Orientation(heading))
            assert plateau.rovers == [rover]


def test_second_landing_rejected() -> None:
    first = Plateau(width=5, height=5)
    second = Plateau(width=5, height=5)
    rover = make_rover("A", 1, 2, "N")
    rover.land_on(first)

    with pytest.raises(AlreadyLanded):
        rover.land_on(second)

    assert first.rovers == [rover]
    assert second.rovers == []


def test_landing_off_plateau_leaves_rover_untouched() -> None:
    plateau = Plateau(width=5, height=5)
    rover = make_rover("A", 6, 2, "N")
    with pytest.raises(WouldFallOffPlateau):
        rover.land_on(plateau)
    assert not rover.has_landed()
    assert plateau.rovers == []


def test_bounds_checked_before_occupancy() -> None:
    plateau = Plateau(width=5, height=5)
    rover = make_rover("A", -1, 0, "N")
    with pytest.raises(WouldFallOffPlateau):
        rover.land_on(plateau)


def test_landing_on_occupied_cell_collides() -> None:
    plateau = Plateau(width=5, height=5)
    make_rover("A", 2, 2, "N").land_on(plateau)
    b = make_rover("B", 2, 2, "E")

    with pytest.raises(WouldCollideWithRover) as excinfo:
        b.land_on(plateau)

    assert excinfo.value.rover_name == "B"
    assert b.position is None
    assert b.orientation is None
    assert len(plateau.rovers) == 1


def test_scenario_one() -> None:
    plateau = Plateau(width=5, height=5)
    rover = make_rover("Rover1", 1, 2, "N", "LMLMLMLMM")
    rover.land_on(plateau)

    assert rover.navigate_on(plateau) == "Rover1 is at x:1 y:3 facing N."
    assert rover.position == Point(1, 3)
    assert rover.orientation is Orientation.N


def test_scenario_two() -> None:
    plateau = Plateau(width=5, height=5)
    rover = make_rover("Rover2", 3, 3, "E", "MMRMMRMRRM")
    rover.land_on(plateau)

    assert rover.navigate_on(plateau) == "Rover2 is at x:5 y:1 facing E."


def test_move_off_bottom_edge_fails_in_place() -> None:
    plateau = Plateau(width=5, height=5)
    rover = make_rover("A", 0, 0, "S", "M")
    rover.land_on(plateau)

    with pytest.raises(WouldFallOffPlateau) as excinfo:
        rover.navigate_on(plateau)

    assert excinfo.value.point == Point(0, -1)
    assert "x:0 y:-1" in str(excinfo.value)
    assert rover.position == Point(0, 0)
    assert rover.orientation is Orientation.S


def test_move_into_rover_fails_and_aborts_sequence() -> None:
    plateau = Plateau(width=5, height=5)
    make_rover("A", 2, 3, "N").land_on(plateau)
    b = make_rover("B", 2, 1, "N", "MMRM")
    b.land_on(plateau)

    with pytest.raises(WouldCollideWithRover) as excinfo:
        b.navigate_on(plateau)

    assert "x:2 y:3" in str(excinfo.value)
    # First M succeeded, second collided, R and M never ran
    assert b.position == Point(2, 2)
    assert b.orientation is Orientation.N


def test_navigate_before_landing() -> None:
    plateau = Plateau(width=5, height=5)
    rover = make_rover("Lost", 1, 1, "N", "M")

    with pytest.raises(NotYetLanded):
        rover.navigate_on(plateau)
    with pytest.raises(NotYetLanded):
        rover.move(plateau)

    assert rover.get_status() == "Lost not yet landed."
    assert rover.previous is None


def test_previous_holds_state_before_last_instruction() -> None:
    plateau = Plateau(width=5, height=5)
    rover = make_rover("A", 1, 1, "N", "MR")
    rover.land_on(plateau)
    rover.navigate_on(plateau)

    assert rover.previous == RoverState(Point(1, 2), Orientation.N)
    assert rover.to_dict()["previous"] == {"position": {"x": 1, "y": 2}, "orientation": "N"}


def test_on_step_called_per_instruction() -> None:
    plateau = Plateau(width=5, height=5)
    rover = make_rover("A", 0, 0, "N", "MRM")
    rover.land_on(plateau)
    seen = []

    rover.navigate_on(plateau, on_step=lambda r, i: seen.append((i, r.position)))

    assert seen == [
        (Instruction.M, Point(0, 1)),
        (Instruction.R, Point(0, 1)),
        (Instruction.M, Point(1, 1)),
    ]


def test_execute_accepts_letters() -> None:
    plateau = Plateau(width=5, height=5)
    rover = make_rover("A", 0, 0, "N")
    rover.land_on(plateau)

    rover.execute("R", plateau)
    rover.execute(Instruction.M, plateau)

    assert rover.get_state() == RoverState(Point(1, 0), Orientation.E)
