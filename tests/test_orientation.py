from __future__ import annotations

import pytest

from plateau_sim.orientation import Instruction, Orientation


def test_turn_right_cycles_clockwise() -> None:
    assert Orientation.N.turn_right() is Orientation.E
    assert Orientation.E.turn_right() is Orientation.S
    assert Orientation.S.turn_right() is Orientation.W
    assert Orientation.W.turn_right() is Orientation.N


def test_turn_left_cycles_counter_clockwise() -> None:
    assert Orientation.N.turn_left() is Orientation.W
    assert Orientation.W.turn_left() is Orientation.S
    assert Orientation.S.turn_left() is Orientation.E
    assert Orientation.E.turn_left() is Orientation.N


@pytest.mark.parametrize("start", list(Orientation))
def test_four_turns_return_to_start(start: Orientation) -> None:
    left = right = start
    for _ in range(4):
        left = left.turn_left()
        right = right.turn_right()
    assert left is start
    assert right is start


@pytest.mark.parametrize("start", list(Orientation))
def test_left_and_right_are_inverses(start: Orientation) -> None:
    assert start.turn_left().turn_right() is start
    assert start.turn_right().turn_left() is start


def test_deltas() -> None:
    assert Orientation.N.delta == (0, 1)
    assert Orientation.E.delta == (1, 0)
    assert Orientation.S.delta == (0, -1)
    assert Orientation.W.delta == (-1, 0)


def test_instruction_from_letter() -> None:
    assert Instruction("M") is Instruction.M
    with pytest.raises(ValueError):
        Instruction("X")
