"""
Mission loading and execution.

A mission is a plateau plus an ordered list of rovers. Rovers are landed and
navigated one at a time, so each rover sees the settled positions of every
rover processed before it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import yaml

from telemetry.logger import TelemetryLogger

from .errors import RoverError
from .geometry_utils import Point
from .orientation import Instruction, Orientation
from .plateau import Plateau
from .rover import Rover, RoverState, StepCallback

ON_ERROR_POLICIES = ("halt", "continue")


@dataclass
class RoverSpec:
    name: str
    landing: RoverState
    instructions: List[Instruction]

    def build(self) -> Rover:
        return Rover(name=self.name, landing=self.landing, instructions=self.instructions)


@dataclass
class MissionConfig:
    width: int
    height: int
    rovers: List[RoverSpec] = field(default_factory=list)
    on_error: str = "halt"
    telemetry_path: Optional[str] = None
    render: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RoverResult:
    """Outcome of one rover's landing and navigation."""

    name: str
    status: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def parse_instructions(text: str) -> List[Instruction]:
    """Split an instruction string such as ``"LMLMM"`` into symbols."""
    return [Instruction(ch) for ch in text.strip()]


def rover_spec_from_dict(data: Dict[str, Any]) -> RoverSpec:
    landing = data["landing"]
    return RoverSpec(
        name=str(data["name"]),
        landing=RoverState(
            position=Point(int(landing["x"]), int(landing["y"])),
            orientation=Orientation(str(landing["orientation"]).upper()),
        ),
        instructions=parse_instructions(str(data.get("instructions") or "")),
    )


def mission_from_dict(data: Dict[str, Any]) -> MissionConfig:
    """Build a MissionConfig from a parsed mission document."""
    plateau = Plateau.from_map_dict(data["plateau"])
    on_error = data.get("on_error", "halt")
    if on_error not in ON_ERROR_POLICIES:
        raise ValueError(f"on_error must be one of {ON_ERROR_POLICIES}, got {on_error!r}")
    telemetry_cfg = data.get("telemetry") or {}
    return MissionConfig(
        width=plateau.width,
        height=plateau.height,
        rovers=[rover_spec_from_dict(r) for r in data.get("rovers") or []],
        on_error=on_error,
        telemetry_path=telemetry_cfg.get("path"),
        render=dict(data.get("render") or {}),
    )


def load_mission(path: str) -> MissionConfig:
    """Load a mission YAML file."""
    return mission_from_dict(load_yaml(path))


def run_mission(
    config: MissionConfig,
    telemetry: Optional[TelemetryLogger] = None,
    on_step: Optional[StepCallback] = None,
    plateau: Optional[Plateau] = None,
) -> Tuple[Plateau, List[RoverResult]]:
    """Land and navigate every rover of the mission in order.

    A RoverError is logged and recorded in the failing rover's result.
    With ``on_error="halt"`` the remaining rovers are then skipped, so the
    results end at the failing rover. With ``on_error="continue"`` the next
    rover proceeds. A caller-supplied ``plateau`` is used as-is; otherwise
    an empty one is built from the config bounds.
    """
    if plateau is None:
        plateau = Plateau(width=config.width, height=config.height)
    results: List[RoverResult] = []

    def _step(rover: Rover, instruction: Instruction) -> None:
        if telemetry is not None:
            telemetry.log_event("step", rover=rover.name, instruction=instruction.value, **_pose(rover))
        if on_step is not None:
            on_step(rover, instruction)

    for spec in config.rovers:
        rover = spec.build()
        try:
            rover.land_on(plateau)
            if telemetry is not None:
                telemetry.log_event("land", rover=rover.name, **_pose(rover))
            status = rover.navigate_on(plateau, on_step=_step)
        except RoverError as exc:
            if telemetry is not None:
                telemetry.log_event(
                    "error",
                    rover=rover.name,
                    error=type(exc).__name__,
                    message=str(exc),
                    **_pose(rover),
                )
            results.append(RoverResult(name=rover.name, status=rover.get_status(), error=str(exc)))
            if config.on_error == "halt":
                break
            continue

        if telemetry is not None:
            telemetry.log_event("status", rover=rover.name, status=status, **_pose(rover))
        results.append(RoverResult(name=rover.name, status=status))

    return plateau, results


def _pose(rover: Rover) -> Dict[str, Any]:
    data = rover.to_dict()
    data.pop("name")
    return data
