from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from plateau_sim.mission import MissionConfig, RoverResult, load_mission, run_mission
from plateau_sim.orientation import Instruction
from plateau_sim.rover import Rover
from telemetry.logger import TelemetryLogger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Land and navigate rovers on a plateau.")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/mission.yaml",
        help="Path to mission YAML config.",
    )
    parser.add_argument(
        "--telemetry",
        type=str,
        default=None,
        help="JSONL telemetry path (overrides the config's telemetry.path).",
    )
    parser.add_argument(
        "--no-telemetry",
        action="store_true",
        help="Do not write a telemetry log.",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Show the mission in a pygame window.",
    )
    return parser.parse_args(argv)


def _run(cfg: MissionConfig, telemetry: Optional[TelemetryLogger], render: bool) -> List[RoverResult]:
    if not render:
        _, results = run_mission(cfg, telemetry=telemetry)
        return results

    # Imported lazily so headless runs never initialize pygame
    from plateau_sim.plateau import Plateau
    from plateau_sim.render import PygameRenderer

    fps = int(cfg.render.get("fps", 4))
    plateau = Plateau(width=cfg.width, height=cfg.height)
    renderer = PygameRenderer(
        plateau=plateau,
        cell_size=int(cfg.render.get("cell_size", 80)),
        show_trail=bool(cfg.render.get("show_trail", True)),
    )

    def on_step(rover: Rover, instruction: Instruction) -> None:
        renderer.draw(active=rover, message=f"{rover.name} {instruction.value} -> {rover.get_status()}")
        renderer.tick(fps)

    try:
        _, results = run_mission(cfg, telemetry=telemetry, on_step=on_step, plateau=plateau)
        renderer.draw(message="Mission complete")
        renderer.tick(fps)
    finally:
        renderer.close()
    return results


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = load_mission(args.config)

    telemetry_path = args.telemetry or cfg.telemetry_path
    telemetry = None
    if telemetry_path and not args.no_telemetry:
        telemetry = TelemetryLogger(telemetry_path)

    render = args.render or bool(cfg.render.get("enabled", False))
    try:
        results = _run(cfg, telemetry, render)
    finally:
        if telemetry is not None:
            telemetry.close()

    failed = False
    for result in results:
        if result.ok:
            print(result.status)
        else:
            failed = True
            print(f"ERROR: {result.error}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
