from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pygame

from .orientation import Orientation
from .plateau import Plateau
from .rover import Rover


Color = Tuple[int, int, int]

THEME = {
    "bg": (18, 22, 32),
    "grid": (45, 52, 70),
    "occupied": (28, 34, 48),
    "rover_fill": (100, 220, 255),
    "rover_active": (0, 230, 180),
    "rover_outline": (40, 140, 200),
    "rover_arrow": (140, 240, 255),
    "trail": (60, 160, 200),
    "hud_bg": (28, 34, 48),
    "hud_border": (55, 65, 88),
    "hud_text": (200, 220, 255),
}

# Screen-space heading vectors; screen y grows downward
_ARROW = {
    Orientation.N: (0.0, -1.0),
    Orientation.E: (1.0, 0.0),
    Orientation.S: (0.0, 1.0),
    Orientation.W: (-1.0, 0.0),
}


class PygameRenderer:
    """Top-down view of the plateau grid and the rovers landed on it.

    Coordinates:
    - Cell (0,0) is drawn at the bottom-left of the window.
    - Y axis is flipped so that plateau +y is up while screen y increases downward.
    """

    def __init__(self, plateau: Plateau, cell_size: int = 80, show_trail: bool = True) -> None:
        pygame.init()
        pygame.display.set_caption("Plateau Rover Mission")
        self.plateau = plateau
        self.cell_size = cell_size
        self.cols = plateau.width + 1
        self.rows = plateau.height + 1
        self.window_width = self.cols * cell_size
        self.window_height = self.rows * cell_size
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        self.clock = pygame.time.Clock()

        self.show_trail = show_trail
        self.trails: Dict[str, List[Tuple[int, int]]] = {}

    # ------------------------------------------------------------------
    # Coordinate transforms
    # ------------------------------------------------------------------
    def _cell_center(self, x: int, y: int) -> Tuple[int, int]:
        """Screen pixel at the center of grid cell (x, y)."""
        sx = int((x + 0.5) * self.cell_size)
        sy = int(self.window_height - (y + 0.5) * self.cell_size)
        return sx, sy

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _draw_grid(self) -> None:
        occupancy = self.plateau.occupancy_grid()
        for y in range(self.rows):
            for x in range(self.cols):
                left = x * self.cell_size
                top = self.window_height - (y + 1) * self.cell_size
                rect = pygame.Rect(left, top, self.cell_size, self.cell_size)
                if occupancy[y, x]:
                    pygame.draw.rect(self.screen, THEME["occupied"], rect)
                pygame.draw.rect(self.screen, THEME["grid"], rect, 1)

    def draw(self, active: Optional[Rover] = None, message: str = "") -> None:
        """Render one frame; ``active`` is highlighted."""
        self.screen.fill(THEME["bg"])
        self._draw_grid()

        for rover in self.plateau.rovers:
            if rover.position is None:
                continue
            trail = self.trails.setdefault(rover.name, [])
            if not trail or trail[-1] != (rover.position.x, rover.position.y):
                trail.append((rover.position.x, rover.position.y))
            if self.show_trail and len(trail) >= 2:
                pts = [self._cell_center(px, py) for px, py in trail]
                pygame.draw.lines(self.screen, THEME["trail"], False, pts, 2)

        for rover in self.plateau.rovers:
            self._draw_rover(rover, rover is active)

        self._draw_hud(message)
        pygame.display.flip()

    def _draw_rover(self, rover: Rover, active: bool) -> None:
        if rover.position is None or rover.orientation is None:
            return
        center = self._cell_center(rover.position.x, rover.position.y)
        radius_px = max(2, int(self.cell_size * 0.3))
        fill = THEME["rover_active"] if active else THEME["rover_fill"]
        pygame.draw.circle(self.screen, fill, center, radius_px, 0)
        pygame.draw.circle(self.screen, THEME["rover_outline"], center, radius_px, 2)

        # Heading arrowhead
        ux, uy = _ARROW[rover.orientation]
        px, py = -uy, ux
        tip = (center[0] + ux * radius_px * 1.4, center[1] + uy * radius_px * 1.4)
        base = (center[0] + ux * radius_px * 0.6, center[1] + uy * radius_px * 0.6)
        wing = radius_px * 0.5
        tri = [
            tip,
            (base[0] + px * wing, base[1] + py * wing),
            (base[0] - px * wing, base[1] - py * wing),
        ]
        pygame.draw.polygon(self.screen, THEME["rover_arrow"], tri)
        pygame.draw.polygon(self.screen, THEME["rover_outline"], tri, 1)

    def _draw_hud(self, message: str) -> None:
        if not message:
            return
        pad = 10
        font = pygame.font.SysFont("monospace", 13)
        surf = font.render(f"  {message}  ", True, THEME["hud_text"])
        r = surf.get_rect(topleft=(pad, pad))
        panel = r.inflate(pad, pad)
        pygame.draw.rect(self.screen, THEME["hud_bg"], panel)
        pygame.draw.rect(self.screen, THEME["hud_border"], panel, 1)
        self.screen.blit(surf, (panel.x + 4, panel.y + 4))

    def tick(self, target_fps: int) -> float:
        """Cap frame rate and return achieved FPS."""
        fps = self.clock.get_fps()
        self.clock.tick(target_fps)
        return fps

    def close(self) -> None:
        pygame.quit()
