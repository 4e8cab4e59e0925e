# engine/render.py

"""Drawing plumbing between the game state and a rendering surface.

Coordinates passed to a surface are in grid units (1 unit = 1 cell); the
surface is expected to scale them to pixels.
"""

import math
from typing import Optional, Protocol, Sequence

from world import CameraPlane, Level, Player, Vector2

from .config import GridcasterConfig
from .frame import GameState

GRID_COLOR = "green"
GRID_LINE_WIDTH = 0.01
PLAYER_COLOR = "red"
PLAYER_RADIUS = 0.1
FACING_LENGTH = 0.25
FACING_LINE_WIDTH = 0.05
CAMERA_PLANE_COLOR = "pink"
CAMERA_PLANE_LINE_WIDTH = 0.05

EMPTY_GLYPH = "."
PLANE_GLYPH = "*"


class Surface(Protocol):
    """Minimal 2D drawing target."""

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def stroke_path(self, points: Sequence[Vector2], color: str, line_width: float) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None: ...

    def fill_circle(self, center: Vector2, radius: float, color: str) -> None: ...


def surface_scale(config: GridcasterConfig, level: Level) -> tuple[float, float]:
    """Pixels per grid unit along x and y for the configured resolution.

    A surface applies this scale once so every draw call can use grid units.

    Raises:
        ValueError: If the level has no cells
    """
    if level.width <= 0 or level.height <= 0:
        raise ValueError(f"Cannot scale a surface to an empty level {level!r}")
    return (
        config.resolution_width / level.width,
        config.resolution_height / level.height,
    )


def render_grid(surface: Surface, level: Level) -> None:
    for y in range(level.height):
        for x in range(level.width):
            surface.stroke_path(
                [
                    Vector2(x, y),
                    Vector2(x + 1, y),
                    Vector2(x + 1, y + 1),
                    Vector2(x, y + 1),
                    Vector2(x, y),
                ],
                GRID_COLOR,
                GRID_LINE_WIDTH,
            )


def render_level(surface: Surface, level: Level) -> None:
    for x, y, label in level.cells():
        surface.fill_rect(x, y, 1, 1, label)


def render_player(surface: Surface, player: Player) -> None:
    """Draw the player as a dot with a short stub along its facing."""
    surface.fill_circle(player.position, PLAYER_RADIUS, PLAYER_COLOR)
    surface.stroke_path(
        [player.position, player.position.add(player.direction.mult(FACING_LENGTH))],
        PLAYER_COLOR,
        FACING_LINE_WIDTH,
    )


def render_camera_plane(surface: Surface, camera_plane: CameraPlane) -> None:
    surface.stroke_path(
        [camera_plane.left, camera_plane.right],
        CAMERA_PLANE_COLOR,
        CAMERA_PLANE_LINE_WIDTH,
    )


def render_frame(surface: Surface, state: GameState) -> None:
    """Clear the surface and draw grid, tiles, player and camera plane."""
    surface.clear_rect(0, 0, state.level.width, state.level.height)
    render_grid(surface, state.level)
    render_level(surface, state.level)
    render_player(surface, state.player)
    render_camera_plane(surface, state.camera_plane)


def facing_glyph(direction: Vector2) -> str:
    if direction.x == 0 and direction.y == 0:
        return "@"
    if abs(direction.x) >= abs(direction.y):
        return ">" if direction.x > 0 else "<"
    return "v" if direction.y > 0 else "^"


def _cell_of(point: Vector2, level: Level) -> Optional[tuple[int, int]]:
    x = math.floor(point.x)
    y = math.floor(point.y)
    # The far edge belongs to the last cell
    if x == level.width:
        x -= 1
    if y == level.height:
        y -= 1
    if 0 <= x < level.width and 0 <= y < level.height:
        return x, y
    return None


def render_ascii_map(state: GameState) -> list[str]:
    """Top-down text map, one character per cell.

    Tiles show the first letter of their label, empty cells ``.``, the
    camera plane endpoints ``*`` and the player its facing glyph.
    """
    level = state.level
    rows = [[EMPTY_GLYPH] * level.width for _ in range(level.height)]
    for x, y, label in level.cells():
        rows[y][x] = label[:1] or "?"

    for endpoint in (state.camera_plane.left, state.camera_plane.right):
        cell = _cell_of(endpoint, level)
        if cell is not None and rows[cell[1]][cell[0]] == EMPTY_GLYPH:
            rows[cell[1]][cell[0]] = PLANE_GLYPH

    cell = _cell_of(state.player.position, level)
    if cell is not None:
        rows[cell[1]][cell[0]] = facing_glyph(state.player.direction)

    return ["".join(row) for row in rows]


class AsciiRenderer:
    """Frame-loop renderer that keeps the most recent text map."""

    def __init__(self):
        self.frame: list[str] = []
        self.frames_rendered = 0

    def __call__(self, state: GameState) -> None:
        self.frame = render_ascii_map(state)
        self.frames_rendered += 1

    def __str__(self) -> str:
        return "\n".join(self.frame)
