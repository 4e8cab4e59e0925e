# engine/frame.py

from dataclasses import dataclass
from typing import Optional

from world import CameraPlane, Level, Player, Vector2, demo_level

from .config import GridcasterConfig
from .input import InputIntent
from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class GameState:
    """Everything one tick reads and updates."""

    level: Level
    player: Player
    camera_plane: CameraPlane


def create_game_state(
    config: Optional[GridcasterConfig] = None,
    level: Optional[Level] = None,
) -> GameState:
    """Build the starting state: player facing up, camera plane in sync.

    Args:
        config: Settings for speed, start position and plane width
        level: Level to play on, the demo level by default
    """
    config = config or GridcasterConfig()
    level = level or demo_level()

    player = Player(
        level,
        position=Vector2(config.start_x, config.start_y),
        direction=Vector2(0.0, -1.0),
        speed=config.player_speed,
    )
    camera_plane = CameraPlane(half_width=config.camera_half_width)
    camera_plane.update(player)

    logger.info(
        "game_state.created",
        level_width=level.width,
        level_height=level.height,
        start=player.position,
    )
    return GameState(level=level, player=player, camera_plane=camera_plane)


def tick(state: GameState, intent: InputIntent) -> GameState:
    """Run one frame of simulation: move the player, then re-derive the camera."""
    state.player.update(intent)
    state.camera_plane.update(state.player)
    return state
