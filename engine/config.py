# engine/config.py

from pydantic_settings import BaseSettings


class GridcasterConfig(BaseSettings):
    """Configuration for the GRIDCASTER prototype."""

    # Display
    resolution_width: int = 300
    resolution_height: int = 200

    # Player
    player_speed: float = 0.03  # Grid units per tick
    start_x: float = 2.5
    start_y: float = 6.5

    # Camera
    camera_half_width: float = 0.5

    # Frame loop
    target_fps: int = 60

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "GRIDCASTER_"


# Global config instance
config = GridcasterConfig()
