# world/__init__.py

"""Geometric core for GRIDCASTER - vectors, level grid, player and camera plane."""

from .camera import CameraPlane
from .level import DEMO_MAP, Level, TileLabel, demo_level
from .player import PLAYER_SPEED, Player
from .vector import Vector2

__all__ = [
    "Vector2",
    "Level",
    "TileLabel",
    "DEMO_MAP",
    "demo_level",
    "Player",
    "PLAYER_SPEED",
    "CameraPlane",
]
