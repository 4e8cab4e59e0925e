# world/camera.py

"""Camera plane derived from the player's facing."""

from typing import TYPE_CHECKING

from .vector import Vector2

if TYPE_CHECKING:
    from .player import Player


class CameraPlane:
    """Field-of-view segment perpendicular to the player's facing.

    The segment is centred one unit ahead of the player. A perspective
    projector casts one ray from the player's position through each point of
    ``[left, right]``; ``column_points`` gives those points.
    """

    def __init__(self, half_width: float = 0.5):
        """Initialize an empty plane.

        Args:
            half_width: Distance from center to each endpoint
        """
        self.half_width = half_width
        self.direction = Vector2.zero()
        self.center = Vector2.zero()
        self.left = Vector2.zero()
        self.right = Vector2.zero()

    def update(self, player: "Player") -> None:
        """Recompute the plane from the player's current position and facing."""
        self.direction = player.direction.rotate90().normalize().mult(self.half_width)
        self.center = player.position.add(player.direction)
        self.left = self.center.sub(self.direction)
        self.right = self.center.add(self.direction)

    def column_points(self, columns: int) -> list[Vector2]:
        """Evenly spaced points from left to right, one per projection column.

        Args:
            columns: Number of output columns

        Returns:
            ``columns`` points including both endpoints; a single column
            samples the center

        Raises:
            ValueError: If columns is less than 1
        """
        if columns < 1:
            raise ValueError(f"columns must be at least 1, got {columns}")
        if columns == 1:
            return [self.center]

        span = self.right.sub(self.left)
        last = columns - 1
        return [self.left.add(span.mult(i / last)) for i in range(columns)]

    def __repr__(self) -> str:
        return (
            f"CameraPlane(center=({self.center.x:.3f}, {self.center.y:.3f}), "
            f"left=({self.left.x:.3f}, {self.left.y:.3f}), "
            f"right=({self.right.x:.3f}, {self.right.y:.3f}))"
        )
