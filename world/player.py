# world/player.py

"""Player kinematic model."""

from typing import TYPE_CHECKING, Optional

from .vector import Vector2

if TYPE_CHECKING:
    from engine.input import InputIntent

    from .level import Level

# Grid units travelled per tick along each held axis
PLAYER_SPEED = 0.03


class Player:
    """Position, facing and per-tick velocity of the player.

    The player:
    - Accumulates held directions into its facing and keeps it unit length
    - Moves a fixed step per held direction each tick (diagonals move
      ``speed * sqrt(2)``)
    - Stays inside ``[0, level.width] x [0, level.height]``
    """

    def __init__(
        self,
        level: "Level",
        position: Vector2,
        direction: Optional[Vector2] = None,
        velocity: Optional[Vector2] = None,
        speed: float = PLAYER_SPEED,
    ):
        """Initialize player.

        Args:
            level: Level used for the movement bounds (not owned)
            position: Starting position in grid units
            direction: Starting facing; normalized here
            velocity: Initial per-tick velocity, zero by default
            speed: Step added per held direction each tick
        """
        self._level = level
        self.position = position
        self.direction = (direction or Vector2.zero()).normalize()
        self.velocity = velocity or Vector2.zero()
        self.speed = speed

    @property
    def level(self) -> "Level":
        return self._level

    def update(self, intent: "InputIntent") -> None:
        """Advance the player by one tick.

        Args:
            intent: Directional controls currently held
        """
        dx = 0.0
        dy = 0.0
        if intent.up:
            dy -= 1
        if intent.down:
            dy += 1
        if intent.left:
            dx -= 1
        if intent.right:
            dx += 1

        # Facing accumulates on top of the previous tick's facing
        self.direction = self.direction.add(Vector2(dx, dy)).normalize()

        self.velocity = self.velocity.add(Vector2(dx, dy).mult(self.speed))

        self.position = self.position.add(self.velocity).clamp(
            0, self._level.width, 0, self._level.height
        )
        self.velocity = Vector2.zero()

    def __repr__(self) -> str:
        return (
            f"Player(position=({self.position.x:.3f}, {self.position.y:.3f}), "
            f"direction=({self.direction.x:.3f}, {self.direction.y:.3f}))"
        )
