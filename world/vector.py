# world/vector.py

"""Two-dimensional vector math for positions, directions and velocities."""

import math
from dataclasses import dataclass
from typing import Iterator

from engine.exceptions import VectorDivisionByZeroError


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector.

    Every operation returns a new vector, including ``normalize``. Holders that
    want the result reassign it (``self.direction = self.direction.normalize()``).
    """

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2":
        """Create a vector with coordinates (0, 0)."""
        return cls(0.0, 0.0)

    def add(self, other: "Vector2") -> "Vector2":
        """Element-wise addition."""
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        """Element-wise subtraction."""
        return Vector2(self.x - other.x, self.y - other.y)

    def mult(self, scalar: float) -> "Vector2":
        """Multiply both components by a scalar."""
        return Vector2(self.x * scalar, self.y * scalar)

    def div(self, scalar: float) -> "Vector2":
        """Divide both components by a scalar.

        Raises:
            VectorDivisionByZeroError: If scalar is exactly zero
        """
        if scalar == 0:
            raise VectorDivisionByZeroError(f"Cannot divide {self!r} by zero")
        return Vector2(self.x / scalar, self.y / scalar)

    def magnitude(self) -> float:
        """Euclidean length, i.e. the distance from the origin to this point."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> "Vector2":
        """Return a unit vector pointing the same way.

        A zero vector has no direction and is returned unchanged instead of
        producing NaN components.
        """
        magnitude = self.magnitude()
        if magnitude > 0:
            return Vector2(self.x / magnitude, self.y / magnitude)
        return self

    def clamp(self, x_min: float, x_max: float, y_min: float, y_max: float) -> "Vector2":
        """Clamp each axis independently into its closed interval."""
        return Vector2(
            min(max(self.x, x_min), x_max),
            min(max(self.y, y_min), y_max),
        )

    def dot_product(self, other: "Vector2") -> float:
        """Dot product.

        For unit vectors the result is close to 1 when both point the same
        way, close to -1 when opposed and 0 when perpendicular.
        """
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: "Vector2") -> float:
        """Euclidean distance between two points."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def rotate90(self) -> "Vector2":
        """Rotate by 90 degrees: (x, y) -> (-y, x)."""
        return Vector2(-self.y, self.x)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.mult(scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.div(scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)
